class SectionStateError(Exception):
    """
    Raised when tokenizing a section that already holds tokens. Clear the
    tokens of the section (Section.clear_tokens) before tokenizing it again.
    """

    pass


class TokenOrderError(Exception):
    """
    Raised when adding a token to a section would leave the tokens of the
    section out of order, overlapping or empty.
    """

    pass
