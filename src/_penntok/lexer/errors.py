class TokenizationError(Exception):
    """
    A lexer rule will throw a TokenizationError if its lexeme is not found at
    the current position of the stream (however, it could be that any other
    rule matches at that position). The stream is wound back to where the
    rule started before the error is raised.
    """

    pass
