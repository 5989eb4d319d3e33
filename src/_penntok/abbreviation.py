from _penntok.lexer.charclass import starts_lowercase


class AbbreviationCorrector:
    """
    Decides whether a period closes an abbreviation once the following
    lexeme is known. For text "Abbrev. has", the lexer yields "Abbrev", "."
    and "has". A period directly after a word and followed by a lowercase
    word is assumed to end an abbreviation, so before "has" is added the
    last two tokens of the section are replaced by a single "Abbrev." token.

    Only the last two tokens are ever looked at and at most one merge is done
    per lexeme. Chains such as "U.S." are left to the lexer.
    """

    def __init__(self, section, normalizer=None):
        """
        :param section: The section being tokenized.
        :param normalizer: Normalizer for the text of merged tokens, or None
            to not normalize them.
        """
        self.section = section
        self.normalizer = normalizer

    def applies_to(self, text):
        """
        :param text: The normalized (or raw, if unchanged) text of the lexeme
            about to be added.
        :returns: True if the last two tokens should be merged before the
            lexeme is added.
        """
        if len(self.section) < 2 or not starts_lowercase(text):
            return False
        previous, last = self.section.last(2)
        return last.string == "." and previous.end == last.start

    def correct(self, text):
        """
        Merge the last two tokens of the section if applies_to(text).

        :returns: The merged token, or None if nothing was merged.
        """
        if not self.applies_to(text):
            return None
        previous, last = self.section.last(2)
        self.section.remove_last()
        self.section.remove_last()
        normalized = None
        if self.normalizer is not None:
            normalized = self.normalizer.normalize_if_changed(
                self.section.text[previous.start : last.end]
            )
        return self.section.append(previous.start, last.end, normalized)
