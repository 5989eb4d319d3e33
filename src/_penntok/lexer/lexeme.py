from dataclasses import dataclass

from _penntok.lexer.lexeme_kind import LexemeKind


@dataclass
class Lexeme:
    """
    A raw span matched by the english lexer, before it becomes a token
    of a section.
    """

    kind: LexemeKind
    start: int
    end: int

    @property
    def length(self):
        return self.end - self.start

    def get_value(self, stream):
        """
        :returns: The characters of the stream covered by the lexeme, ie.
            for a lexeme with kind=LexemeKind.WORD the string returned could
            be "Abbrev".
        """
        go_back = stream.tell()
        stream.seek(self.start)
        value = stream.read(self.end - self.start)
        stream.seek(go_back)
        return value
