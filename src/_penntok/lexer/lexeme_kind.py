from enum import Enum, auto, unique


@unique
class LexemeKind(Enum):
    SGML = auto()
    URL = auto()
    EMAIL = auto()
    HTML_ENTITY = auto()
    BRACKET_CODE = auto()
    ABBREVIATION = auto()
    INITIALISM = auto()
    COMPANY = auto()
    CONTRACTION = auto()
    WORD = auto()
    NUMBER = auto()
    CURRENCY = auto()
    FRACTION = auto()
    QUOTE = auto()
    DASH = auto()
    ESCAPED = auto()
    ELLIPSIS = auto()
    PUNCTUATION = auto()
    NEWLINE = auto()
    WHITESPACE = auto()
    SYMBOL = auto()
