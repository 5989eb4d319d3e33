"""
Character classes shared by the english lexer and the normalizer.

Each family of glyphs is kept as a mapping from the glyph (or html entity)
to its canonical replacement, so that the normalizer can build its rewrite
tables directly from them and the lexer can build its character classes
from their keys. Everything here is built once, at import time.
"""

import re

NEWLINE_CHARACTERS = "\n\r\u0085\u2028\u2029"

# Joins the parts of a word, as in "O'Neill" or the "n't" of "don't".
APOSTROPHE_CHARACTERS = "'’`"

# Joins the segments of a dashed word such as "ethno-centric".
HYPHEN_CHARACTERS = "-‐‑"

SENTENCE_FINAL_CHARACTERS = ".!?…"

DOUBLE_QUOTES = frozenset(
    [
        '"',
        "``",
        "''",
        "“",  # left double quotation mark
        "”",  # right double quotation mark
        "„",  # double low-9 quotation mark
        "‟",  # double high-reversed-9 quotation mark
        "«",  # left-pointing double angle quotation mark
        "»",  # right-pointing double angle quotation mark
        "❝",
        "❞",
        "〝",
        "〞",
        "＂",  # fullwidth quotation mark
        "&quot;",
        "&ldquo;",
        "&rdquo;",
        "&bdquo;",
        "&laquo;",
        "&raquo;",
    ]
)

APOSTROPHES = {
    "‘": "'",  # left single quotation mark
    "’": "'",  # right single quotation mark
    "‚": "'",  # single low-9 quotation mark
    "‛": "'",
    "`": "'",
    "´": "'",  # acute accent
    "′": "'",  # prime
    "＇": "'",  # fullwidth apostrophe
}

APOSTROPHE_ENTITIES = {
    "&apos;": "'",
    "&lsquo;": "'",
    "&rsquo;": "'",
    "&sbquo;": "'",
}

CENTS = "cents"

CURRENCY_SYMBOLS = {
    "¢": CENTS,  # cent sign
    "£": "$",  # pound sign
    "¤": "$",  # generic currency sign
    "¥": "$",  # yen sign
    **{chr(code): "$" for code in range(0x20A0, 0x20C1)},  # currency symbols block
    "﷼": "$",  # rial sign
    "＄": "$",  # fullwidth dollar sign
    "￠": CENTS,  # fullwidth cent sign
    "￡": "$",  # fullwidth pound sign
    "￥": "$",  # fullwidth yen sign
}

CURRENCY_ENTITIES = {
    "&cent;": CENTS,
    "&pound;": "$",
    "&euro;": "$",
    "&yen;": "$",
    "&curren;": "$",
}

PREFIXED_DOLLARS = ("US$", "C$", "A$", "HK$", "NZ$", "S$", "NT$", "R$")

CURRENCY_CODES = (
    "USD",
    "EUR",
    "GBP",
    "JPY",
    "CNY",
    "RMB",
    "CAD",
    "AUD",
    "NZD",
    "CHF",
    "HKD",
    "SGD",
    "INR",
    "KRW",
    "KPW",
    "RUB",
    "BRL",
    "MXN",
    "SEK",
    "NOK",
    "DKK",
    "ZAR",
)

AMPERSANDS = {
    "＆": "&",  # fullwidth ampersand
    "﹠": "&",  # small ampersand
}

AMPERSAND_ENTITIES = {
    "&amp;": "&",
    "&AMP;": "&",
}

FRACTIONS = {
    "¼": "1/4",
    "½": "1/2",
    "¾": "3/4",
    "⅐": "1/7",
    "⅑": "1/9",
    "⅒": "1/10",
    "⅓": "1/3",
    "⅔": "2/3",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
    "↉": "0/3",
}

FRACTION_ENTITIES = {
    "&frac12;": "1/2",
    "&frac14;": "1/4",
    "&frac34;": "3/4",
    "&frac13;": "1/3",
    "&frac23;": "2/3",
    "&frac15;": "1/5",
    "&frac25;": "2/5",
    "&frac35;": "3/5",
    "&frac45;": "4/5",
    "&frac16;": "1/6",
    "&frac56;": "5/6",
    "&frac18;": "1/8",
    "&frac38;": "3/8",
    "&frac58;": "5/8",
    "&frac78;": "7/8",
}

ELLIPSES = {"…": "..."}

ELLIPSIS_ENTITIES = {"&hellip;": "..."}

EM_DASHES = {
    "—": "--",  # em dash
    "―": "--",  # horizontal bar
    "⸺": "--",  # two-em dash
    "⸻": "--",  # three-em dash
    "\u0097": "--",  # em dash in windows-1252 decoded as latin-1
}

EM_DASH_ENTITIES = {
    "&mdash;": "--",
    "&horbar;": "--",
}

DASHES = {
    "‐": "-",  # hyphen
    "‑": "-",  # non-breaking hyphen
    "‒": "-",  # figure dash
    "–": "-",  # en dash
    "⁃": "-",  # hyphen bullet
    "−": "-",  # minus sign
    "\u0096": "-",  # en dash in windows-1252 decoded as latin-1
    "﹘": "-",
    "﹣": "-",
    "－": "-",  # fullwidth hyphen-minus
}

DASH_ENTITIES = {
    "&ndash;": "-",
    "&minus;": "-",
    "&hyphen;": "-",
    "&dash;": "-",
}

PENN_BRACKET_CODES = {
    "-LRB-": "(",
    "-RRB-": ")",
    "-LCB-": "{",
    "-RCB-": "}",
    "-LSB-": "[",
    "-RSB-": "]",
}

ESCAPED_SLASH = "\\/"
ESCAPED_ASTERISK = "\\*"

# Kept together with their period. Matched without regard to case.
ABBREVIATIONS = (
    "Mr.",
    "Mrs.",
    "Ms.",
    "Messrs.",
    "Dr.",
    "Prof.",
    "Sr.",
    "Jr.",
    "St.",
    "Mt.",
    "Ft.",
    "Gen.",
    "Gov.",
    "Sen.",
    "Rep.",
    "Rev.",
    "Capt.",
    "Col.",
    "Lt.",
    "Sgt.",
    "Inc.",
    "Corp.",
    "Co.",
    "Ltd.",
    "Bros.",
    "vs.",
    "etc.",
    "approx.",
    "Ave.",
    "Blvd.",
    "Dept.",
    "Univ.",
    "Jan.",
    "Feb.",
    "Mar.",
    "Apr.",
    "Jun.",
    "Jul.",
    "Aug.",
    "Sep.",
    "Sept.",
    "Oct.",
    "Nov.",
    "Dec.",
    "Ph.D.",
    "e.g.",
    "i.e.",
    "a.m.",
    "p.m.",
)


def character_class(characters):
    """
    :returns: A regular expression character class matching any of the
        given characters.
    """
    return "[" + "".join(re.escape(c) for c in characters) + "]"


def alternation(words):
    """
    :returns: A regular expression matching any of the given words, longest
        words tried first.
    """
    return "(?:" + "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True)) + ")"


# Vulgar fractions are numeric to the re module, but always stand alone.
ALPHANUMERIC = r"[^\W_" + "".join(FRACTIONS) + "]"
APOSTROPHE = character_class(APOSTROPHE_CHARACTERS)
HYPHEN = character_class(HYPHEN_CHARACTERS)
ACCENT_ENTITY = (
    r"&(?:[A-Za-z](?:acute|grave|uml|circ|tilde|cedil|ring|slash|caron)"
    r"|AElig|aelig|OElig|oelig|szlig|ETH|eth|THORN|thorn);"
)
WORD_CHARACTER = rf"(?:{ALPHANUMERIC}|{ACCENT_ENTITY})"
WORD_SEGMENT = rf"{WORD_CHARACTER}+(?:{APOSTROPHE}{WORD_CHARACTER}+)*"
SLASHED_WORD = rf"{WORD_SEGMENT}(?:\\/{WORD_SEGMENT})*"
CONTRACTION_SUFFIX = rf"(?:n{APOSTROPHE}t|{APOSTROPHE}(?:s|d|m|ll|re|ve))"
CURRENCY_CODE = alternation(CURRENCY_CODES)

SGML_TAG = re.compile(r"<!--.*?-->|<[/!?]?[A-Za-z][^<>]*>", re.DOTALL)
URL = re.compile(
    r"(?:(?:https?|ftp)://|www\.)[^\s<>\"]*[^\s<>\".,;:!?'\)\]\}’”]",
    re.IGNORECASE,
)
EMAIL = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}")
HTML_ENTITY = re.compile(r"&(?:#[0-9]{1,7}|#[xX][0-9A-Fa-f]{1,6}|[A-Za-z][A-Za-z0-9]{1,31});")
ACCENTED_LETTER = re.compile(ACCENT_ENTITY)
PENN_BRACKET_CODE = re.compile(alternation(PENN_BRACKET_CODES), re.IGNORECASE)
ABBREVIATION = re.compile(alternation(ABBREVIATIONS) + rf"(?!{ALPHANUMERIC})", re.IGNORECASE)
INITIALISM = re.compile(rf"[A-Za-z](?:\.[A-Za-z])+(?:\.|(?!{ALPHANUMERIC}))")
CAPITAL_INITIAL = re.compile(r"[A-Z]\.(?=[ \t]+[A-Z])")
COMPANY = re.compile(rf"[A-Z]+(?:&amp;|&)[A-Z]+(?!{ALPHANUMERIC})")
DASHED_WORD = re.compile(rf"{SLASHED_WORD}(?:{HYPHEN}{SLASHED_WORD})*")
UNDASHED_WORD = re.compile(SLASHED_WORD)
CONTRACTION = re.compile(rf"{CONTRACTION_SUFFIX}(?!{ALPHANUMERIC})", re.IGNORECASE)
TRAILING_CONTRACTION = re.compile(rf"{CONTRACTION_SUFFIX}\Z", re.IGNORECASE)
NUMBER = re.compile(r"[0-9]+(?:[.,:/][0-9]+)*")
CURRENCY = re.compile(
    alternation(PREFIXED_DOLLARS) + "|" + character_class("$" + "".join(CURRENCY_SYMBOLS))
)
CURRENCY_CODE_BEFORE_AMOUNT = re.compile(rf"{CURRENCY_CODE}(?=[0-9])")
AMOUNT_BEFORE_CURRENCY_CODE = re.compile(rf"[0-9]+{CURRENCY_CODE}(?!{ALPHANUMERIC})")
FRACTION = re.compile(character_class(FRACTIONS))
DOUBLE_QUOTE_PAIR = re.compile(r"``|''")
DASH_RUN = re.compile(r"-{2,}")
ESCAPED = re.compile(r"(?:\\\*)+|\\/")
SPACED_ELLIPSIS = re.compile(r"\.(?: \.){2,}")
SENTENCE_FINAL = re.compile(character_class(SENTENCE_FINAL_CHARACTERS) + "+")
NEWLINE_RUN = re.compile(character_class(NEWLINE_CHARACTERS) + "+")
WHITESPACE_RUN = re.compile(r"[^\S" + "".join(re.escape(c) for c in NEWLINE_CHARACTERS) + "]+")
ANY_WHITESPACE = re.compile(r"\s+")
ANY_CHARACTER = re.compile(r".", re.DOTALL)


def splits_currency_amount(buffer, position):
    """
    True when the buffer at position holds a currency code glued to an amount,
    as in "USD1" or "2KPW". The code and the amount become separate lexemes,
    so no word may start there.
    """
    return bool(
        CURRENCY_CODE_BEFORE_AMOUNT.match(buffer, position)
        or AMOUNT_BEFORE_CURRENCY_CODE.match(buffer, position)
    )


def is_double_quote(text):
    return text in DOUBLE_QUOTES


def penn_bracket(text):
    """
    :returns: The bracket character for a Penn-Treebank bracket code such as
        "-LRB-" (in any case), or None if text is not a bracket code.
    """
    return PENN_BRACKET_CODES.get(text.upper())


def starts_lowercase(text):
    return text[:1].islower()
