import warnings
from dataclasses import dataclass, fields

# Options of the normalizer, all of them forced off when normalize is off.
NORMALIZATION_OPTIONS = (
    "normalize_quote",
    "normalize_apostrophe",
    "normalize_currency",
    "normalize_ampersand",
    "normalize_fractions",
    "normalize_ellipsis",
    "undo_penn_parens",
    "unescape_slash",
    "unescape_asterisk",
    "normalize_mdash",
    "normalize_dash",
    "normalize_html_symbol",
    "normalize_html_accent",
)

STRUCTURAL_OPTIONS = (
    "tokenize_sgml",
    "tokenize_newline",
    "tokenize_whitespace",
    "tokenize_all_dashed_words",
    "abbrev_precedes_lowercase",
)

CAMEL_CASE_OPTIONS = {
    "tokenizeSgml": "tokenize_sgml",
    "tokenizeNewline": "tokenize_newline",
    "tokenizeWhitespace": "tokenize_whitespace",
    "tokenizeAllDashedWords": "tokenize_all_dashed_words",
    "abbrevPrecedesLowercase": "abbrev_precedes_lowercase",
    "normalize": "normalize",
    "normalizeQuote": "normalize_quote",
    "normalizeApostrophe": "normalize_apostrophe",
    "normalizeCurrency": "normalize_currency",
    "normalizeAmpersand": "normalize_ampersand",
    "normalizeFractions": "normalize_fractions",
    "normalizeEllipsis": "normalize_ellipsis",
    "undoPennParens": "undo_penn_parens",
    "unescapeSlash": "unescape_slash",
    "unescapeAsterisk": "unescape_asterisk",
    "normalizeMDash": "normalize_mdash",
    "normalizeDash": "normalize_dash",
    "normalizeHtmlSymbol": "normalize_html_symbol",
    "normalizeHtmlAccent": "normalize_html_accent",
}


@dataclass(frozen=True)
class Configuration:
    """
    The options of a tokenizer, fixed for its lifetime.

    Aims to adhere to tokenization rules used in Ontonotes and Penn Treebank.
    Note that CoNLL tokenization would use tokenize_all_dashed_words=True.

    If normalize is False, all normalization options are forced to False,
    regardless of what was given:

    >>> Configuration(normalize=False, normalize_quote=True).normalize_quote
    False

    """

    tokenize_sgml: bool = False  # Keep sgml/html tags as tokens
    tokenize_newline: bool = False  # Keep newlines as tokens
    tokenize_whitespace: bool = False  # Keep all whitespace, including newlines
    tokenize_all_dashed_words: bool = False  # "ethno-centric" -> ethno - centric
    abbrev_precedes_lowercase: bool = False  # "Abbrev. has" -> Abbrev. has
    normalize: bool = True
    normalize_quote: bool = True  # All double quotes to "
    normalize_apostrophe: bool = True  # All apostrophes to ', even within tokens
    normalize_currency: bool = True  # Currency symbols to $, cents sign to "cents"
    normalize_ampersand: bool = True  # &amp; and ampersand glyphs to &
    normalize_fractions: bool = True  # Unicode fractions to "3/4"
    normalize_ellipsis: bool = True  # Unicode ellipsis to "..."
    undo_penn_parens: bool = True  # -LRB- to ( etc.
    unescape_slash: bool = True  # \/ to /
    unescape_asterisk: bool = True  # \* to *
    normalize_mdash: bool = True  # Em-dashes to --
    normalize_dash: bool = True  # Other dashes to -
    normalize_html_symbol: bool = True  # &lt; to < etc.
    normalize_html_accent: bool = True  # Beyonc&eacute; to Beyoncé

    def __post_init__(self):
        for option in fields(self):
            value = getattr(self, option.name)
            if not isinstance(value, bool):
                raise ValueError(f"Option {option.name} has to be a bool, got {value!r}")
        if not self.normalize:
            for option in NORMALIZATION_OPTIONS:
                object.__setattr__(self, option, False)

    @classmethod
    def lexing(cls, **options):
        """
        Configuration which only tokenizes and does not normalize anything.
        """
        return cls(
            **{
                **{option: False for option in STRUCTURAL_OPTIONS},
                **{option: False for option in NORMALIZATION_OPTIONS},
                "normalize": False,
                **options,
            }
        )

    @classmethod
    def normalizing(cls, **options):
        """
        Configuration which normalizes token strings while it tokenizes,
        you probably want to use this one.
        """
        return cls(
            **{
                **{option: False for option in STRUCTURAL_OPTIONS},
                **{option: True for option in NORMALIZATION_OPTIONS},
                "normalize": True,
                **options,
            }
        )

    @classmethod
    def from_dict(cls, options):
        """
        Create a Configuration from a dictionary of options. Both the option
        names of Configuration and their camel case spelling
        ("tokenizeAllDashedWords") are accepted. Unknown options are ignored
        with a warning.

        >>> Configuration.from_dict({"undoPennParens": False}).undo_penn_parens
        False

        """
        known = {option.name for option in fields(cls)}
        result = {}
        for key, value in options.items():
            name = CAMEL_CASE_OPTIONS.get(key, key)
            if name not in known:
                warnings.warn(f"Ignoring unknown tokenizer option {key!r}", stacklevel=2)
                continue
            result[name] = value
        return cls(**result)

    @property
    def normalizes_anything(self):
        return any(getattr(self, option) for option in NORMALIZATION_OPTIONS)
