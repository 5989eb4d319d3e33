import io

import pytest
from hypothesis import given

from _penntok.configuration import Configuration
from _penntok.lexer import EnglishLexer, LexemeKind

from .generators.section_texts import configurations, section_texts


def lex(text, configuration=None):
    if configuration is None:
        configuration = Configuration.lexing()
    stream = io.StringIO(text + "\n")
    return [
        (lexeme.kind, lexeme.get_value(stream))
        for lexeme in EnglishLexer(stream, configuration)
    ]


def lex_values(text, **options):
    return [value for _, value in lex(text, Configuration.lexing(**options))]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("I paid $50 USD", ["I", "paid", "$", "50", "USD"]),
        (
            "A..B!!C??D.!?E.!?.!?F..!!??",
            ["A", "..", "B", "!!", "C", "??", "D", ".!?", "E", ".!?.!?", "F", "..!!??"],
        ),
        (
            "$1 E2 L3 USD1 2KPW ||$1 USD1..",
            ["$", "1", "E2", "L3", "USD", "1", "2", "KPW", "|", "|", "$", "1", "USD", "1", ".."],
        ),
        ("Washington D.C.... U.S..", ["Washington", "D.C.", "...", "U.S.", "."]),
        ("he'll go to hell we're", ["he", "'ll", "go", "to", "hell", "we", "'re"]),
        ("don't can't", ["do", "n't", "ca", "n't"]),
        ("He`s right", ["He", "`s", "right"]),
        ("O'Neill's", ["O'Neill", "'s"]),
        (
            "prof. ph.d. a. a.b. a.b a.b.c. men.cd ab.cd",
            [
                "prof.",
                "ph.d.",
                "a",
                ".",
                "a.b.",
                "a.b",
                "a.b.c.",
                "men",
                ".",
                "cd",
                "ab",
                ".",
                "cd",
            ],
        ),
        ("J. R. R. Tolkien", ["J.", "R.", "R.", "Tolkien"]),
        (
            "AT&T but don't grab LAT&Eacute; and PE&gym",
            ["AT&T", "but", "do", "n't", "grab", "LAT&Eacute;", "and", "PE", "&", "gym"],
        ),
        ("AT&amp;T", ["AT&amp;T"]),
        ("ethno-centric art-o-torium", ["ethno-centric", "art-o-torium"]),
        ("2012-04-05", ["2012-04-05"]),
        ("1,000.50 10:30 3/4", ["1,000.50", "10:30", "3/4"]),
        ("3½", ["3", "½"]),
        ("50¢ €50 US$5", ["50", "¢", "€", "50", "US$", "5"]),
        ("&amp; &ndash; &trade;", ["&amp;", "&ndash;", "&trade;"]),
        ("-LRB- word -rrb-", ["-LRB-", "word", "-rrb-"]),
        ("and\\/or \\*\\*", ["and\\/or", "\\*\\*"]),
        ("<p>Hello</p>", ["<", "p", ">", "Hello", "<", "/", "p", ">"]),
        ("``Hi,'' she said", ["``", "Hi", ",", "''", "she", "said"]),
        ("grab . . . some", ["grab", ". . .", "some"]),
        ("-- --- -", ["--", "---", "-"]),
        ("right…", ["right", "…"]),
        (
            " 1. Buy a new Chevrolet (37%-owned in the U.S..) . 15%",
            [
                "1",
                ".",
                "Buy",
                "a",
                "new",
                "Chevrolet",
                "(",
                "37",
                "%",
                "-",
                "owned",
                "in",
                "the",
                "U.S.",
                ".",
                ")",
                ".",
                "15",
                "%",
            ],
        ),
        (
            "see https://example.com/a?b=1. or mail me@example.org.",
            ["see", "https://example.com/a?b=1", ".", "or", "mail", "me@example.org", "."],
        ),
        ("", []),
        (" \t\n ", []),
    ],
)
def test_lex_values(text, expected):
    assert lex_values(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("ethno-centric", ["ethno", "-", "centric"]),
        ("art-o-torium", ["art", "-", "o", "-", "torium"]),
        ("and\\/or", ["and\\/or"]),
    ],
)
def test_tokenize_all_dashed_words(text, expected):
    assert lex_values(text, tokenize_all_dashed_words=True) == expected


def test_tokenize_sgml():
    assert lex_values("<p>Hello</p> <!-- a comment -->", tokenize_sgml=True) == [
        "<p>",
        "Hello",
        "</p>",
        "<!-- a comment -->",
    ]


def test_tokenize_whitespace_keeps_sentinel():
    assert lex_values("a  b\nc", tokenize_whitespace=True) == [
        "a",
        "  ",
        "b",
        "\n",
        "c",
        "\n",
    ]


def test_tokenize_newline_skips_other_whitespace():
    assert lex_values("a  b\n\nc", tokenize_newline=True) == [
        "a",
        "b",
        "\n\n",
        "c",
        "\n",
    ]


@pytest.mark.parametrize(
    "text, kinds",
    [
        (
            "I paid $50 USD",
            [
                LexemeKind.WORD,
                LexemeKind.WORD,
                LexemeKind.CURRENCY,
                LexemeKind.NUMBER,
                LexemeKind.WORD,
            ],
        ),
        ("USD1", [LexemeKind.CURRENCY, LexemeKind.NUMBER]),
        ("don't", [LexemeKind.WORD, LexemeKind.CONTRACTION]),
        ("Dr. U.S.", [LexemeKind.ABBREVIATION, LexemeKind.INITIALISM]),
        ("AT&T", [LexemeKind.COMPANY]),
        ("&eacute; &lt; caf&eacute;", [LexemeKind.HTML_ENTITY, LexemeKind.HTML_ENTITY, LexemeKind.WORD]),
        ("-LRB-", [LexemeKind.BRACKET_CODE]),
        ("⅔ ''", [LexemeKind.FRACTION, LexemeKind.QUOTE]),
        ("-- \\* . . .", [LexemeKind.DASH, LexemeKind.ESCAPED, LexemeKind.ELLIPSIS]),
        ("?! |", [LexemeKind.PUNCTUATION, LexemeKind.SYMBOL]),
        ("www.example.com me@example.org", [LexemeKind.URL, LexemeKind.EMAIL]),
    ],
)
def test_lexeme_kinds(text, kinds):
    assert [kind for kind, _ in lex(text)] == kinds


@pytest.mark.parametrize("text", ["1", "50", "1,000.50"])
def test_bare_digits_are_numbers(text):
    assert lex(text) == [(LexemeKind.NUMBER, text)]


def test_whitespace_kinds():
    assert [kind for kind, _ in lex("a \n", Configuration.lexing(tokenize_whitespace=True))] == [
        LexemeKind.WORD,
        LexemeKind.WHITESPACE,
        LexemeKind.NEWLINE,
    ]


@given(section_texts(), configurations)
def test_lexemes_are_ordered_and_non_empty(text, configuration):
    stream = io.StringIO(text + "\n")
    end = 0
    for lexeme in EnglishLexer(stream, configuration):
        assert lexeme.start >= end
        assert lexeme.end > lexeme.start
        end = lexeme.end
    assert end <= len(text) + 1


@given(section_texts())
def test_lexemes_cover_all_characters_when_keeping_whitespace(text):
    values = lex_values(text, tokenize_whitespace=True)
    assert "".join(values) == text + "\n"


def test_capital_initial_before_capitalized_word():
    assert lex_values("Plan B. Then he left") == ["Plan", "B.", "Then", "he", "left"]
