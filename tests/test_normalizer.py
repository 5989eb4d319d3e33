import hypothesis.strategies as st
import pytest
from hypothesis import given

from _penntok.configuration import NORMALIZATION_OPTIONS, Configuration
from _penntok.normalizer import Normalizer

from .generators.section_texts import fragments


def only(option):
    return Normalizer(Configuration.lexing(normalize=True, **{option: True}))


@pytest.mark.parametrize(
    "option, raw, expected",
    [
        ("normalize_quote", "“", '"'),
        ("normalize_quote", "``", '"'),
        ("normalize_quote", "''", '"'),
        ("normalize_quote", "&quot;", '"'),
        ("normalize_apostrophe", "’s", "'s"),
        ("normalize_apostrophe", "don’t", "don't"),
        ("normalize_apostrophe", "&rsquo;", "'"),
        ("normalize_currency", "€", "$"),
        ("normalize_currency", "¢", "cents"),
        ("normalize_currency", "US$", "$"),
        ("normalize_currency", "&pound;", "$"),
        ("normalize_ampersand", "&amp;", "&"),
        ("normalize_ampersand", "AT&amp;T", "AT&T"),
        ("normalize_fractions", "½", "1/2"),
        ("normalize_fractions", "&frac34;", "3/4"),
        ("normalize_ellipsis", "…", "..."),
        ("normalize_ellipsis", "&hellip;", "..."),
        ("undo_penn_parens", "-LRB-", "("),
        ("undo_penn_parens", "-rcb-", "}"),
        ("unescape_slash", "and\\/or", "and/or"),
        ("unescape_asterisk", "\\*\\*", "**"),
        ("normalize_mdash", "—", "--"),
        ("normalize_mdash", "&mdash;", "--"),
        ("normalize_dash", "–", "-"),
        ("normalize_dash", "&ndash;", "-"),
        ("normalize_html_accent", "Beyonc&eacute;", "Beyoncé"),
        ("normalize_html_symbol", "&lt;", "<"),
        ("normalize_html_symbol", "&trade;", "™"),
        ("normalize_html_symbol", "&#169;", "©"),
    ],
)
def test_normalization_family(option, raw, expected):
    assert only(option).normalize(raw) == expected


@pytest.mark.parametrize("option", NORMALIZATION_OPTIONS)
def test_plain_words_are_unchanged(option):
    assert only(option).normalize_if_changed("word") is None


def test_html_symbol_leaves_accents():
    assert only("normalize_html_symbol").normalize("Beyonc&eacute;") == "Beyonc&eacute;"


def test_quote_is_whole_text_only():
    assert only("normalize_quote").normalize("''Going") == "''Going"


def test_normalize_off_has_no_rewrites():
    normalizer = Normalizer(Configuration(normalize=False))

    assert normalizer.rewrites == []
    assert normalizer.normalize_if_changed("&mdash;") is None
    assert normalizer.normalize("&mdash;") == "&mdash;"


def test_normalize_if_changed():
    normalizer = Normalizer(Configuration.normalizing())

    assert normalizer.normalize_if_changed("&mdash;") == "--"
    assert normalizer.normalize_if_changed("--") is None
    assert normalizer("-LRB-") == "("


def test_entities_decoded_before_glyphs_still_normalize():
    normalizer = Normalizer(Configuration.normalizing())

    assert normalizer.normalize("&amp;rsquo;") == "'"
    assert normalizer.normalize("&#8217;s") == "'s"


@pytest.mark.parametrize("option", NORMALIZATION_OPTIONS)
@given(st.one_of(fragments, st.text()))
def test_family_is_idempotent(option, text):
    normalizer = only(option)
    normalized = normalizer.normalize(text)
    assert normalizer.normalize(normalized) == normalized


@given(st.one_of(fragments, st.text()))
def test_normalize_is_idempotent(text):
    normalizer = Normalizer(Configuration.normalizing())
    normalized = normalizer.normalize(text)
    assert normalizer.normalize(normalized) == normalized


@pytest.mark.parametrize("option", NORMALIZATION_OPTIONS)
@given(st.lists(fragments).map("".join))
def test_family_is_idempotent_on_joined_fragments(option, text):
    normalizer = only(option)
    normalized = normalizer.normalize(text)
    assert normalizer.normalize_if_changed(normalized) is None


@given(st.lists(fragments).map("".join))
def test_normalize_is_idempotent_on_joined_fragments(text):
    normalizer = Normalizer(Configuration.normalizing())
    normalized = normalizer.normalize(text)
    assert normalizer.normalize_if_changed(normalized) is None


def test_escaped_entities_are_decoded_completely():
    assert Normalizer(Configuration.normalizing()).normalize("&amp;lt;") == "<"
    assert only("normalize_ampersand").normalize("&amp;lt;") == "&lt;"
