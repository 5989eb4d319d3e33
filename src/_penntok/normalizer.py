"""
The normalizer maps the text of a lexeme to its normalized form, such as
"&mdash;" to "--" or "-LRB-" to "(". It is built once for a configuration:
every active family of rewrites is turned into a function from string to
string when the normalizer is created, so normalizing a lexeme only applies
prebuilt tables.

Rewrites are applied until the text no longer changes, so normalizing is
idempotent: normalize(normalize(s)) == normalize(s).
"""

import html
import re

import _penntok.lexer.charclass as cc


def rewrite_glyphs(glyphs, entities=None):
    """
    :param glyphs: Mapping from single characters to their replacement.
    :param entities: Mapping from html entities to their replacement.
    :returns: A rewrite replacing every glyph and entity anywhere in the text.
    """
    table = str.maketrans(glyphs)
    entities = entities or {}
    entity_pattern = re.compile("|".join(re.escape(e) for e in entities)) if entities else None

    def rewrite(text):
        text = text.translate(table)
        if entity_pattern is not None and "&" in text:
            text = entity_pattern.sub(lambda m: entities[m.group()], text)
        return text

    return rewrite


def rewrite_whole(replacements):
    """
    :param replacements: Mapping from entire texts to their replacement.
    :returns: A rewrite replacing the text if it is one of the given texts.
    """

    def rewrite(text):
        return replacements.get(text, text)

    return rewrite


def rewrite_quote(text):
    if cc.is_double_quote(text):
        return '"'
    return text


def rewrite_penn_parens(text):
    bracket = cc.penn_bracket(text)
    if bracket is None:
        return text
    return bracket


def unescape_slash(text):
    return text.replace(cc.ESCAPED_SLASH, "/")


def unescape_asterisk(text):
    return text.replace(cc.ESCAPED_ASTERISK, "*")


def decode_accents(text):
    if "&" not in text:
        return text
    return cc.ACCENTED_LETTER.sub(lambda m: html.unescape(m.group()), text)


def decode_html_symbols(text):
    """
    Decodes the named and numeric html entities in text, except accented
    letters, which are left to decode_accents.
    """
    if "&" not in text:
        return text

    def decode(match):
        entity = match.group()
        if cc.ACCENTED_LETTER.fullmatch(entity):
            return entity
        return html.unescape(entity)

    return cc.HTML_ENTITY.sub(decode, text)


class Normalizer:
    """
    Normalizes lexeme text according to the normalization options of a
    Configuration.

    >>> Normalizer(Configuration()).normalize("&mdash;")
    '--'

    """

    def __init__(self, configuration):
        self.configuration = configuration
        self.rewrites = list(self.active_rewrites())

    def active_rewrites(self):
        """
        The rewrites of the active normalization options, in the order they
        are applied. Whole-text rewrites come first, since the glyph rewrites
        could change the text they look for ("``" is a double quote, but
        its characters are also apostrophes).
        """
        configuration = self.configuration
        if not configuration.normalizes_anything:
            return
        if configuration.undo_penn_parens:
            yield rewrite_penn_parens
        if configuration.normalize_quote:
            yield rewrite_quote
        if configuration.normalize_currency:
            yield rewrite_whole({prefixed: "$" for prefixed in cc.PREFIXED_DOLLARS})
        if configuration.unescape_slash:
            yield unescape_slash
        if configuration.unescape_asterisk:
            yield unescape_asterisk
        if configuration.normalize_apostrophe:
            yield rewrite_glyphs(cc.APOSTROPHES, cc.APOSTROPHE_ENTITIES)
        if configuration.normalize_currency:
            yield rewrite_glyphs(cc.CURRENCY_SYMBOLS, cc.CURRENCY_ENTITIES)
        if configuration.normalize_ampersand:
            yield rewrite_glyphs(cc.AMPERSANDS, cc.AMPERSAND_ENTITIES)
        if configuration.normalize_fractions:
            yield rewrite_glyphs(cc.FRACTIONS, cc.FRACTION_ENTITIES)
        if configuration.normalize_ellipsis:
            yield rewrite_glyphs(cc.ELLIPSES, cc.ELLIPSIS_ENTITIES)
        if configuration.normalize_mdash:
            yield rewrite_glyphs(cc.EM_DASHES, cc.EM_DASH_ENTITIES)
        if configuration.normalize_dash:
            yield rewrite_glyphs(cc.DASHES, cc.DASH_ENTITIES)
        if configuration.normalize_html_accent:
            yield decode_accents
        if configuration.normalize_html_symbol:
            yield decode_html_symbols

    def __call__(self, text):
        return self.normalize(text)

    def rewrite_once(self, text):
        for rewrite in self.rewrites:
            text = rewrite(text)
        return text

    def normalize(self, text):
        """
        :returns: The normalized form of text.
        """
        normalized = self.rewrite_once(text)
        while normalized != text:
            text = normalized
            normalized = self.rewrite_once(text)
        return normalized

    def normalize_if_changed(self, text):
        """
        :returns: The normalized form of text, or None if normalizing
            does not change the text.
        """
        if not self.rewrites:
            return None
        normalized = self.normalize(text)
        if normalized == text:
            return None
        return normalized
