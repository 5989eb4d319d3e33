from functools import cached_property

import _penntok.lexer.charclass as cc
from _penntok.lexer.combinators import longest_of, repeated
from _penntok.lexer.common import tokenize_pattern, tokenize_skip, tokenize_unless
from _penntok.lexer.errors import TokenizationError
from _penntok.lexer.lexeme import Lexeme
from _penntok.lexer.lexeme_kind import LexemeKind


class EnglishLexer:
    """
    The english lexer is an iterable of lexemes for a given stream of
    section text. At every position, all active rules are tried and the
    longest lexeme wins, ties going to the rule listed first in
    EnglishLexer.rules. The catch-all rule matches any single character, so
    the lexer never fails.

    The stream is expected to end with a sentinel newline, so that rules
    using lookahead always have a character to look at.

    >>> stream = io.StringIO("I paid $50 USD\\n")
    >>> [lexeme.get_value(stream) for lexeme in EnglishLexer(stream, Configuration())]
    ['I', 'paid', '$', '50', 'USD']

    """

    def __init__(self, stream, configuration):
        """
        :param stream: A character stream containing section text.
        :param configuration: The Configuration deciding which rules are
            active.
        """
        self.stream = stream
        self.configuration = configuration

    def __iter__(self):
        return self.tokenize_section()

    def tokenize_section(self):
        """
        Tokenize from the current position to the end of the stream.
        """
        while True:
            yield from self.tokenize_delimiter()
            start = self.stream.tell()
            if not self.stream.read(1):
                return
            self.stream.seek(start)
            yield from self.tokenize_lexeme()

    @cached_property
    def tokenize_delimiter(self):
        """
        Skips whitespace which is not kept as lexemes. With tokenize_whitespace,
        nothing is skipped; with tokenize_newline only, line breaks are kept
        and other whitespace is skipped.
        """
        if self.configuration.tokenize_whitespace:
            return lambda: iter([])
        if self.configuration.tokenize_newline:
            return repeated(tokenize_skip(self.stream, cc.WHITESPACE_RUN))
        return repeated(tokenize_skip(self.stream, cc.ANY_WHITESPACE))

    @cached_property
    def tokenize_lexeme(self):
        return longest_of(self.stream, *self.rules)

    @cached_property
    def rules(self):
        """
        The active rules, in priority order.
        """
        stream = self.stream
        configuration = self.configuration
        rules = []
        if configuration.tokenize_sgml:
            rules.append(tokenize_pattern(stream, cc.SGML_TAG, LexemeKind.SGML))
        rules += [
            tokenize_pattern(stream, cc.URL, LexemeKind.URL),
            tokenize_pattern(stream, cc.EMAIL, LexemeKind.EMAIL),
            tokenize_pattern(stream, cc.HTML_ENTITY, LexemeKind.HTML_ENTITY),
            tokenize_pattern(stream, cc.PENN_BRACKET_CODE, LexemeKind.BRACKET_CODE),
            tokenize_pattern(stream, cc.ABBREVIATION, LexemeKind.ABBREVIATION),
            tokenize_pattern(stream, cc.INITIALISM, LexemeKind.INITIALISM),
            tokenize_pattern(stream, cc.CAPITAL_INITIAL, LexemeKind.INITIALISM),
            tokenize_pattern(stream, cc.COMPANY, LexemeKind.COMPANY),
            tokenize_pattern(stream, cc.CONTRACTION, LexemeKind.CONTRACTION),
            tokenize_pattern(stream, cc.NUMBER, LexemeKind.NUMBER),
            tokenize_unless(stream, cc.splits_currency_amount, self.tokenize_word),
            tokenize_pattern(stream, cc.CURRENCY, LexemeKind.CURRENCY),
            tokenize_pattern(stream, cc.CURRENCY_CODE_BEFORE_AMOUNT, LexemeKind.CURRENCY),
            tokenize_pattern(stream, cc.FRACTION, LexemeKind.FRACTION),
            tokenize_pattern(stream, cc.DOUBLE_QUOTE_PAIR, LexemeKind.QUOTE),
            tokenize_pattern(stream, cc.DASH_RUN, LexemeKind.DASH),
            tokenize_pattern(stream, cc.ESCAPED, LexemeKind.ESCAPED),
            tokenize_pattern(stream, cc.SPACED_ELLIPSIS, LexemeKind.ELLIPSIS),
            tokenize_pattern(stream, cc.SENTENCE_FINAL, LexemeKind.PUNCTUATION),
        ]
        if configuration.tokenize_newline or configuration.tokenize_whitespace:
            rules.append(tokenize_pattern(stream, cc.NEWLINE_RUN, LexemeKind.NEWLINE))
        if configuration.tokenize_whitespace:
            rules.append(tokenize_pattern(stream, cc.WHITESPACE_RUN, LexemeKind.WHITESPACE))
        rules.append(tokenize_pattern(stream, cc.ANY_CHARACTER, LexemeKind.SYMBOL))
        return rules

    @cached_property
    def word_pattern(self):
        if self.configuration.tokenize_all_dashed_words:
            return cc.UNDASHED_WORD
        return cc.DASHED_WORD

    @cached_property
    def buffer(self):
        return self.stream.getvalue()

    def tokenize_word(self):
        """
        Tokenize a word, yields Lexeme(LexemeKind.WORD, 0, 2) for a stream
        containing "don't", as english contractions at the end of a word
        ("n't", "'s", "'ll", ...) are lexemes of their own.
        """
        start = self.stream.tell()
        match = self.word_pattern.match(self.buffer, start)
        if match is None:
            raise TokenizationError(f"Expected word at {start}")
        word = match.group()
        contraction = cc.TRAILING_CONTRACTION.search(word)
        while contraction is not None and contraction.start() > 0:
            word = word[: contraction.start()]
            contraction = cc.TRAILING_CONTRACTION.search(word)
        end = start + len(word)
        self.stream.seek(end)
        yield Lexeme(LexemeKind.WORD, start, end)
