from _penntok.lexer.errors import TokenizationError
from _penntok.lexer.lexeme import Lexeme


def tokenize_pattern(stream, pattern, kind):
    """
    Token combinator for regular expression lexemes, ie. when the stream
    contains '--' tokenize_pattern(stream, re.compile('-{2,}'), LexemeKind.DASH)
    will yield Lexeme(kind=LexemeKind.DASH, 0, 2).

    :param stream: A character stream supporting getvalue, tell and seek.
    :param pattern: A compiled regular expression, matched at the current
        position of the stream. Empty matches count as failures.
    :param kind: The kind of lexeme yielded by the tokenizer.
    :returns: Tokenizer for the given pattern, yielding a lexeme of the given
        kind.
    """
    buffer = stream.getvalue()

    def pattern_tokenizer():
        start = stream.tell()
        match = pattern.match(buffer, start)
        if match is None or match.end() == start:
            raise TokenizationError(f"Pattern {pattern.pattern!r} did not match at {start}")
        stream.seek(match.end())
        yield Lexeme(kind, start, match.end())

    return pattern_tokenizer


def tokenize_skip(stream, pattern):
    """
    Like tokenize_pattern, but consumes the match without yielding a lexeme.
    Used for whitespace that is elided from the output.
    """
    buffer = stream.getvalue()

    def skip_tokenizer():
        start = stream.tell()
        match = pattern.match(buffer, start)
        if match is None or match.end() == start:
            raise TokenizationError(f"Expected {pattern.pattern!r} at {start}")
        stream.seek(match.end())
        return iter([])

    return skip_tokenizer


def tokenize_unless(stream, predicate, tokenizer):
    """
    Guards a tokenizer with a predicate over the buffer and the current
    position. When the predicate holds, the tokenizer is not tried and a
    TokenizationError is raised instead.

    :param predicate: Function taking (buffer, position) and returning a bool.
    :param tokenizer: The guarded tokenizer.
    """
    buffer = stream.getvalue()

    def unless_tokenizer():
        start = stream.tell()
        if predicate(buffer, start):
            raise TokenizationError(f"{predicate.__name__} rejected position {start}")
        yield from tokenizer()

    return unless_tokenizer
