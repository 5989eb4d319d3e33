from _penntok.lexer.errors import TokenizationError


def longest_of(stream, *tokenizers):
    """
    Combinator for tokenizers which each yield exactly one lexeme.

    Every tokenizer is tried from the same position of the stream and the
    lexeme that reaches furthest is yielded. When several tokenizers reach
    equally far, the one given first wins.

    :param stream: The stream all the tokenizers read from.
    :param tokenizers: List of tokenizers, in priority order.
    :returns: A tokenizer yielding the longest lexeme found.
    """

    def longest_of_tokenizer():
        start = stream.tell()
        longest = None
        for tok in tokenizers:
            try:
                lexeme = next(tok())
            except TokenizationError:
                continue
            finally:
                stream.seek(start)
            if longest is None or lexeme.end > longest.end:
                longest = lexeme

        if longest is None:
            raise TokenizationError(f"Could not match any lexeme at {start}")
        stream.seek(longest.end)
        yield longest

    return longest_of_tokenizer


def repeated(tokenizer):
    """
    Combinator for tokenizer.
    :param tokenizer: Any tokenizer.
    :returns: Tokenizer that applies the tokenizer zero or more times, until it
        fails.
    """

    def repeated_tokenizer():
        try:
            while True:
                yield from tokenizer()
        except TokenizationError:
            pass

    return repeated_tokenizer
