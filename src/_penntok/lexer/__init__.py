"""
In this module, a tokenizer is a generator that takes a stream and generates
lexemes. If a rule does not match, the function winds back the stream to the
position where it started generating and raises a TokenizationError.

Token combinator is any function which returns a tokenizer.

English text is ambiguous at the character level (is "U.S." one lexeme or
four?), so the english lexer tries all of its rules from the same position and
keeps the longest lexeme, which only needs backtracking of a single lexeme.
There is no bookkeeping of backtracking points.

The lexer works on text streams (io.StringIO), where positions given by tell
are character offsets into the section text.
"""

from .english_lexer import EnglishLexer
from .lexeme import Lexeme
from .lexeme_kind import LexemeKind

__all__ = ["EnglishLexer", "Lexeme", "LexemeKind"]
