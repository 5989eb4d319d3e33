"""
The minimal document model the tokenizer writes into: a Document is a list
of Sections, and each Section holds its text and the Tokens covering it.

Tokens are only ever added to the end of a section. The only other change is
removing the last token, which the abbreviation correction and the removal of
the sentinel use to replace tokens. Every change is recorded in the edit log
of the section, and every appended token is checked against its predecessor,
so the tokens of a section are always ordered by offset.
"""

from dataclasses import dataclass, field
from enum import Enum, auto, unique
from itertools import chain
from typing import Optional

import numpy as np

from _penntok.errors import TokenOrderError

TOKENS_ANNOTATION = "tokens"


@dataclass(frozen=True)
class Token:
    """
    A span [start, end) of the text of a section. If normalizing changed the
    text of the span, normalized holds the normalized text.
    """

    section: "Section" = field(repr=False, compare=False)
    start: int
    end: int
    normalized: Optional[str] = None

    @property
    def length(self):
        return self.end - self.start

    @property
    def raw(self):
        """
        The text of the section covered by the token.
        """
        return self.section.text[self.start : self.end]

    @property
    def string(self):
        """
        The normalized text of the token, or its raw text when normalizing
        did not change it.
        """
        if self.normalized is None:
            return self.raw
        return self.normalized


@unique
class EditKind(Enum):
    APPEND = auto()
    REMOVE = auto()


@dataclass(frozen=True)
class SectionEdit:
    kind: EditKind
    index: int
    token: Token


class Section:
    """
    A contiguous part of the text of a document, tokenized independently of
    the other sections.
    """

    def __init__(self, text, document=None):
        self.text = text
        self.document = document
        self.edits = []
        self.is_tokenized = False
        self._tokens = []

    def __len__(self):
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)

    def __getitem__(self, key):
        return self._tokens[key]

    def __repr__(self):
        return f"Section({self.text!r})"

    @property
    def tokens(self):
        return tuple(self._tokens)

    def last(self, number):
        """
        :returns: Tuple of the last number tokens, or fewer if the
            section holds fewer tokens.
        """
        return tuple(self._tokens[-number:]) if number > 0 else ()

    def append(self, start, end, normalized=None):
        """
        Add a token for the span [start, end) at the end of the section.

        :raises TokenOrderError: If the span is empty or starts before the
            end of the last token.
        :returns: The new token.
        """
        if start >= end:
            raise TokenOrderError(f"Empty or reversed token span [{start}, {end})")
        if self._tokens and self._tokens[-1].end > start:
            raise TokenOrderError(
                f"Token [{start}, {end}) overlaps last token "
                f"[{self._tokens[-1].start}, {self._tokens[-1].end})"
            )
        token = Token(self, start, end, normalized)
        self._tokens.append(token)
        self.edits.append(SectionEdit(EditKind.APPEND, len(self._tokens) - 1, token))
        return token

    def remove_last(self):
        """
        Remove the last token of the section.

        :returns: The removed token.
        """
        if not self._tokens:
            raise IndexError("remove_last from section without tokens")
        token = self._tokens.pop()
        self.edits.append(SectionEdit(EditKind.REMOVE, len(self._tokens), token))
        return token

    def clear_tokens(self):
        """
        Remove all tokens, so that the section can be tokenized again.
        """
        self._tokens = []
        self.edits = []
        self.is_tokenized = False

    @property
    def offsets(self):
        """
        The (start, end) offsets of all tokens as an array of shape
        (number of tokens, 2).
        """
        return np.array(
            [(token.start, token.end) for token in self._tokens], dtype=np.int64
        ).reshape(-1, 2)

    def has_ordered_offsets(self):
        """
        :returns: True if every token is non-empty, and ends at or before
            the start of the next one.
        """
        offsets = self.offsets
        starts, ends = offsets[:, 0], offsets[:, 1]
        return bool(np.all(starts < ends) and np.all(ends[:-1] <= starts[1:]))

    def gaps(self):
        """
        :returns: The text between consecutive tokens, including the text
            before the first and after the last token.
        """
        bounds = np.concatenate(([0], self.offsets.ravel(), [len(self.text)]))
        return [self.text[a:b] for a, b in bounds.reshape(-1, 2)]

    @property
    def token_strings(self):
        return [token.string for token in self._tokens]


class Document:
    """
    A document is a list of sections and the set of annotations which have
    been completed on it, ie. "tokens" once it has been tokenized.

    >>> document = Document("Abbrev. has no answer.")
    >>> len(document.sections)
    1

    """

    def __init__(self, text=None):
        self.annotations = set()
        self.sections = []
        if text is not None:
            self.add_section(text)

    @classmethod
    def from_sections(cls, texts):
        document = cls()
        for text in texts:
            document.add_section(text)
        return document

    def add_section(self, text):
        section = Section(text, self)
        self.sections.append(section)
        return section

    @property
    def tokens(self):
        return chain.from_iterable(self.sections)

    @property
    def token_count(self):
        return sum(len(section) for section in self.sections)

    @property
    def is_tokenized(self):
        return TOKENS_ANNOTATION in self.annotations
