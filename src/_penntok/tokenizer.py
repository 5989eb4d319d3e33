import io
from concurrent.futures import ThreadPoolExecutor

from _penntok.abbreviation import AbbreviationCorrector
from _penntok.configuration import Configuration
from _penntok.document import TOKENS_ANNOTATION, Document, Section, Token
from _penntok.errors import SectionStateError, TokenOrderError
from _penntok.lexer import EnglishLexer
from _penntok.normalizer import Normalizer

# Appended to the text of every section, so that lexer rules with lookahead
# have a character to look at at the end of the text.
SENTINEL = "\n"


class DeterministicTokenizer:
    """
    Splits the sections of a document into tokens. Aims to adhere to
    tokenization rules used in Ontonotes and Penn Treebank.

    Punctuation that ends a sentence is placed alone in its own token, hence
    this tokenization implicitly defines sentence segmentation also.

    >>> tokenizer = DeterministicTokenizer(Configuration(abbrev_precedes_lowercase=True))
    >>> tokenizer("Abbrev. has no answer.")
    ['Abbrev.', 'has', 'no', 'answer', '.']

    Sections share nothing while being tokenized, so they can be tokenized in
    parallel, see DeterministicTokenizer.process.
    """

    prereq_attrs = ()
    post_attrs = (Token,)

    def __init__(self, configuration=None):
        """
        :param configuration: The Configuration of the tokenizer, defaults to
            Configuration.normalizing().
        """
        if configuration is None:
            configuration = Configuration.normalizing()
        self.configuration = configuration
        self.normalizer = Normalizer(configuration)

    def __call__(self, text):
        """
        Convenience function to run the tokenizer on an arbitrary string.

        :returns: List of the token strings of the text.
        """
        document = self.process(Document(text))
        return [token.string for token in document.tokens]

    def token_annotation_string(self, token):
        """
        How the annotation of this tokenizer is printed in one-word-per-line
        format.
        """
        return f"{token.start}\t{token.end}"

    def process(self, document, max_workers=None):
        """
        Tokenize every section of the document.

        :param document: The Document to tokenize, its sections must not
            hold any tokens.
        :param max_workers: If given, sections are tokenized in a thread pool
            with that many workers.
        :returns: The document.
        """
        if max_workers is None:
            for section in document.sections:
                self.process_section(section)
        else:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                list(executor.map(self.process_section, document.sections))
        document.annotations.add(TOKENS_ANNOTATION)
        return document

    def process_section(self, section):
        """
        Tokenize the text of a single section.

        :raises SectionStateError: If the section already holds tokens.
        :returns: The section.
        """
        if section.is_tokenized or len(section) > 0:
            raise SectionStateError(
                f"{section!r} already holds {len(section)} tokens, "
                "clear them before tokenizing again."
            )
        stream = io.StringIO(section.text + SENTINEL)
        corrector = None
        if self.configuration.abbrev_precedes_lowercase:
            corrector = AbbreviationCorrector(section, self.normalizer)

        for lexeme in EnglishLexer(stream, self.configuration):
            text = lexeme.get_value(stream)
            normalized = self.normalizer.normalize_if_changed(text)
            if corrector is not None:
                corrector.correct(text if normalized is None else normalized)
            section.append(lexeme.start, lexeme.end, normalized)

        self.strip_sentinel(section)
        if not section.has_ordered_offsets():
            raise TokenOrderError(f"Tokens of {section!r} are out of order")
        section.is_tokenized = True
        return section

    def strip_sentinel(self, section):
        """
        The sentinel only ends up in a token when newlines are kept as
        tokens. Shorten that token to end with the section text, or remove
        it if it holds nothing but the sentinel.
        """
        text_end = len(section.text)
        if len(section) == 0 or section[-1].end <= text_end:
            return
        last = section.remove_last()
        if last.start < text_end:
            section.append(
                last.start,
                text_end,
                self.normalizer.normalize_if_changed(section.text[last.start :]),
            )


def tokenize(section_text, configuration=None):
    """
    Tokenize a single text.

    :param section_text: The text to tokenize.
    :param configuration: Configuration to use, defaults to
        Configuration.normalizing().
    :returns: List of the tokens of the text.
    """
    section = Section(section_text)
    DeterministicTokenizer(configuration).process_section(section)
    return list(section.tokens)


def tokenize_to_strings(text, configuration=None):
    """
    :returns: List of the normalized (or raw, if unchanged) strings
        of the tokens of text.
    """
    return [token.string for token in tokenize(text, configuration)]
