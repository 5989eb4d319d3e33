import penntok.version
from _penntok.configuration import Configuration
from _penntok.document import Document, Section, Token
from _penntok.errors import SectionStateError, TokenOrderError
from _penntok.normalizer import Normalizer
from _penntok.tokenizer import DeterministicTokenizer, tokenize, tokenize_to_strings

__author__ = """Equinor"""
__version__ = penntok.version.version

__all__ = [
    "Configuration",
    "DeterministicTokenizer",
    "Document",
    "Normalizer",
    "Section",
    "SectionStateError",
    "Token",
    "TokenOrderError",
    "tokenize",
    "tokenize_to_strings",
]
