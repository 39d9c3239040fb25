"""
Keyword normalization and token sources for the index.
Documents are split on whitespace; HTML documents have their visible text
extracted first. Each raw token is then reduced to a keyword (or rejected).
"""

import warnings
from pathlib import Path
from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk.tokenize import WhitespaceTokenizer

from .config import FILE_ENCODINGS, HTML_SUFFIXES, PUNCTUATION
from .exceptions import SourceUnavailable

_TOKENIZER = WhitespaceTokenizer()


def get_keyword(word: str) -> str | None:
    """
    Return the keyword for a raw token, or None if it is not one.

    The token is lower-cased and trimmed to the span between its first and
    last non-punctuation characters. Tokens that are empty, punctuation only,
    or carry punctuation inside that span (e.g. "can't") are rejected.
    """
    if not word:
        return None
    word = word.lower()

    start = None
    end = None
    for i, c in enumerate(word):
        if c not in PUNCTUATION:
            if start is None:
                start = i
            end = i
    if start is None:
        return None

    keyword = word[start:end + 1]
    if any(c in PUNCTUATION for c in keyword):
        return None
    return keyword


def tokenize(text: str) -> list[str]:
    """Split text into raw whitespace-delimited tokens."""
    if not text:
        return []
    return _TOKENIZER.tokenize(text)


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def read_text_file(filepath: Path) -> str:
    """
    Read a text file, handling common encodings.
    """
    filepath = Path(filepath)
    for encoding in FILE_ENCODINGS:
        try:
            return filepath.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
        except OSError as e:
            raise SourceUnavailable(filepath, e.strerror or str(e)) from e
    raise SourceUnavailable(filepath, "could not decode file")


def read_document_file(filepath: Path) -> list[str]:
    """
    Read a document and return its raw tokens in document order.
    """
    filepath = Path(filepath)
    content = read_text_file(filepath)
    if filepath.suffix.lower() in HTML_SUFFIXES:
        content = extract_text_from_html(content)
    return tokenize(content)


def read_word_file(filepath: Path) -> list[str]:
    """Read a whitespace-separated word list (manifest or noise words)."""
    return tokenize(read_text_file(filepath))
