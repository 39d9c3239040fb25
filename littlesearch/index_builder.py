"""
Index builder: constructs the inverted index from a set of documents.
Each document is scanned once into its own keyword -> occurrence table,
which is then merged into the global index.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Callable, Iterable, Mapping

from .exceptions import SourceUnavailable
from .posting import InvertedIndex, Occurrence
from .tokenizer import get_keyword, read_document_file, read_word_file

logger = logging.getLogger(__name__)


def read_manifest(docs_file: Path) -> list[str]:
    """Document names listed in docs_file, in indexing order."""
    return read_word_file(docs_file)


def read_noise_words(noise_words_file: Path) -> frozenset[str]:
    """Noise words listed in noise_words_file, lower-cased."""
    return frozenset(word.lower() for word in read_word_file(noise_words_file))


def load_keywords(
    document: str,
    tokens: Iterable[str],
    noise_words: frozenset[str] | set[str] = frozenset(),
) -> dict[str, Occurrence]:
    """
    Scan one document's tokens and count its keywords.
    Tokens that are not keywords, and noise words, are skipped.
    Returns {keyword: Occurrence(document, count)}; empty if nothing qualified.
    """
    counts: Counter[str] = Counter()
    for token in tokens:
        keyword = get_keyword(token)
        if not keyword or keyword in noise_words:
            continue
        counts[keyword] += 1
    return {keyword: Occurrence(document, freq) for keyword, freq in counts.items()}


def merge_keywords(index: InvertedIndex, keywords: Mapping[str, Occurrence]) -> None:
    """Merge one document's keywords into the index (no-op when empty)."""
    if not keywords:
        return
    index.merge(keywords)


def build_index(
    document_ids: Iterable[str],
    noise_words: frozenset[str] | set[str],
    token_source_for: Callable[[str], Iterable[str]],
) -> InvertedIndex:
    """
    Index every document, in order, then freeze the index for searching.

    token_source_for(document) yields the document's raw tokens. A
    SourceUnavailable or OSError from it, including one raised while its
    tokens are being read, aborts the build; nothing is returned.
    """
    index = InvertedIndex()
    for document in document_ids:
        try:
            keywords = load_keywords(document, token_source_for(document), noise_words)
        except OSError as e:
            raise SourceUnavailable(document, e.strerror or str(e)) from e
        logger.debug("Indexed %s (%d keywords)", document, len(keywords))
        merge_keywords(index, keywords)
        index.num_documents += 1

    index.freeze()
    logger.info("Index built: %d documents, %d keywords", index.num_documents, len(index))
    return index


def build_index_from_files(docs_file: Path, noise_words_file: Path) -> InvertedIndex:
    """
    Build the index from a manifest of document file names and a noise
    word file. Relative document names resolve against the manifest's
    directory; the names themselves are the document ids in the index.
    """
    docs_file = Path(docs_file)
    noise_words = read_noise_words(noise_words_file)
    documents = read_manifest(docs_file)
    if not documents:
        logger.warning("No documents listed in %s", docs_file)
    base_dir = docs_file.parent

    def token_source_for(document: str) -> list[str]:
        path = Path(document)
        if not path.is_absolute():
            path = base_dir / path
        return read_document_file(path)

    return build_index(documents, noise_words, token_source_for)
