"""
Search component for the little search engine.

- OR semantics over exactly one or two keywords.
- A document matching both keywords counts once, at its higher frequency.
- Results are ranked by frequency; ties go to the first keyword, then to
  the order of that keyword's postings list.
- At most TOP_K (5) document names are returned.

Usage (from repo root):
    python -m littlesearch.search_cli --docs docs.txt --noise noisewords.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .config import DEFAULT_DOCS_FILE, DEFAULT_NOISE_WORDS_FILE, LOG_FORMAT, TOP_K
from .exceptions import IndexPhaseError, SourceUnavailable
from .index_builder import build_index_from_files
from .posting import InvertedIndex, Occurrence
from .tokenizer import get_keyword, tokenize

logger = logging.getLogger(__name__)


@dataclass
class TaggedOccurrence:
    occurrence: Occurrence
    source: int  # 0 for the first keyword, 1 for the second
    position: int  # rank within the source postings list


def top5_search(
    index: InvertedIndex,
    kw1: str,
    kw2: str,
    top_k: int = TOP_K,
) -> list[str] | None:
    """
    Return the names of up to top_k documents containing kw1 or kw2, in
    descending order of frequency. Returns None if neither keyword is in
    the index, or if both are empty.
    """
    if not index.frozen:
        raise IndexPhaseError("Cannot search an index that is still being built")
    if not kw1 and not kw2:
        return None

    sources = [index.get_postings(kw) if kw else None for kw in (kw1, kw2)]
    if all(postings is None for postings in sources):
        return None

    # Best occurrence per document; the first keyword keeps equal frequencies.
    best: dict[str, TaggedOccurrence] = {}
    for source, postings in enumerate(sources):
        if postings is None:
            continue
        for position, occ in enumerate(postings):
            kept = best.get(occ.document)
            if kept is None or occ.frequency > kept.occurrence.frequency:
                best[occ.document] = TaggedOccurrence(occ, source, position)

    ranked = sorted(
        best.values(),
        key=lambda t: (-t.occurrence.frequency, t.source, t.position),
    )
    logger.debug("Ranked %r | %r: %s", kw1, kw2, [t.occurrence for t in ranked])
    return [t.occurrence.document for t in ranked[:top_k]]


def parse_query(raw_query: str) -> tuple[str, str] | None:
    """
    Turn a line of input into (kw1, kw2), normalized like indexed words.
    A single word searches that keyword alone. Words that are not keywords
    become "". Returns None when the line does not hold one or two words.
    """
    words = tokenize(raw_query)
    if not 1 <= len(words) <= 2:
        return None
    keywords = [get_keyword(w) or "" for w in words]
    if len(keywords) == 1:
        keywords.append("")
    return keywords[0], keywords[1]


def run_search_loop(index: InvertedIndex, top_k: int = TOP_K) -> None:
    """
    Interactive command-line search loop.
    """
    print(f"Indexed {len(index)} keywords.")
    print("Enter one or two keywords (OR semantics). Empty line or Ctrl+C to exit.")

    while True:
        try:
            raw_query = input("query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw_query:
            break

        query = parse_query(raw_query)
        if query is None:
            print("Please enter one or two keywords.")
            continue

        results = top5_search(index, *query, top_k=top_k)
        if results is None:
            print("No documents matched the query.")
            continue

        print(f"Top {len(results)} results:")
        for rank, document in enumerate(results, start=1):
            print(f"{rank:2d}. {document}")


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Little search engine CLI.")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path(DEFAULT_DOCS_FILE),
        help="File listing the document file names to index.",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path(DEFAULT_NOISE_WORDS_FILE),
        help="File listing the noise words to ignore.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=TOP_K,
        help="Number of top results to show.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log indexing and ranking details.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.top < 1:
        parser.error("--top must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        index = build_index_from_files(args.docs, args.noise)
    except SourceUnavailable as e:
        print(f"Error: {e}")
        sys.exit(1)

    run_search_loop(index, top_k=args.top)


if __name__ == "__main__":
    main()
