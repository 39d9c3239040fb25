"""
Build the keyword index and print a short report.

Usage:
    python build_index.py --docs docs.txt --noise noisewords.txt [--show]

docs.txt lists the document files to index (paths relative to docs.txt);
noisewords.txt lists the words to leave out of the index.

Output:
  - Number of indexed documents and unique keywords
  - With --show, every keyword and its postings list
"""

import argparse
import logging
import sys
from pathlib import Path

from littlesearch.config import DEFAULT_DOCS_FILE, DEFAULT_NOISE_WORDS_FILE, LOG_FORMAT
from littlesearch.exceptions import SourceUnavailable
from littlesearch.index_builder import build_index_from_files
from littlesearch.posting import format_index


def main() -> None:
    parser = argparse.ArgumentParser(description="Build the little search engine index")
    parser.add_argument(
        "--docs",
        type=Path,
        default=Path(DEFAULT_DOCS_FILE),
        help="File listing the document file names (default: docs.txt)",
    )
    parser.add_argument(
        "--noise",
        type=Path,
        default=Path(DEFAULT_NOISE_WORDS_FILE),
        help="File listing the noise words (default: noisewords.txt)",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print every keyword with its postings list",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log each indexed document",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    try:
        index = build_index_from_files(args.docs, args.noise)
    except SourceUnavailable as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.show:
        print(format_index(index))

    print("\n" + "=" * 50)
    print("INDEX SUMMARY")
    print("=" * 50)
    print()
    print("| Metric                      | Value |")
    print("|-----------------------------|-------|")
    print(f"| Number of indexed documents | {index.num_documents} |")
    print(f"| Number of unique keywords   | {len(index)} |")
    print()


if __name__ == "__main__":
    main()
