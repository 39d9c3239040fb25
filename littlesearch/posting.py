"""
Occurrence, postings list and inverted index data structures.

An occurrence records how often a keyword appears in one document.
Each keyword's postings list is kept in descending order of frequency,
one new occurrence at a time, so it never has to be re-sorted.
"""

from dataclasses import dataclass
from typing import Iterator, Mapping

from .exceptions import IndexPhaseError


@dataclass(frozen=True)
class Occurrence:
    """
    A keyword's occurrence in a document.
    - document: document name
    - frequency: number of times the keyword occurs in that document
    """

    document: str
    frequency: int

    def __repr__(self) -> str:
        return f"({self.document},{self.frequency})"


def insert_last_occurrence(occurrences: list[Occurrence]) -> list[int] | None:
    """
    Move the last occurrence of the list to its place in descending
    frequency order. Elements 0..n-2 must already be in order.

    The spot is found by binary search over the ordered prefix; an equal
    frequency ends the search at once. The list is updated in place.

    Returns the sequence of mid indexes probed, or None if the list has
    fewer than two elements.
    """
    if len(occurrences) <= 1:
        return None

    last = occurrences.pop()
    probes: list[int] = []
    lo, hi = 0, len(occurrences) - 1
    position = 0
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        probes.append(mid)
        if last.frequency < occurrences[mid].frequency:
            lo = mid + 1
            position = mid + 1
        elif last.frequency > occurrences[mid].frequency:
            hi = mid - 1
            position = mid
        else:
            position = mid
            break

    occurrences.insert(position, last)
    return probes


class PostingsList:
    """Occurrences of one keyword, non-increasing by frequency."""

    def __init__(self, first: Occurrence) -> None:
        self._occurrences: list[Occurrence] = [first]

    def insert_last(self, occurrence: Occurrence) -> list[int] | None:
        """Append an occurrence and move it to its rank; returns the probes."""
        self._occurrences.append(occurrence)
        return insert_last_occurrence(self._occurrences)

    def documents(self) -> list[str]:
        return [occ.document for occ in self._occurrences]

    def __iter__(self) -> Iterator[Occurrence]:
        return iter(self._occurrences)

    def __len__(self) -> int:
        return len(self._occurrences)

    def __getitem__(self, i: int) -> Occurrence:
        return self._occurrences[i]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PostingsList):
            return self._occurrences == other._occurrences
        if isinstance(other, list):
            return self._occurrences == other
        return NotImplemented

    def __repr__(self) -> str:
        return repr(self._occurrences)


class InvertedIndex:
    """
    Inverted index: map from keyword -> postings list.

    Built by merging one document's keywords at a time, then frozen.
    A frozen index is read-only and may be searched.
    """

    def __init__(self) -> None:
        self._index: dict[str, PostingsList] = {}
        self._frozen = False
        # Documents scanned by the build, including ones with no keywords
        self.num_documents = 0

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """End the build phase."""
        self._frozen = True

    def merge(self, keywords: Mapping[str, Occurrence]) -> None:
        """
        Merge one document's keyword occurrences into the index, keeping
        every postings list in descending frequency order.
        """
        if self._frozen:
            raise IndexPhaseError("Cannot merge into an index after the build has finished")
        for keyword, occurrence in keywords.items():
            postings = self._index.get(keyword)
            if postings is None:
                self._index[keyword] = PostingsList(occurrence)
            else:
                postings.insert_last(occurrence)

    def get_postings(self, keyword: str) -> PostingsList | None:
        """Return the postings list for a keyword, or None."""
        return self._index.get(keyword)

    def keywords(self) -> Iterator[str]:
        """Iterate over all keywords in the index."""
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self._index

    def to_dict(self) -> dict[str, list[tuple[str, int]]]:
        """Plain copy of the whole index, for inspection."""
        return {
            keyword: [(occ.document, occ.frequency) for occ in postings]
            for keyword, postings in self._index.items()
        }


def format_index(index: InvertedIndex) -> str:
    """One line per keyword: the keyword and its postings list."""
    return "\n".join(
        f"{keyword}  {index.get_postings(keyword)!r}"
        for keyword in sorted(index.keywords())
    )
