import random

import pytest

from littlesearch.exceptions import IndexPhaseError
from littlesearch.posting import (
    InvertedIndex,
    Occurrence,
    PostingsList,
    format_index,
    insert_last_occurrence,
)


def occs(*freqs):
    return [Occurrence(f"d{i}", f) for i, f in enumerate(freqs)]


def freqs_of(occurrences):
    return [o.frequency for o in occurrences]


def test_occurrence_repr_and_immutability():
    occ = Occurrence("doc1", 3)
    assert repr(occ) == "(doc1,3)"
    with pytest.raises(AttributeError):
        occ.frequency = 4


@pytest.mark.parametrize("size", [0, 1])
def test_insert_last_small_lists_do_not_probe(size):
    occurrences = occs(*([7] * size))
    assert insert_last_occurrence(occurrences) is None
    assert len(occurrences) == size


@pytest.mark.parametrize(
    "freqs, expected_freqs, expected_probes",
    [
        # moves left past everything
        ((5, 3, 1, 9), [9, 5, 3, 1], [1, 0]),
        # moves right to the end
        ((5, 3, 1, 0), [5, 3, 1, 0], [1, 2]),
        # lands in the middle
        ((5, 3, 1, 4), [5, 4, 3, 1], [1, 0]),
        # equal frequency stops at the first probe
        ((5, 3, 1, 3), [5, 3, 3, 1], [1]),
        ((12, 8, 7, 5, 3, 2, 6), [12, 8, 7, 6, 5, 3, 2], [2, 4, 3]),
        ((1, 1), [1, 1], [0]),
    ],
)
def test_insert_last_places_and_reports_probes(freqs, expected_freqs, expected_probes):
    occurrences = occs(*freqs)
    probes = insert_last_occurrence(occurrences)
    assert freqs_of(occurrences) == expected_freqs
    assert probes == expected_probes


def test_insert_last_on_equal_frequency_goes_before_probed_peer():
    occurrences = [Occurrence("doc1", 1), Occurrence("doc2", 1)]
    insert_last_occurrence(occurrences)
    assert [o.document for o in occurrences] == ["doc2", "doc1"]


def test_postings_list_stays_ordered_after_every_insert():
    rng = random.Random(121)
    postings = PostingsList(Occurrence("d0", rng.randint(1, 10)))
    for i in range(1, 60):
        probes = postings.insert_last(Occurrence(f"d{i}", rng.randint(1, 10)))
        assert probes
        frequencies = freqs_of(postings)
        assert frequencies == sorted(frequencies, reverse=True)
    assert len(postings) == 60
    assert len(set(postings.documents())) == 60


def test_postings_list_equality_and_access():
    postings = PostingsList(Occurrence("a", 2))
    postings.insert_last(Occurrence("b", 5))
    assert postings == [Occurrence("b", 5), Occurrence("a", 2)]
    assert postings[0] == Occurrence("b", 5)
    assert repr(postings) == "[(b,5), (a,2)]"


def test_inverted_index_merge_creates_and_extends_lists():
    index = InvertedIndex()
    index.merge({"fox": Occurrence("doc1", 1), "quick": Occurrence("doc1", 1)})
    index.merge({"fox": Occurrence("doc2", 1), "quick": Occurrence("doc2", 2)})
    assert len(index) == 2
    assert "fox" in index and "dog" not in index
    assert index.get_postings("dog") is None
    assert index.to_dict() == {
        "fox": [("doc2", 1), ("doc1", 1)],
        "quick": [("doc2", 2), ("doc1", 1)],
    }


def test_merge_order_does_not_change_frequency_order():
    rng = random.Random(7)
    documents = {
        f"doc{i}": {kw: Occurrence(f"doc{i}", rng.randint(1, 6)) for kw in rng.sample("abcdefgh", 4)}
        for i in range(12)
    }

    def build(order):
        index = InvertedIndex()
        for doc in order:
            index.merge(documents[doc])
        return index

    forward = build(sorted(documents))
    backward = build(sorted(documents, reverse=True))
    assert set(forward.keywords()) == set(backward.keywords())
    for kw in forward.keywords():
        a, b = forward.get_postings(kw), backward.get_postings(kw)
        assert freqs_of(a) == sorted(freqs_of(a), reverse=True)
        assert freqs_of(a) == freqs_of(b)
        assert set(a) == set(b)


def test_frozen_index_rejects_merge():
    index = InvertedIndex()
    index.merge({"fox": Occurrence("doc1", 1)})
    index.freeze()
    assert index.frozen
    with pytest.raises(IndexPhaseError):
        index.merge({"fox": Occurrence("doc2", 1)})
    assert index.to_dict() == {"fox": [("doc1", 1)]}


def test_format_index_lists_keywords_in_order():
    index = InvertedIndex()
    index.merge({"quick": Occurrence("doc1", 1), "fox": Occurrence("doc1", 1)})
    assert format_index(index) == "fox  [(doc1,1)]\nquick  [(doc1,1)]"
