import pytest

from littlesearch.index_builder import build_index


def _build(documents: dict[str, str], noise_words=frozenset()):
    return build_index(list(documents), frozenset(noise_words), lambda doc: documents[doc].split())


@pytest.fixture
def make_index():
    """Build a frozen index from {document: text}."""
    return _build


@pytest.fixture
def quick_fox_index():
    return _build(
        {"doc1": "the quick fox.", "doc2": "quick quick fox!"},
        noise_words={"the"},
    )


@pytest.fixture
def corpus_dir(tmp_path):
    """Manifest, noise words and three plain-text documents on disk."""
    (tmp_path / "noisewords.txt").write_text("the\na\nof\nand\n", encoding="utf-8")
    (tmp_path / "alice.txt").write_text(
        "Alice was beginning to get very tired of sitting by her sister, "
        "and of having nothing to do. Alice!",
        encoding="utf-8",
    )
    (tmp_path / "rabbit.txt").write_text(
        "The White Rabbit ran by. The rabbit was late; Alice followed the rabbit.",
        encoding="utf-8",
    )
    (tmp_path / "queen.txt").write_text("Off with her head! said the Queen.", encoding="utf-8")
    (tmp_path / "docs.txt").write_text("alice.txt\nrabbit.txt\nqueen.txt\n", encoding="utf-8")
    return tmp_path
