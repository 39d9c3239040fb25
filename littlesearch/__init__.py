"""Little search engine: in-memory keyword index with two-keyword OR search."""

from .posting import Occurrence, PostingsList, InvertedIndex, insert_last_occurrence
from .index_builder import build_index, build_index_from_files, load_keywords, merge_keywords
from .tokenizer import get_keyword, tokenize
from .search_cli import top5_search
from .exceptions import SourceUnavailable, IndexPhaseError
