"""Core documentation search functionality."""

from .engine import SearchEngine, ScoreWeights, search_docs
from .highlighter import Highlighter, highlight_matches
from .index import DuplicateEntryError, IndexBuilder, SearchIndex, build_search_index
from .normalizer import TextNormalizer, normalize, tokenize

__all__ = [
    "SearchEngine",
    "ScoreWeights",
    "search_docs",
    "Highlighter",
    "highlight_matches",
    "DuplicateEntryError",
    "IndexBuilder",
    "SearchIndex",
    "build_search_index",
    "TextNormalizer",
    "normalize",
    "tokenize",
]
