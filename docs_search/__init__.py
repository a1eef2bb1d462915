"""
Docs Search - In-memory search index for product documentation.

This package turns a list of documentation entries into an inverted index,
answers ranked queries where title matches outweigh keyword and content
matches, and highlights matched terms for display.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine, search_docs
from .core.highlighter import Highlighter, highlight_matches
from .core.index import DuplicateEntryError, IndexBuilder, SearchIndex, build_search_index
from .core.normalizer import TextNormalizer, normalize
from .models.entry import SearchEntry
from .models.response import SearchResult

__all__ = [
    "SearchEngine",
    "search_docs",
    "Highlighter",
    "highlight_matches",
    "DuplicateEntryError",
    "IndexBuilder",
    "SearchIndex",
    "build_search_index",
    "TextNormalizer",
    "normalize",
    "SearchEntry",
    "SearchResult",
]
