"""Index data structures for documentation search."""

import time
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Set, Union

from ..models.entry import SearchEntry
from .normalizer import TextNormalizer

EntryLike = Union[SearchEntry, Mapping[str, Any]]


class DuplicateEntryError(ValueError):
    """Raised when an entry list contains the same id more than once."""

    def __init__(self, entry_id: str) -> None:
        self.entry_id = entry_id
        super().__init__(f"Duplicate entry id: {entry_id!r}")


class SearchIndex:
    """
    Immutable search index built from a corpus snapshot.

    Holds an entry lookup table and an inverted index mapping normalized
    tokens to the ids of entries containing them. Rebuilding means
    constructing a new instance; nothing mutates an existing one.
    """

    def __init__(
        self,
        entries: Mapping[str, SearchEntry],
        inverted_index: Mapping[str, Iterable[str]],
    ) -> None:
        """
        Initialize the index.

        Args:
            entries: Mapping from entry id to entry, in corpus order
            inverted_index: Mapping from normalized token to entry ids

        Raises:
            ValueError: If a posting references an unknown entry id
        """
        self._entries = MappingProxyType(dict(entries))
        self._inverted_index = MappingProxyType(
            {token: frozenset(ids) for token, ids in inverted_index.items()}
        )
        self._positions = {entry_id: i for i, entry_id in enumerate(self._entries)}
        self._built_at = time.time()

        for token, ids in self._inverted_index.items():
            unknown = ids.difference(self._entries)
            if unknown:
                raise ValueError(
                    f"Token {token!r} references unknown entries: {sorted(unknown)}"
                )

    @property
    def entries(self) -> Mapping[str, SearchEntry]:
        """Read-only mapping from entry id to entry."""
        return self._entries

    @property
    def inverted_index(self) -> Mapping[str, FrozenSet[str]]:
        """Read-only mapping from normalized token to entry ids."""
        return self._inverted_index

    def lookup(self, token: str) -> FrozenSet[str]:
        """Get the ids of entries containing a normalized token."""
        return self._inverted_index.get(token, frozenset())

    def position(self, entry_id: str) -> int:
        """Get the position of an entry in the original entry list."""
        return self._positions[entry_id]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    def get_stats(self) -> Dict[str, Any]:
        """Get index statistics."""
        return {
            "total_entries": len(self._entries),
            "total_tokens": len(self._inverted_index),
            "total_postings": sum(len(ids) for ids in self._inverted_index.values()),
            "built_at": self._built_at,
        }


class IndexBuilder:
    """Builds a SearchIndex from a list of documentation entries."""

    def __init__(self, normalizer: Optional[TextNormalizer] = None) -> None:
        """
        Initialize the builder.

        Args:
            normalizer: Normalizer shared with the search engine
        """
        self.normalizer = normalizer or TextNormalizer()

    def build(self, entries: Iterable[EntryLike]) -> SearchIndex:
        """
        Build an index from documentation entries.

        Title and content are tokenized word by word. Each keyword is
        normalized as a whole, so a multi-word keyword is registered as a
        single phrase token.

        Args:
            entries: SearchEntry instances or mappings with the same fields

        Returns:
            A new SearchIndex

        Raises:
            pydantic.ValidationError: If a mapping is not a valid entry
            DuplicateEntryError: If two entries share an id
        """
        by_id: Dict[str, SearchEntry] = {}
        inverted: Dict[str, Set[str]] = {}

        for raw in entries:
            entry = raw if isinstance(raw, SearchEntry) else SearchEntry.model_validate(raw)
            if entry.id in by_id:
                raise DuplicateEntryError(entry.id)
            by_id[entry.id] = entry

            for token in self.entry_tokens(entry):
                inverted.setdefault(token, set()).add(entry.id)

        return SearchIndex(by_id, inverted)

    def entry_tokens(self, entry: SearchEntry) -> Set[str]:
        """
        Collect the distinct tokens an entry is registered under.

        Args:
            entry: Entry to tokenize

        Returns:
            Set of normalized tokens
        """
        tokens = set(self.normalizer.tokenize(entry.title))
        tokens.update(self.normalizer.tokenize(entry.content))

        for keyword in entry.keywords:
            normalized = self.normalizer.normalize(keyword)
            if normalized:
                tokens.add(normalized)

        return tokens


def build_search_index(entries: Iterable[EntryLike]) -> SearchIndex:
    """Build a SearchIndex with a default builder."""
    return IndexBuilder().build(entries)
