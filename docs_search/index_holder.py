"""Owner of the current search index for a running service."""

from typing import Iterable, Optional

import structlog

from .core.index import EntryLike, IndexBuilder, SearchIndex

logger = structlog.get_logger(__name__)


class IndexHolder:
    """
    Holds one immutable SearchIndex reference.

    Rebuilding constructs a complete new index first and then replaces the
    reference in a single assignment, so readers see either the old or the
    new index and never a partially built one.
    """

    def __init__(self, builder: Optional[IndexBuilder] = None) -> None:
        """
        Initialize the holder with an empty index.

        Args:
            builder: Index builder used for rebuilds
        """
        self.builder = builder or IndexBuilder()
        self._index = self.builder.build([])

    @property
    def index(self) -> SearchIndex:
        """The current index."""
        return self._index

    def rebuild(self, entries: Iterable[EntryLike]) -> SearchIndex:
        """
        Build a new index from entries and swap it in.

        Args:
            entries: Complete entry list of the new corpus snapshot

        Returns:
            The new index

        Raises:
            pydantic.ValidationError: If an entry is malformed
            DuplicateEntryError: If two entries share an id
        """
        index = self.builder.build(entries)
        self._index = index

        stats = index.get_stats()
        logger.info(
            "Search index swapped",
            total_entries=stats["total_entries"],
            total_tokens=stats["total_tokens"],
        )
        return index
