"""Ranked search over a documentation index."""

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..models.entry import SearchEntry
from ..models.response import SearchResult
from .index import SearchIndex
from .normalizer import TextNormalizer


DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class ScoreWeights:
    """Per-term weight of the highest field a term matches in."""

    title: float = 3.0
    keyword: float = 2.0
    content: float = 1.0

    def __post_init__(self) -> None:
        if not self.title > self.keyword > self.content > 0:
            raise ValueError(
                "Weights must satisfy title > keyword > content > 0, got "
                f"title={self.title}, keyword={self.keyword}, content={self.content}"
            )


DEFAULT_WEIGHTS = ScoreWeights()


class SearchEngine:
    """Search engine answering ranked queries against a SearchIndex."""

    def __init__(
        self,
        weights: ScoreWeights = DEFAULT_WEIGHTS,
        normalizer: Optional[TextNormalizer] = None,
    ) -> None:
        """
        Initialize the search engine.

        Args:
            weights: Title/keyword/content weight table
            normalizer: Normalizer shared with the index builder
        """
        self.weights = weights
        self.normalizer = normalizer or TextNormalizer()

    def search(
        self,
        index: SearchIndex,
        query: str,
        limit: int = DEFAULT_LIMIT,
    ) -> List[SearchResult]:
        """
        Search the index for entries matching a free-text query.

        Each query term adds the weight of the best field it matches in to
        the entry's score. Results are ordered by descending score; equal
        scores keep the order of the original entry list.

        Args:
            index: Index to search
            query: Free-text query
            limit: Maximum number of results to return

        Returns:
            Ranked list of SearchResult objects, possibly empty
        """
        if not query or not query.strip() or limit <= 0:
            return []

        terms = self.query_terms(query)
        scores: Dict[str, float] = {}

        for term in terms:
            for entry_id in index.lookup(term):
                entry = index.entries[entry_id]
                scores[entry_id] = scores.get(entry_id, 0.0) + self._term_weight(entry, term)

        if not scores:
            return []

        ranked = sorted(scores, key=lambda entry_id: (-scores[entry_id], index.position(entry_id)))

        return [
            SearchResult(entry=index.entries[entry_id], score=scores[entry_id])
            for entry_id in ranked[:limit]
        ]

    def query_terms(self, query: str) -> List[str]:
        """
        Turn a query into distinct normalized lookup terms.

        Multi-word queries also yield the whole normalized phrase, which is
        how multi-word keywords are matched.

        Args:
            query: Free-text query

        Returns:
            Distinct terms in query order
        """
        terms: List[str] = []
        tokens = self.normalizer.tokenize(query)

        for token in tokens:
            if token not in terms:
                terms.append(token)

        if len(terms) > 1:
            phrase = self.normalizer.normalize(query)
            if phrase and phrase not in terms:
                terms.append(phrase)

        return terms

    def _term_weight(self, entry: SearchEntry, term: str) -> float:
        """Weight of the highest-ranked field of an entry containing a term."""
        if term in self.normalizer.tokenize(entry.title):
            return self.weights.title

        if any(self.normalizer.normalize(keyword) == term for keyword in entry.keywords):
            return self.weights.keyword

        # Posted to the index through the body text
        return self.weights.content


_default_engine = SearchEngine()


def search_docs(index: SearchIndex, query: str, limit: int = DEFAULT_LIMIT) -> List[SearchResult]:
    """Search an index with the default engine."""
    return _default_engine.search(index, query, limit)
