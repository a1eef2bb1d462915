"""Unit tests for the search engine core functionality."""

import pytest
from docs_search.core.engine import DEFAULT_WEIGHTS, ScoreWeights, SearchEngine, search_docs
from docs_search.core.index import build_search_index
from docs_search.models.entry import SearchEntry
from docs_search.models.response import SearchResult


def make_entry(entry_id, title, content, keywords=(), category="guide"):
    """Build an entry with a path derived from its id."""
    return SearchEntry(
        id=entry_id,
        title=title,
        content=content,
        path=f"/docs/{entry_id}",
        category=category,
        keywords=list(keywords),
    )


class TestSearchEngine:
    """Test cases for the SearchEngine class."""

    @pytest.fixture
    def engine(self):
        """Create a search engine instance for testing."""
        return SearchEngine()

    @pytest.fixture
    def index(self):
        """Sample documentation index."""
        return build_search_index([
            make_entry(
                "1",
                "Authentication Guide",
                "Learn how to authenticate with the API using tokens.",
                ["auth", "token", "security"],
            ),
            make_entry(
                "2",
                "REST API",
                "Complete reference for the REST API endpoints.",
                ["api", "rest", "endpoints"],
                category="reference",
            ),
            make_entry(
                "3",
                "Deployment",
                "Deploy your application to production.",
                ["deploy", "production", "hosting"],
            ),
        ])

    def test_finds_title_match(self, engine, index):
        """Test that a title word finds its entry first."""
        results = engine.search(index, "Authentication")

        assert len(results) > 0
        assert results[0].entry.id == "1"
        assert isinstance(results[0], SearchResult)

    def test_title_outranks_content(self, engine, index):
        """Test that a title match ranks above a content-only match."""
        results = engine.search(index, "API")
        scores = {result.entry.id: result.score for result in results}

        assert results[0].entry.id == "2"
        assert scores["2"] > scores["1"]

    def test_keyword_only_match(self, engine, index):
        """Test that a term present only in keywords is found."""
        results = engine.search(index, "security")

        assert len(results) > 0
        assert results[0].entry.id == "1"
        assert results[0].score == DEFAULT_WEIGHTS.keyword

    def test_respects_limit(self, engine, index):
        """Test that results are truncated to the limit."""
        results = engine.search(index, "the", 1)
        assert len(results) <= 1

    def test_non_positive_limit(self, engine, index):
        """Test that a zero limit yields nothing."""
        assert engine.search(index, "api", 0) == []

    def test_empty_query(self, engine, index):
        """Test that empty and blank queries return nothing."""
        assert engine.search(index, "") == []
        assert engine.search(index, "   ") == []

    def test_no_match_query(self, engine, index):
        """Test that an unmatched query returns nothing."""
        assert engine.search(index, "xyznonexistent") == []

    def test_punctuation_only_query(self, engine, index):
        """Test that a query without word characters returns nothing."""
        assert engine.search(index, "?!...") == []

    def test_empty_corpus(self, engine):
        """Test searching an empty index."""
        assert engine.search(build_search_index([]), "api") == []

    def test_query_is_normalized(self, engine, index):
        """Test that casing and punctuation in the query are ignored."""
        results = engine.search(index, "DEPLOYMENT!")
        assert results[0].entry.id == "3"

    def test_scores_accumulate_across_terms(self, engine, index):
        """Test that each matching term adds to the score."""
        single = engine.search(index, "rest")
        double = engine.search(index, "rest endpoints")

        assert double[0].entry.id == "2"
        assert double[0].score > single[0].score

    def test_repeated_terms_count_once(self, engine, index):
        """Test that repeating a query word does not inflate scores."""
        once = engine.search(index, "deploy")
        twice = engine.search(index, "deploy deploy")

        assert once[0].score == twice[0].score

    def test_descending_scores(self, engine, index):
        """Test that results are sorted by descending score."""
        results = engine.search(index, "api rest tokens the")
        scores = [result.score for result in results]

        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_input_order(self, engine):
        """Test that equal scores keep the original entry order."""
        index = build_search_index([
            make_entry(f"entry-{i}", f"Common Title {i}", "Shared content.") for i in range(5)
        ])

        results = engine.search(index, "common")

        assert [result.entry.id for result in results] == [f"entry-{i}" for i in range(5)]

    def test_defaults_to_limit_of_ten(self, engine):
        """Test the default result limit."""
        index = build_search_index([
            make_entry(f"entry-{i}", f"Common Title {i}", "Shared common content here.", ["common"])
            for i in range(20)
        ])

        results = engine.search(index, "common")

        assert len(results) == 10

    def test_multi_word_keyword_phrase(self, engine):
        """Test that a multi-word keyword matches as a phrase."""
        index = build_search_index([
            make_entry("w", "Webhooks", "Receive events.", ["signing secret"]),
            make_entry("s", "Secrets", "Rotate a secret.", []),
        ])

        results = engine.search(index, "Signing Secret")

        assert results[0].entry.id == "w"
        assert results[0].score == DEFAULT_WEIGHTS.keyword

    def test_custom_weights(self):
        """Test searching with a custom weight table."""
        engine = SearchEngine(weights=ScoreWeights(title=10.0, keyword=5.0, content=1.0))
        index = build_search_index([make_entry("1", "Billing", "Invoices and billing.", ["payments"])])

        assert engine.search(index, "billing")[0].score == 10.0
        assert engine.search(index, "payments")[0].score == 5.0
        assert engine.search(index, "invoices")[0].score == 1.0

    def test_module_helper(self, index):
        """Test the module-level search shortcut."""
        results = search_docs(index, "deployment")
        assert results[0].entry.id == "3"


class TestScoreWeights:
    """Test cases for the weight table."""

    def test_default_ordering(self):
        """Test that defaults respect title > keyword > content."""
        assert DEFAULT_WEIGHTS.title > DEFAULT_WEIGHTS.keyword > DEFAULT_WEIGHTS.content > 0

    @pytest.mark.parametrize("title,keyword,content", [
        (1.0, 2.0, 3.0),
        (3.0, 3.0, 1.0),
        (3.0, 2.0, 0.0),
    ])
    def test_rejects_bad_ordering(self, title, keyword, content):
        """Test that weights violating the ordering are rejected."""
        with pytest.raises(ValueError):
            ScoreWeights(title=title, keyword=keyword, content=content)


class TestQueryTerms:
    """Test cases for query tokenization."""

    def test_single_word(self):
        """Test a one-word query."""
        assert SearchEngine().query_terms("API") == ["api"]

    def test_phrase_added_for_multiple_words(self):
        """Test that multi-word queries add the whole phrase."""
        assert SearchEngine().query_terms("Signing Secret") == ["signing", "secret", "signing secret"]

    def test_duplicates_removed(self):
        """Test that repeated words appear once."""
        assert SearchEngine().query_terms("api API") == ["api"]

    def test_repeated_word_adds_no_phrase(self):
        """Test that a repeated single word is not looked up as a phrase."""
        assert SearchEngine().query_terms("deploy deploy deploy") == ["deploy"]

    def test_hyphenated_query_matches_normalized_keyword(self):
        """Test that the phrase is the normalized query, as keywords are."""
        assert SearchEngine().query_terms("rest-api") == ["rest", "api", "restapi"]
