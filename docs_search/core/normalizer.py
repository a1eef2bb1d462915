"""Text normalization utilities for consistent token comparison."""

import re
from typing import List


# Anything that is neither a word character nor whitespace counts as punctuation
PUNCTUATION_REGEX = re.compile(r"[^\w\s]")

WHITESPACE_REGEX = re.compile(r"\s+")

# Token boundaries: runs of whitespace or non-word characters
TOKEN_SPLIT_REGEX = re.compile(r"\W+")


class TextNormalizer:
    """Canonicalizes tokens so index keys and query terms compare equal."""

    def normalize(self, term: str) -> str:
        """
        Normalize a single token or short phrase.

        Lowercases the input, removes punctuation and trims surrounding
        whitespace. Normalizing an already normalized string returns it
        unchanged.

        Args:
            term: Raw token or phrase

        Returns:
            Normalized token
        """
        if not term:
            return ""

        normalized = term.lower()
        normalized = PUNCTUATION_REGEX.sub("", normalized)

        # Collapse inner whitespace so phrases compare equal
        normalized = WHITESPACE_REGEX.sub(" ", normalized)

        return normalized.strip()

    def tokenize(self, text: str) -> List[str]:
        """
        Split free text into normalized tokens.

        Args:
            text: Input text such as a title, body or query

        Returns:
            List of non-empty normalized tokens, in text order
        """
        if not text:
            return []

        tokens = []
        for piece in TOKEN_SPLIT_REGEX.split(text):
            token = self.normalize(piece)
            if token:
                tokens.append(token)

        return tokens


_default_normalizer = TextNormalizer()


def normalize(term: str) -> str:
    """Normalize a term with the default normalizer."""
    return _default_normalizer.normalize(term)


def tokenize(text: str) -> List[str]:
    """Tokenize text with the default normalizer."""
    return _default_normalizer.tokenize(text)
