"""Query term highlighting and excerpt extraction for display."""

import re
from typing import Optional, Pattern


DEFAULT_MARKER = "**"
ELLIPSIS = "..."


class Highlighter:
    """Wraps query term occurrences in emphasis markers."""

    def __init__(self, open_marker: str = DEFAULT_MARKER, close_marker: Optional[str] = None) -> None:
        """
        Initialize the highlighter.

        Args:
            open_marker: Marker inserted before each match
            close_marker: Marker inserted after each match, defaults to open_marker
        """
        self.open_marker = open_marker
        self.close_marker = open_marker if close_marker is None else close_marker

    def highlight(self, text: str, query: str) -> str:
        """
        Emphasize every case-insensitive occurrence of each query term.

        Terms are matched literally. All terms are applied in a single
        left-to-right pass; at a given position the longest term wins, and
        highlighted text is never matched again.

        Args:
            text: Text to highlight
            query: Whitespace-separated query terms

        Returns:
            Highlighted text, or text unchanged when nothing matches
        """
        pattern = self._compile(query)
        if not text or pattern is None:
            return text

        return pattern.sub(
            lambda match: f"{self.open_marker}{match.group(0)}{self.close_marker}",
            text,
        )

    def excerpt(self, text: str, query: str, radius: int = 80, highlight: bool = False) -> str:
        """
        Cut a window of text around the first matched query term.

        Args:
            text: Full text, typically an entry's content
            query: Whitespace-separated query terms
            radius: Characters kept on each side of the match
            highlight: Emphasize query terms inside the window; the ellipses
                are added afterwards and never highlighted

        Returns:
            Excerpt on word boundaries, with ellipses where text was cut
        """
        if not text:
            return text

        pattern = self._compile(query)
        match = pattern.search(text) if pattern is not None else None

        if match is None:
            match_start, match_end = 0, 0
            start, end = 0, min(len(text), 2 * radius)
        else:
            match_start, match_end = match.start(), match.end()
            start = max(0, match_start - radius)
            end = min(len(text), match_end + radius)

        # Move inward to the nearest word boundary
        if start > 0:
            space = text.find(" ", start, match_start)
            if space != -1:
                start = space + 1
        if end < len(text):
            space = text.rfind(" ", match_end, end)
            if space != -1:
                end = space

        snippet = text[start:end].strip()
        if highlight:
            snippet = self.highlight(snippet, query)
        if start > 0:
            snippet = ELLIPSIS + snippet
        if end < len(text):
            snippet = snippet + ELLIPSIS

        return snippet

    def _compile(self, query: str) -> Optional[Pattern[str]]:
        """Build one case-insensitive alternation of the literal query terms."""
        terms = (query or "").split()

        if not terms:
            return None

        terms.sort(key=len, reverse=True)
        return re.compile("|".join(re.escape(term) for term in terms), re.IGNORECASE)


_default_highlighter = Highlighter()


def highlight_matches(text: str, query: str) -> str:
    """Highlight query terms with the default markers."""
    return _default_highlighter.highlight(text, query)
