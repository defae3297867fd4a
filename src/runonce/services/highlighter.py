"""Syntax highlighting span analysis.

Tokenizes a snippet in four passes of decreasing priority: comments,
strings, numbers, keywords. Every accepted span claims its range, and a
later candidate overlapping any claimed range is dropped, so the result
never contains overlapping spans.
"""

from loguru import logger

from runonce.models.highlight import HighlightSpan, TokenType
from runonce.models.language import Language, parse_language
from runonce.services.highlight_rules import (
    COMMENT_PREFIX_PATTERNS,
    COMMENTS,
    KEYWORD_PATTERNS,
    NUMBER_RE,
    STRINGS,
)
from runonce.utils.intervals import IntervalSet


def _is_word_char(c: str) -> bool:
    return c.isalnum() or c == "_"


class _SpanCollector:
    """Accumulates spans and the ranges they occupy."""

    def __init__(self) -> None:
        self.spans: list[HighlightSpan] = []
        self.occupied = IntervalSet()

    def is_occupied(self, start: int, end: int) -> bool:
        return self.occupied.overlaps(start, end)

    def claim(self, start: int, end: int, token_type: TokenType) -> bool:
        """Accept ``[start, end)`` as a span unless it overlaps a claimed range."""
        if not self.occupied.try_add(start, end):
            return False
        self.spans.append(HighlightSpan(start=start, length=end - start, type=token_type))
        return True


class Highlighter:
    """Computes non-overlapping highlight spans for supported languages."""

    @staticmethod
    def supports(language: str | Language | None) -> bool:
        """Check whether a language has highlighting tables."""
        resolved = parse_language(language)
        return resolved is not None and resolved in KEYWORD_PATTERNS

    def analyze(self, code: str | None, language: str | Language | None) -> list[HighlightSpan]:
        """Compute highlight spans for a snippet.

        Args:
            code: Snippet to analyze; None or empty yields no spans.
            language: Language identifier in any case. Blank or
                unsupported identifiers yield no spans.

        Returns:
            Spans sorted by start then length, pairwise non-overlapping.
        """
        if not code:
            return []

        resolved = parse_language(language)
        if resolved is None or resolved not in KEYWORD_PATTERNS:
            return []

        collector = _SpanCollector()
        self._analyze_comments(code, resolved, collector)
        self._analyze_strings(code, resolved, collector)
        self._analyze_numbers(code, collector)
        self._analyze_keywords(code, resolved, collector)

        logger.trace("Highlighted {} spans for {} chars of {}", len(collector.spans), len(code), resolved)
        return sorted(collector.spans, key=lambda s: (s.start, s.length))

    @staticmethod
    def _analyze_comments(code: str, language: Language, collector: _SpanCollector) -> None:
        syntax = COMMENTS.get(language)
        if syntax is None:
            return

        if syntax.multi_line is not None:
            _scan_delimited(code, syntax.multi_line, TokenType.COMMENT, collector, skip_occupied_start=False)

        for pattern in COMMENT_PREFIX_PATTERNS[language]:
            search_start = 0
            while search_start < len(code):
                match = pattern.search(code, search_start)
                if match is None:
                    break

                start = match.start()
                line_end = code.find("\n", start)
                span_end = line_end if line_end >= 0 else len(code)
                if collector.claim(start, span_end, TokenType.COMMENT):
                    search_start = span_end + 1
                else:
                    # Prefix sits inside a block comment; a real one may follow on this line.
                    search_start = start + 1

    @staticmethod
    def _analyze_strings(code: str, language: Language, collector: _SpanCollector) -> None:
        syntax = STRINGS.get(language)
        if syntax is None:
            return

        for delimiters in syntax.multi_line:
            _scan_delimited(code, delimiters, TokenType.STRING, collector, skip_occupied_start=True)

        for delimiter in syntax.delimiters:
            spans_lines = delimiter in syntax.raw_delimiters
            search_start = 0
            while search_start < len(code):
                start = code.find(delimiter, search_start)
                if start < 0:
                    break

                if collector.is_occupied(start, start + 1):
                    search_start = start + 1
                    continue

                span_end = _find_string_end(code, start, delimiter, syntax.supports_escape, spans_lines)
                if collector.claim(start, span_end, TokenType.STRING):
                    search_start = span_end
                else:
                    # Runs into an earlier comment or string; not a literal.
                    search_start = start + 1

    @staticmethod
    def _analyze_numbers(code: str, collector: _SpanCollector) -> None:
        for match in NUMBER_RE.finditer(code):
            collector.claim(match.start(), match.end(), TokenType.NUMBER)

    @staticmethod
    def _analyze_keywords(code: str, language: Language, collector: _SpanCollector) -> None:
        for pattern in KEYWORD_PATTERNS[language]:
            search_start = 0
            while search_start < len(code):
                match = pattern.search(code, search_start)
                if match is None:
                    break

                start, end = match.start(), match.end()
                word_start = start == 0 or not _is_word_char(code[start - 1])
                word_end = end >= len(code) or not _is_word_char(code[end])
                if word_start and word_end:
                    collector.claim(start, end, TokenType.KEYWORD)

                search_start = start + 1


def _scan_delimited(
    code: str,
    delimiters: tuple[str, str],
    token_type: TokenType,
    collector: _SpanCollector,
    *,
    skip_occupied_start: bool,
) -> None:
    """Claim every ``start ... end`` region; an unterminated one runs to end of input."""
    start_delim, end_delim = delimiters
    search_start = 0
    while search_start < len(code):
        start = code.find(start_delim, search_start)
        if start < 0:
            break

        if skip_occupied_start and collector.is_occupied(start, start + 1):
            search_start = start + 1
            continue

        end = code.find(end_delim, start + len(start_delim))
        span_end = end + len(end_delim) if end >= 0 else len(code)
        collector.claim(start, span_end, token_type)
        search_start = span_end


def _find_string_end(code: str, start: int, delimiter: str, supports_escape: bool, spans_lines: bool) -> int:
    """Return the exclusive end offset of the string opened at ``start``."""
    current = start + 1
    while current < len(code):
        c = code[current]

        if c == "\n" and not spans_lines:
            return current

        if supports_escape and c == "\\" and current + 1 < len(code):
            current += 2
            continue

        if c == delimiter:
            return current + 1

        current += 1

    return len(code)


_default_highlighter = Highlighter()


def analyze(code: str | None, language: str | Language | None) -> list[HighlightSpan]:
    """Compute highlight spans with the shared highlighter."""
    return _default_highlighter.analyze(code, language)
