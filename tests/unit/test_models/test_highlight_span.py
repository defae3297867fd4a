"""Tests for highlight span model."""

import pytest
from pydantic import ValidationError

from runonce.models.highlight import HighlightSpan, TokenType


class TestHighlightSpan:
    """Test HighlightSpan model."""

    def test_end(self) -> None:
        """end should be start plus length."""
        span = HighlightSpan(start=3, length=4, type=TokenType.KEYWORD)
        assert span.end == 7

    def test_rejects_empty_span(self) -> None:
        """length must be positive."""
        with pytest.raises(ValidationError):
            HighlightSpan(start=0, length=0, type=TokenType.STRING)

    def test_rejects_negative_start(self) -> None:
        """start must not be negative."""
        with pytest.raises(ValidationError):
            HighlightSpan(start=-1, length=1, type=TokenType.NUMBER)

    def test_overlaps(self) -> None:
        """Intersecting ranges overlap; touching ranges do not."""
        a = HighlightSpan(start=0, length=5, type=TokenType.COMMENT)
        b = HighlightSpan(start=4, length=2, type=TokenType.KEYWORD)
        c = HighlightSpan(start=5, length=2, type=TokenType.KEYWORD)

        assert a.overlaps(b)
        assert b.overlaps(a)
        assert not a.overlaps(c)
        assert not c.overlaps(a)

    def test_text(self) -> None:
        """text should slice the highlighted source."""
        span = HighlightSpan(start=4, length=3, type=TokenType.KEYWORD)
        assert span.text("not def x") == "def"

    def test_equality(self) -> None:
        """Spans with the same fields should compare equal."""
        assert HighlightSpan(start=1, length=2, type="string") == HighlightSpan(
            start=1, length=2, type=TokenType.STRING
        )
