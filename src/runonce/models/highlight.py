"""Syntax highlighting span models."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class TokenType(StrEnum):
    """Categories of highlighted text."""

    KEYWORD = "keyword"
    STRING = "string"
    COMMENT = "comment"
    NUMBER = "number"


class HighlightSpan(BaseModel):
    """A highlighted character range ``[start, start + length)`` of the source."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    length: int = Field(gt=0)
    type: TokenType

    @property
    def end(self) -> int:
        """Exclusive end offset."""
        return self.start + self.length

    def overlaps(self, other: "HighlightSpan") -> bool:
        """Check whether two half-open ranges intersect."""
        return self.start < other.end and self.end > other.start

    def text(self, code: str) -> str:
        """Slice the highlighted text out of the analyzed source."""
        return code[self.start : self.end]
