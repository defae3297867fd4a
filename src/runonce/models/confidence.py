"""Confidence thresholds for language detection results."""

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_LOWER_BOUND = 0.7
DEFAULT_UPPER_BOUND = 0.95


class ConfidenceLevel(StrEnum):
    """Band a confidence score falls into relative to a ConfidenceRange."""

    LOW = "low"
    MIDDLE = "middle"
    HIGH = "high"


class ConfidenceRange(BaseModel):
    """Immutable [lower, upper] window splitting scores into low/middle/high.

    A score below ``lower`` is low, above ``upper`` is high, and anything
    in the closed interval between them is middle.
    """

    model_config = ConfigDict(frozen=True)

    lower: float = Field(default=DEFAULT_LOWER_BOUND, ge=0.0, le=1.0)
    upper: float = Field(default=DEFAULT_UPPER_BOUND, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def validate_order(self) -> Self:
        """Validate that the lower bound does not exceed the upper bound."""
        if self.lower > self.upper:
            raise ValueError("lower bound must not be greater than upper bound")
        return self

    def is_low(self, confidence: float) -> bool:
        """Check whether a score falls below the lower bound."""
        return confidence < self.lower

    def is_high(self, confidence: float) -> bool:
        """Check whether a score exceeds the upper bound."""
        return confidence > self.upper

    def is_middle(self, confidence: float) -> bool:
        """Check whether a score lies within the closed window."""
        return self.lower <= confidence <= self.upper

    def classify(self, confidence: float) -> ConfidenceLevel:
        """Place a confidence score in its band."""
        if self.is_middle(confidence):
            return ConfidenceLevel.MIDDLE
        if self.is_low(confidence):
            return ConfidenceLevel.LOW
        return ConfidenceLevel.HIGH
