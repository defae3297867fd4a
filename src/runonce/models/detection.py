"""Language detection result model."""

from pydantic import BaseModel, ConfigDict, Field

from runonce.models.confidence import ConfidenceRange
from runonce.models.language import Language


class DetectionResult(BaseModel):
    """Confidence that a snippet is written in one language.

    Created fresh on every detection call and never persisted.
    """

    model_config = ConfigDict(frozen=True)

    language: Language
    confidence: float = Field(ge=0.0, le=1.0)

    def is_high_confidence(self, threshold: ConfidenceRange) -> bool:
        """Check whether the score is above the range's upper bound."""
        return threshold.is_high(self.confidence)

    def is_low_confidence(self, threshold: ConfidenceRange) -> bool:
        """Check whether the score is below the range's lower bound."""
        return threshold.is_low(self.confidence)

    def __repr__(self) -> str:
        return f"DetectionResult(language='{self.language}', confidence={self.confidence:.2f})"
