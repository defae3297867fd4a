"""Tests for confidence thresholds and detection results."""

import pytest
from pydantic import ValidationError

from runonce.models.confidence import ConfidenceLevel, ConfidenceRange
from runonce.models.detection import DetectionResult
from runonce.models.language import Language


class TestConfidenceRange:
    """Test ConfidenceRange model."""

    def test_defaults(self) -> None:
        """Default window should be [0.7, 0.95]."""
        confidence_range = ConfidenceRange()
        assert confidence_range.lower == 0.7
        assert confidence_range.upper == 0.95

    def test_rejects_lower_above_upper(self) -> None:
        """lower must not exceed upper."""
        with pytest.raises(ValidationError, match="lower bound"):
            ConfidenceRange(lower=0.9, upper=0.5)

    def test_rejects_out_of_unit_interval(self) -> None:
        """Bounds must lie in [0, 1]."""
        with pytest.raises(ValidationError):
            ConfidenceRange(lower=-0.1)
        with pytest.raises(ValidationError):
            ConfidenceRange(upper=1.5)

    @pytest.mark.parametrize(
        ("confidence", "low", "middle", "high"),
        [
            (0.69, True, False, False),
            (0.7, False, True, False),
            (0.95, False, True, False),
            (0.96, False, False, True),
        ],
    )
    def test_band_predicates_partition_scores(
        self, confidence: float, low: bool, middle: bool, high: bool
    ) -> None:
        """Exactly one band predicate should hold for any score."""
        confidence_range = ConfidenceRange()
        assert confidence_range.is_low(confidence) is low
        assert confidence_range.is_middle(confidence) is middle
        assert confidence_range.is_high(confidence) is high

    def test_equal_bounds_allowed(self) -> None:
        """A zero-width window is valid."""
        confidence_range = ConfidenceRange(lower=0.8, upper=0.8)
        assert confidence_range.is_middle(0.8)

    def test_is_frozen(self) -> None:
        """Bounds should not be reassignable."""
        confidence_range = ConfidenceRange()
        with pytest.raises(ValidationError):
            confidence_range.lower = 0.1  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("confidence", "level"),
        [
            (0.0, ConfidenceLevel.LOW),
            (0.69, ConfidenceLevel.LOW),
            (0.7, ConfidenceLevel.MIDDLE),
            (0.95, ConfidenceLevel.MIDDLE),
            (0.96, ConfidenceLevel.HIGH),
            (1.0, ConfidenceLevel.HIGH),
        ],
    )
    def test_classify_bounds_inclusive(self, confidence: float, level: ConfidenceLevel) -> None:
        """Both bounds belong to the middle band."""
        assert ConfidenceRange().classify(confidence) == level


class TestDetectionResult:
    """Test DetectionResult model."""

    def test_confidence_must_be_in_unit_interval(self) -> None:
        """Confidence outside [0, 1] should be rejected."""
        with pytest.raises(ValidationError):
            DetectionResult(language=Language.PYTHON, confidence=1.01)
        with pytest.raises(ValidationError):
            DetectionResult(language=Language.PYTHON, confidence=-0.01)

    def test_language_from_identifier(self) -> None:
        """Language may be given as its identifier."""
        result = DetectionResult(language="lua", confidence=0.5)
        assert result.language == Language.LUA

    def test_confidence_predicates(self) -> None:
        """High and low checks should delegate to the range."""
        confidence_range = ConfidenceRange()

        high = DetectionResult(language=Language.BAT, confidence=0.98)
        low = DetectionResult(language=Language.BAT, confidence=0.3)
        middle = DetectionResult(language=Language.BAT, confidence=0.8)

        assert high.is_high_confidence(confidence_range)
        assert not high.is_low_confidence(confidence_range)
        assert low.is_low_confidence(confidence_range)
        assert not middle.is_high_confidence(confidence_range)
        assert not middle.is_low_confidence(confidence_range)

    def test_repr(self) -> None:
        """repr should show language and rounded confidence."""
        result = DetectionResult(language=Language.GO, confidence=0.25)
        assert repr(result) == "DetectionResult(language='go', confidence=0.25)"
