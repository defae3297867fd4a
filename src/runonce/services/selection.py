"""Pre-execution language selection policy.

Decides, from the top detection result and the user's settings, whether
the user has to confirm or pick the language before a snippet runs.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from runonce.config.models import LanguageSelectorMode, SelectorConfig
from runonce.errors import InvalidArgumentError
from runonce.models.confidence import ConfidenceRange
from runonce.models.detection import DetectionResult
from runonce.models.language import Language


def should_show_selector(
    top: DetectionResult, mode: LanguageSelectorMode, confidence_range: ConfidenceRange
) -> bool:
    """Check whether the language selector must be shown for a detection.

    Args:
        top: Highest ranked detection result.
        mode: Selector display mode from settings.
        confidence_range: Thresholds splitting low/middle/high confidence.
    """
    if mode == LanguageSelectorMode.ALWAYS_SHOW:
        return True
    if mode == LanguageSelectorMode.SHOW_ONLY_WHEN_NO_CONFIDENCE:
        return top.is_low_confidence(confidence_range)
    return not top.is_high_confidence(confidence_range)


@dataclass(frozen=True)
class LanguageChoice:
    """Outcome of the selection policy for one snippet."""

    suggested: Language
    confidence: float
    show_selector: bool
    confirm: bool
    candidates: tuple[Language, ...]


def choose_language(
    results: Sequence[DetectionResult],
    selector: SelectorConfig,
    confidence_range: ConfidenceRange,
) -> LanguageChoice:
    """Apply the selection policy to ranked detection results.

    Args:
        results: Detection results, best first.
        selector: Selector mode and confirmation setting.
        confidence_range: Thresholds splitting low/middle/high confidence.

    Raises:
        InvalidArgumentError: If results is empty.
    """
    if not results:
        raise InvalidArgumentError("Detection results must not be empty")

    top = results[0]
    return LanguageChoice(
        suggested=top.language,
        confidence=top.confidence,
        show_selector=should_show_selector(top, selector.mode, confidence_range),
        confirm=selector.confirm_before_execution,
        candidates=tuple(result.language for result in results),
    )
