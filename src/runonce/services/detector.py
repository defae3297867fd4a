"""Heuristic script language detection.

Scores a snippet against every supported language in three tiers:

1. Definitive markers (shebang line, then per-language anchors). A hit
   gives that language a fixed high score, zeroes every other language
   and skips the remaining tiers.
2. Strong features: the number of matching syntax patterns is mapped to a
   score through a capped step function.
3. Weak features: each keyword present adds a small, capped amount.

Detection is pure: no I/O and no mutable shared state, so one detector can
serve any number of concurrent callers.
"""

from collections.abc import Iterable

from loguru import logger

from runonce.errors import InvalidArgumentError
from runonce.models.detection import DetectionResult
from runonce.models.language import Language
from runonce.services.detection_rules import (
    DEFINITIVE_MARKERS,
    DEFINITIVE_SCORE,
    SHEBANG_INTERPRETERS,
    SHEBANG_RE,
    STRONG_FEATURE_MAX_SCORE,
    STRONG_FEATURE_SCORES,
    STRONG_FEATURES,
    WEAK_FEATURE_MAX_SCORE,
    WEAK_FEATURE_SCORE,
    WEAK_FEATURES,
)


class LanguageDetector:
    """Ranks supported languages by how likely a snippet is written in each.

    Every result list covers exactly the detector's languages, in the
    order given at construction when nothing can be ranked.
    """

    def __init__(self, languages: Iterable[Language] | None = None) -> None:
        """Initialize detector.

        Args:
            languages: Supported languages in enumeration order.
                Defaults to every Language member.

        Raises:
            InvalidArgumentError: If languages is empty or has duplicates.
        """
        resolved = tuple(Language) if languages is None else tuple(languages)
        if not resolved:
            raise InvalidArgumentError("At least one language must be supported")
        if len(set(resolved)) != len(resolved):
            raise InvalidArgumentError("Supported languages must not contain duplicates")
        self._languages = resolved

    @property
    def languages(self) -> tuple[Language, ...]:
        """Supported languages in enumeration order."""
        return self._languages

    def detect(self, code: str | None) -> list[DetectionResult]:
        """Score every supported language for a snippet.

        Args:
            code: Snippet to classify; None or blank text is allowed.

        Returns:
            One result per supported language, sorted by confidence
            descending then language identifier ascending. Blank input
            yields all-zero results in enumeration order.
        """
        if code is None or not code.strip():
            return [DetectionResult(language=lang, confidence=0.0) for lang in self._languages]

        definitive = self._check_definitive_markers(code)
        if definitive is not None:
            logger.debug("Definitive marker resolved language: {}", definitive)
            scores = {lang: DEFINITIVE_SCORE if lang == definitive else 0.0 for lang in self._languages}
        else:
            lowered = code.lower()
            scores = {
                lang: min(self._strong_score(code, lang) + self._weak_score(lowered, lang), 1.0)
                for lang in self._languages
            }

        return self._rank(scores)

    def detect_top(self, code: str | None) -> DetectionResult:
        """Return the most likely language for a snippet."""
        return self.detect(code)[0]

    def detect_top_n(self, code: str | None, count: int) -> list[DetectionResult]:
        """Return the ``count`` most likely languages for a snippet.

        Args:
            code: Snippet to classify.
            count: Number of results wanted; larger than the number of
                supported languages returns them all.

        Raises:
            InvalidArgumentError: If count is zero or negative.
        """
        if count <= 0:
            raise InvalidArgumentError(f"count must be greater than 0, got {count}")
        return self.detect(code)[:count]

    def _check_definitive_markers(self, code: str) -> Language | None:
        """Return the language settled by a shebang or anchor, if any."""
        language = self._check_shebang(code)
        if language is not None:
            return language

        for candidate, matches in DEFINITIVE_MARKERS.items():
            if candidate in self._languages and matches(code):
                return candidate
        return None

    def _check_shebang(self, code: str) -> Language | None:
        first_line = code.split("\n", 1)[0]
        match = SHEBANG_RE.match(first_line)
        if match is None:
            return None
        language = SHEBANG_INTERPRETERS.get(match.group(1).lower())
        if language is None or language not in self._languages:
            return None
        return language

    @staticmethod
    def _strong_score(code: str, language: Language) -> float:
        patterns = STRONG_FEATURES.get(language, ())
        matched = sum(1 for pattern in patterns if pattern.search(code))
        index = min(matched, len(STRONG_FEATURE_SCORES) - 1)
        return min(STRONG_FEATURE_SCORES[index], STRONG_FEATURE_MAX_SCORE)

    @staticmethod
    def _weak_score(lowered_code: str, language: Language) -> float:
        keywords = WEAK_FEATURES.get(language, ())
        present = sum(1 for keyword in keywords if keyword in lowered_code)
        return min(present * WEAK_FEATURE_SCORE, WEAK_FEATURE_MAX_SCORE)

    def _rank(self, scores: dict[Language, float]) -> list[DetectionResult]:
        results = [DetectionResult(language=lang, confidence=score) for lang, score in scores.items()]
        results.sort(key=lambda r: (-r.confidence, r.language.value))
        return results


_default_detector = LanguageDetector()


def detect(code: str | None) -> list[DetectionResult]:
    """Score every Language for a snippet with the default detector."""
    return _default_detector.detect(code)


def detect_top(code: str | None) -> DetectionResult:
    """Return the most likely Language for a snippet."""
    return _default_detector.detect_top(code)


def detect_top_n(code: str | None, count: int) -> list[DetectionResult]:
    """Return the ``count`` most likely Languages for a snippet."""
    return _default_detector.detect_top_n(code, count)
