"""Domain models for RunOnce."""

from runonce.models.confidence import ConfidenceLevel, ConfidenceRange
from runonce.models.detection import DetectionResult
from runonce.models.highlight import HighlightSpan, TokenType
from runonce.models.language import (
    FILE_EXTENSIONS,
    Language,
    canonicalize,
    file_extension,
    file_extensions,
    parse_language,
)

__all__ = [
    "FILE_EXTENSIONS",
    "ConfidenceLevel",
    "ConfidenceRange",
    "DetectionResult",
    "HighlightSpan",
    "Language",
    "TokenType",
    "canonicalize",
    "file_extension",
    "file_extensions",
    "parse_language",
]
