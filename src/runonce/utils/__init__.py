"""RunOnce utility modules."""

from runonce.utils.intervals import IntervalSet
from runonce.utils.logging import configure_logging

__all__ = [
    "IntervalSet",
    "configure_logging",
]
