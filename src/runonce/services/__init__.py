"""RunOnce services layer.

Services implement detection, highlighting and execution on top of the
domain models and ports.
"""

from runonce.services.detector import LanguageDetector, detect, detect_top, detect_top_n
from runonce.services.executor import ScriptExecutor
from runonce.services.highlighter import Highlighter, analyze
from runonce.services.selection import LanguageChoice, choose_language, should_show_selector
from runonce.services.terminal import SubprocessLauncher, build_launch_request

__all__ = [
    "Highlighter",
    "LanguageChoice",
    "LanguageDetector",
    "ScriptExecutor",
    "SubprocessLauncher",
    "analyze",
    "build_launch_request",
    "choose_language",
    "detect",
    "detect_top",
    "detect_top_n",
    "should_show_selector",
]
