"""Rule tables for heuristic language detection.

Three kinds of evidence are recorded per language:

- definitive markers: a shebang interpreter or a syntactic anchor that
  settles the language outright;
- strong features: regular expressions typical of the language's syntax;
- weak features: bare keywords that only hint at the language.

All tables are read-only module data shared by every detector.
"""

import re
from collections.abc import Callable
from types import MappingProxyType

from runonce.models.language import Language

DEFINITIVE_SCORE = 0.98

# Score by number of strong features matched; four or more hit the cap.
STRONG_FEATURE_SCORES: tuple[float, ...] = (0.0, 0.25, 0.55, 0.85, 0.92)
STRONG_FEATURE_MAX_SCORE = STRONG_FEATURE_SCORES[-1]

WEAK_FEATURE_SCORE = 0.08
WEAK_FEATURE_MAX_SCORE = 0.35

SHEBANG_RE = re.compile(r"^#!\s*/(?:usr/(?:local/)?)?bin/(?:env\s+)?(\w+)", re.IGNORECASE)

SHEBANG_INTERPRETERS: MappingProxyType[str, Language] = MappingProxyType(
    {
        "python": Language.PYTHON,
        "python3": Language.PYTHON,
        "python2": Language.PYTHON,
        "lua": Language.LUA,
        "pwsh": Language.POWERSHELL,
        "bash": Language.BAT,
        "sh": Language.BAT,
        "nim": Language.NIM,
    }
)

_GO_PACKAGE_MAIN_RE = re.compile(r"^package\s+main\s*$", re.MULTILINE)


def _is_batch(code: str) -> bool:
    head = code[:9].lower()
    return head == "@echo off" or head[:4] == "rem "


def _is_go_main(code: str) -> bool:
    return _GO_PACKAGE_MAIN_RE.search(code) is not None


def _is_nim(code: str) -> bool:
    return "proc " in code and "=" in code and ("echo " in code or "import " in code)


# Checked in insertion order after the shebang line.
DEFINITIVE_MARKERS: MappingProxyType[Language, Callable[[str], bool]] = MappingProxyType(
    {
        Language.BAT: _is_batch,
        Language.GO: _is_go_main,
        Language.NIM: _is_nim,
    }
)

_M = re.MULTILINE
_I = re.IGNORECASE

STRONG_FEATURES: MappingProxyType[Language, tuple[re.Pattern[str], ...]] = MappingProxyType(
    {
        Language.BAT: (
            re.compile(r"^set\s+\w+=", _M | _I),
            re.compile(r"^if\s+(not\s+)?(exist|defined|errorlevel)", _M | _I),
            re.compile(r"^for\s+%%\w+\s+in\s+\(", _M | _I),
            re.compile(r"^goto\s+:\w+", _M | _I),
            re.compile(r"^:\w+", _M),
            re.compile(r"%\w+%"),
        ),
        Language.POWERSHELL: (
            re.compile(r"\$\w+\s*="),
            re.compile(r"\b(Get|Set|New|Remove|Add|Import|Export)-\w+", _I),
            re.compile(r"\bfunction\s+\w+", _I),
            re.compile(r"\bparam\s*\(", _I),
            re.compile(r"\[Parameter\s*\("),
            re.compile(r"\|\s*(Where-Object|ForEach-Object|Select-Object)", _I),
        ),
        Language.PYTHON: (
            re.compile(r"\bdef\s+\w+\s*\([^)]*\)\s*:"),
            re.compile(r"\bclass\s+\w+\s*[:\(]"),
            re.compile(r"^import\s+\w+", _M),
            re.compile(r"^from\s+\w+\s+import\s+", _M),
            re.compile(r"if\s+__name__\s*==\s*['\"]__main__['\"]"),
            re.compile(r"^\s{4}\S", _M),
        ),
        Language.LUA: (
            re.compile(r"\blocal\s+\w+\s*="),
            re.compile(r"\bfunction\s+\w+\s*\([^)]*\)"),
            re.compile(r"\bend\b"),
            re.compile(r"\bthen\b"),
            re.compile(r"\brequire\s*\(['\"]"),
            re.compile(r"\.\.(?!\.)"),
        ),
        Language.NIM: (
            re.compile(r"\bproc\s+\w+\s*\([^)]*\)"),
            re.compile(r"\bvar\s+\w+\s*:"),
            re.compile(r"\blet\s+\w+\s*="),
            re.compile(r"\becho\s+"),
            re.compile(r"\bimport\s+\w+"),
            re.compile(r"\bresult\s*="),
        ),
        Language.GO: (
            re.compile(r"\bfunc\s+\w+\s*\([^)]*\)"),
            re.compile(r"\bpackage\s+\w+"),
            re.compile(r":="),
            re.compile(r"\bimport\s+\("),
            re.compile(r"\bfmt\.(Print|Println|Printf|Sprintf)"),
            re.compile(r"\bdefer\s+"),
        ),
    }
)

# Stored lowercase; matched against the lowercased snippet.
WEAK_FEATURES: MappingProxyType[Language, tuple[str, ...]] = MappingProxyType(
    {
        Language.BAT: (
            "echo", "pause", "exit", "call", "start", "copy", "move", "del", "mkdir", "rmdir",
        ),
        Language.POWERSHELL: (
            "write-host", "write-output", "-eq", "-ne", "-gt", "-lt", "$true", "$false", "$null",
        ),
        Language.PYTHON: (
            "print", "elif", "except", "finally", "lambda", "yield", "with", "assert", "pass", "raise",
        ),
        Language.LUA: (
            "nil", "elseif", "repeat", "until", "pairs", "ipairs", "table", "string", "math",
        ),
        Language.NIM: (
            "nil", "true", "false", "and", "or", "not", "div", "mod", "shl", "shr",
        ),
        Language.GO: (
            "nil", "make", "append", "len", "cap", "range", "chan", "select", "go", "struct",
        ),
    }
)  # fmt: skip
