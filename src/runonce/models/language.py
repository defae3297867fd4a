"""Supported script languages and their file extensions."""

from enum import StrEnum
from types import MappingProxyType


class Language(StrEnum):
    """Script languages RunOnce can detect, highlight or run.

    Member order is the enumeration order used wherever results are
    reported without ranking (e.g. detection of blank input).
    """

    BAT = "bat"
    POWERSHELL = "powershell"
    PWSH = "pwsh"
    PYTHON = "python"
    LUA = "lua"
    NIM = "nim"
    PHP = "php"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    GO = "go"
    VBSCRIPT = "vbscript"


FILE_EXTENSIONS: MappingProxyType[Language, str] = MappingProxyType(
    {
        Language.BAT: ".bat",
        Language.POWERSHELL: ".ps1",
        Language.PWSH: ".ps1",
        Language.PYTHON: ".py",
        Language.LUA: ".lua",
        Language.NIM: ".nim",
        Language.PHP: ".php",
        Language.JAVASCRIPT: ".js",
        Language.TYPESCRIPT: ".ts",
        Language.GO: ".go",
        Language.VBSCRIPT: ".vbs",
    }
)


def canonicalize(value: str) -> str:
    """Normalize a language identifier (strip surrounding whitespace, lowercase)."""
    return value.strip().lower()


def parse_language(value: "str | Language | None") -> Language | None:
    """Resolve a user-supplied identifier to a Language.

    Args:
        value: Identifier in any case, possibly padded with whitespace.

    Returns:
        The matching Language, or None if value is None, blank or unknown.
    """
    if value is None:
        return None
    if isinstance(value, Language):
        return value
    try:
        return Language(canonicalize(value))
    except ValueError:
        return None


def file_extension(language: Language) -> str:
    """Return the script file extension (with leading dot) for a language."""
    return FILE_EXTENSIONS[language]


def file_extensions() -> dict[Language, str]:
    """Return a mutable copy of the whole extension table."""
    return dict(FILE_EXTENSIONS)
