"""Lexical tables for syntax highlighting.

Only languages listed in KEYWORDS can be highlighted; analysis of any other
language yields no spans.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType

from runonce.models.language import Language


@dataclass(frozen=True)
class CommentSyntax:
    """Comment delimiters of a language."""

    single_line_prefixes: tuple[str, ...]
    multi_line: tuple[str, str] | None = None


@dataclass(frozen=True)
class StringSyntax:
    """String literal delimiters of a language.

    ``multi_line`` holds ``(start, end)`` pairs scanned before the
    single-character delimiters. ``raw_delimiters`` are single-character
    delimiters whose strings may span lines.
    """

    delimiters: tuple[str, ...]
    supports_escape: bool = False
    multi_line: tuple[tuple[str, str], ...] = ()
    raw_delimiters: frozenset[str] = frozenset()


NUMBER_RE = re.compile(
    r"\b(?:0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+"
    r"|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)\b"
)

KEYWORDS: MappingProxyType[Language, tuple[str, ...]] = MappingProxyType(
    {
        Language.BAT: (
            "call", "cd", "chdir", "cls", "cmd", "color", "copy", "del", "dir", "echo", "else",
            "endlocal", "equ", "errorlevel", "exist", "exit", "for", "geq", "goto", "gtr", "if",
            "in", "leq", "lss", "md", "mkdir", "move", "neq", "not", "nul", "path", "pause", "popd",
            "pushd", "rd", "rem", "ren", "rename", "rmdir", "set", "setlocal", "shift", "start",
            "title", "type", "ver", "verify", "vol",
        ),
        Language.POWERSHELL: (
            "Begin", "Break", "Catch", "Class", "Continue", "Data", "Define", "Do", "DynamicParam",
            "Else", "ElseIf", "End", "Exit", "Filter", "Finally", "For", "ForEach", "From", "Function",
            "If", "In", "Param", "Process", "Return", "Switch", "Throw", "Trap", "Try", "Until",
            "Using", "While", "Workflow",
        ),
        Language.PYTHON: (
            "False", "None", "True", "and", "as", "assert", "async", "await", "break", "class",
            "continue", "def", "del", "elif", "else", "except", "finally", "for", "from", "global",
            "if", "import", "in", "is", "lambda", "nonlocal", "not", "or", "pass", "raise",
            "return", "try", "while", "with", "yield",
        ),
        Language.LUA: (
            "and", "break", "do", "else", "elseif", "end", "false", "for", "function", "goto",
            "if", "in", "local", "nil", "not", "or", "repeat", "return", "then", "true", "until",
            "while",
        ),
        Language.NIM: (
            "addr", "and", "as", "asm", "bind", "block", "break", "case", "cast", "concept", "const",
            "continue", "converter", "defer", "discard", "distinct", "div", "do", "elif", "else",
            "end", "enum", "except", "export", "finally", "for", "from", "func", "if", "import", "in",
            "include", "interface", "is", "isnot", "iterator", "let", "macro", "method", "mixin",
            "mod", "nil", "not", "notin", "object", "of", "or", "out", "proc", "ptr", "raise", "ref",
            "return", "shl", "shr", "static", "template", "try", "tuple", "type", "using", "var",
            "when", "while", "xor", "yield",
        ),
        Language.GO: (
            "break", "case", "chan", "const", "continue", "default", "defer", "else", "fallthrough",
            "for", "func", "go", "goto", "if", "import", "interface", "map", "package", "range",
            "return", "select", "struct", "switch", "type", "var",
        ),
    }
)  # fmt: skip

CASE_INSENSITIVE_KEYWORDS: frozenset[Language] = frozenset({Language.BAT, Language.POWERSHELL})

COMMENTS: MappingProxyType[Language, CommentSyntax] = MappingProxyType(
    {
        Language.BAT: CommentSyntax(("REM ", "rem ", "::")),
        Language.POWERSHELL: CommentSyntax(("#",), ("<#", "#>")),
        Language.PYTHON: CommentSyntax(("#",)),
        Language.LUA: CommentSyntax(("--",), ("--[[", "]]")),
        Language.NIM: CommentSyntax(("#",), ("#[", "]#")),
        Language.GO: CommentSyntax(("//",), ("/*", "*/")),
    }
)

STRINGS: MappingProxyType[Language, StringSyntax] = MappingProxyType(
    {
        Language.BAT: StringSyntax(('"',)),
        Language.POWERSHELL: StringSyntax(('"', "'")),
        Language.PYTHON: StringSyntax(
            ('"', "'"), supports_escape=True, multi_line=(('"""', '"""'), ("'''", "'''"))
        ),
        Language.LUA: StringSyntax(('"', "'"), multi_line=(("[[", "]]"),)),
        Language.NIM: StringSyntax(('"',), supports_escape=True, multi_line=(('"""', '"""'),)),
        Language.GO: StringSyntax(('"', "'", "`"), raw_delimiters=frozenset({"`"})),
    }
)


def _keyword_patterns(language: Language) -> tuple[re.Pattern[str], ...]:
    flags = re.IGNORECASE if language in CASE_INSENSITIVE_KEYWORDS else 0
    return tuple(re.compile(re.escape(keyword), flags) for keyword in KEYWORDS[language])


KEYWORD_PATTERNS: MappingProxyType[Language, tuple[re.Pattern[str], ...]] = MappingProxyType(
    {language: _keyword_patterns(language) for language in KEYWORDS}
)

COMMENT_PREFIX_PATTERNS: MappingProxyType[Language, tuple[re.Pattern[str], ...]] = MappingProxyType(
    {
        language: tuple(
            re.compile(re.escape(prefix), re.IGNORECASE) for prefix in syntax.single_line_prefixes
        )
        for language, syntax in COMMENTS.items()
    }
)
