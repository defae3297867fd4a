"""Pydantic configuration models for RunOnce."""

from enum import StrEnum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from runonce.models.confidence import ConfidenceRange
from runonce.models.language import Language, canonicalize

DEFAULT_TEMP_FILE_PREFIX = "__RunOnceTMP__"

DEFAULT_COMMANDS: MappingProxyType[Language, str] = MappingProxyType(
    {
        Language.BAT: "cmd /c",
        Language.POWERSHELL: "powershell -ExecutionPolicy Bypass -File",
        Language.PWSH: "pwsh -ExecutionPolicy Bypass -File",
        Language.PYTHON: "python",
        Language.LUA: "lua",
        Language.NIM: "nim r",
        Language.PHP: "php",
        Language.JAVASCRIPT: "node",
        Language.TYPESCRIPT: "npx ts-node",
        Language.GO: "go run",
        Language.VBSCRIPT: "cscript //nologo",
    }
)


class TerminalType(StrEnum):
    """Terminal backends a script can be launched in."""

    WINDOWS_TERMINAL = "windows_terminal"
    CMD = "cmd"


class LanguageSelectorMode(StrEnum):
    """When to ask the user to pick a language before running."""

    ALWAYS_SHOW = "always_show"
    HIDE_WHEN_HIGH_CONFIDENCE = "hide_when_high_confidence"
    SHOW_ONLY_WHEN_NO_CONFIDENCE = "show_only_when_no_confidence"


def _canonical_key(value: Any) -> Any:
    return canonicalize(value) if isinstance(value, str) else value


class DetectionConfig(BaseModel):
    """Language detection configuration."""

    languages: list[Language] = Field(default_factory=lambda: list(Language))
    confidence: ConfidenceRange = Field(default_factory=ConfidenceRange)

    @field_validator("languages", mode="before")
    @classmethod
    def canonicalize_languages(cls, v: Any) -> Any:
        """Accept identifiers in any case or padding."""
        if isinstance(v, list | tuple):
            return [_canonical_key(item) for item in v]
        return v

    @field_validator("languages")
    @classmethod
    def validate_languages(cls, v: list[Language]) -> list[Language]:
        """Require a non-empty list without duplicates."""
        if not v:
            raise ValueError("languages must not be empty")
        if len(set(v)) != len(v):
            raise ValueError("languages must not contain duplicates")
        return v


class SelectorConfig(BaseModel):
    """Pre-execution language selector configuration."""

    mode: LanguageSelectorMode = LanguageSelectorMode.HIDE_WHEN_HIGH_CONFIDENCE
    confirm_before_execution: bool = False


class ExecutionConfig(BaseModel):
    """Script execution configuration."""

    temp_file_prefix: str = DEFAULT_TEMP_FILE_PREFIX
    terminal: TerminalType = TerminalType.WINDOWS_TERMINAL
    windows_terminal_executable: str = "wt.exe"
    cmd_executable: str = "cmd.exe"
    commands: dict[Language, str] = Field(default_factory=lambda: dict(DEFAULT_COMMANDS))

    @field_validator("temp_file_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Reject blank prefixes and characters that cannot appear in a file name."""
        if not v.strip():
            raise ValueError("temp_file_prefix must not be blank")
        if any(c in v for c in ("\0", "/", "\\")):
            raise ValueError("temp_file_prefix must not contain NUL or path separators")
        return v

    @field_validator("windows_terminal_executable", "cmd_executable")
    @classmethod
    def validate_executable(cls, v: str) -> str:
        """Reject blank executable names."""
        if not v.strip():
            raise ValueError("terminal executable must not be blank")
        return v.strip()

    @field_validator("commands", mode="before")
    @classmethod
    def canonicalize_command_keys(cls, v: Any) -> Any:
        """Accept language keys in any case or padding."""
        if isinstance(v, dict):
            return {_canonical_key(key): value for key, value in v.items()}
        return v

    @field_validator("commands")
    @classmethod
    def merge_with_defaults(cls, v: dict[Language, str]) -> dict[Language, str]:
        """Reject blank commands and fill unconfigured languages with defaults."""
        for language, command in v.items():
            if not command.strip():
                raise ValueError(f"command for '{language}' must not be blank")
        merged = dict(DEFAULT_COMMANDS)
        merged.update({language: command.strip() for language, command in v.items()})
        return merged

    def command_for(self, language: Language) -> str:
        """Return the shell command prefix that runs a script of this language."""
        return self.commands.get(language, DEFAULT_COMMANDS[language])

    def terminal_executable(self) -> str:
        """Return the executable of the selected terminal backend."""
        if self.terminal == TerminalType.CMD:
            return self.cmd_executable
        return self.windows_terminal_executable


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["console", "json"] = "console"
    file: Path | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"


class Config(BaseSettings):
    """Root configuration for RunOnce."""

    detection: DetectionConfig = Field(default_factory=DetectionConfig)
    selector: SelectorConfig = Field(default_factory=SelectorConfig)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "RUNONCE_",
        "env_nested_delimiter": "__",
    }
