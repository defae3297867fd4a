"""RunOnce error types.

All custom exceptions inherit from RunOnceError to allow
catching any RunOnce-specific error.
"""


class RunOnceError(Exception):
    """Base exception for all RunOnce errors."""

    pass


class ConfigurationError(RunOnceError):
    """Invalid configuration."""

    pass


class InvalidArgumentError(RunOnceError):
    """Invalid argument passed to a detection or highlight query."""

    pass


class PreconditionError(RunOnceError):
    """Script execution was rejected before any side effect."""

    def __init__(self, message: str, argument: str) -> None:
        super().__init__(message)
        self.argument = argument


class ScriptWriteError(RunOnceError):
    """Temporary script file could not be written."""

    def __init__(self, message: str, file_path: str) -> None:
        super().__init__(message)
        self.file_path = file_path


class LaunchError(RunOnceError):
    """Terminal process could not be started."""

    def __init__(self, message: str, executable: str) -> None:
        super().__init__(message)
        self.executable = executable
