"""Port interface for starting terminal processes."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class LaunchRequest:
    """One terminal process to start.

    ``arguments`` is a single command-line string, passed through to the
    operating system the way the terminal expects to receive it.
    """

    executable: str
    arguments: str
    working_directory: Path | None = None


@runtime_checkable
class ProcessLauncherPort(Protocol):
    """Protocol for starting external processes without waiting on them.

    Implementations must return as soon as the process has started.
    """

    def launch(self, request: LaunchRequest) -> None:
        """Start the process described by request.

        Args:
            request: Executable, argument string and working directory.

        Raises:
            OSError: If the process could not be started.
        """
        ...
