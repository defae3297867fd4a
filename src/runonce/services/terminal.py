"""Terminal backends and the subprocess-based process launcher."""

import shlex
import subprocess
import sys
from pathlib import Path

from loguru import logger

from runonce.config.models import ExecutionConfig, TerminalType
from runonce.ports.launcher import LaunchRequest


def build_launch_request(config: ExecutionConfig, command: str, working_directory: Path) -> LaunchRequest:
    """Describe how the configured terminal should run a composed command.

    Args:
        config: Execution settings naming the terminal and its executable.
        command: Composed ``cmd`` command line to run inside the terminal.
        working_directory: Directory the terminal starts in.

    Returns:
        LaunchRequest for the selected backend.
    """
    if config.terminal == TerminalType.CMD:
        return LaunchRequest(
            executable=config.terminal_executable(),
            arguments=f'/k "{command}"',
            working_directory=working_directory,
        )

    escaped = command.replace('"', '\\"')
    return LaunchRequest(
        executable=config.terminal_executable(),
        arguments=f'-d "{working_directory}" cmd /k "{escaped}"',
        working_directory=working_directory,
    )


class SubprocessLauncher:
    """Starts terminals with ``subprocess.Popen`` and never waits on them.

    On Windows the argument string goes to CreateProcess verbatim and the
    terminal gets its own console. Elsewhere the string is split with
    shell rules and the process starts in a new session, so it outlives
    the caller either way.
    """

    def launch(self, request: LaunchRequest) -> None:
        cwd = str(request.working_directory) if request.working_directory else None

        if sys.platform == "win32":
            process = subprocess.Popen(
                f'"{request.executable}" {request.arguments}',
                cwd=cwd,
                creationflags=subprocess.CREATE_NEW_CONSOLE,
            )
        else:
            process = subprocess.Popen(
                [request.executable, *shlex.split(request.arguments)],
                cwd=cwd,
                start_new_session=True,
            )

        logger.info("Started {} (pid={})", request.executable, process.pid)
