"""Script execution pipeline.

Writes a snippet to a temporary file in the caller's working directory and
starts a terminal that runs it, waits for the user to acknowledge the
output, then deletes the file. The pipeline returns once the terminal has
started; running the script and cleaning up belong to the terminal.
"""

from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from runonce.config.models import ExecutionConfig
from runonce.errors import LaunchError, PreconditionError, ScriptWriteError
from runonce.models.language import Language, file_extension, parse_language
from runonce.ports.launcher import LaunchRequest, ProcessLauncherPort
from runonce.services.terminal import SubprocessLauncher, build_launch_request


def build_execute_command(command: str, temp_file: Path) -> str:
    """Command that runs the script with the language's interpreter."""
    return f'{command} "{temp_file}"'


def build_cleanup_command(temp_file: Path) -> str:
    """Command that force-deletes the temporary script."""
    return f'del /f /q "{temp_file}"'


def combine_commands(execute_command: str, cleanup_command: str) -> str:
    """Run, wait for acknowledgment, then clean up."""
    return f"{execute_command} & pause & {cleanup_command}"


class ScriptExecutor:
    """Fire-and-forget script runner.

    Two executions sharing a working directory and prefix write the same
    temporary file; callers running concurrently must vary one of them.
    """

    def __init__(
        self,
        config: ExecutionConfig | None = None,
        launcher: ProcessLauncherPort | None = None,
        languages: Iterable[Language] | None = None,
    ) -> None:
        """Initialize executor.

        Args:
            config: Execution settings; defaults to ExecutionConfig().
            launcher: Process start boundary; defaults to SubprocessLauncher.
            languages: Languages accepted by execute; defaults to all.
        """
        self.config = config or ExecutionConfig()
        self.launcher = launcher or SubprocessLauncher()
        self.languages = frozenset(Language if languages is None else languages)

    def temp_file_path(self, language: Language, working_directory: Path) -> Path:
        """Path of the temporary script for a language."""
        return working_directory / f"{self.config.temp_file_prefix}{file_extension(language)}"

    def compose_command(self, language: Language, temp_file: Path) -> str:
        """Full terminal command: execute, pause, clean up."""
        execute_command = build_execute_command(self.config.command_for(language), temp_file)
        return combine_commands(execute_command, build_cleanup_command(temp_file))

    def execute(self, code: str, language: str | Language, working_directory: str | Path) -> None:
        """Write the snippet to a temp file and run it in a new terminal.

        Args:
            code: Script text, must be non-empty.
            language: Supported language identifier in any case.
            working_directory: Existing directory for the temp file and terminal.

        Raises:
            PreconditionError: If an argument is missing or invalid. Nothing
                is written or started.
            ScriptWriteError: If the temporary file cannot be written.
            LaunchError: If the terminal process cannot be started.
        """
        resolved_language, directory = self._validate(code, language, working_directory)

        temp_file = self._write_temp_file(code, resolved_language, directory)
        command = self.compose_command(resolved_language, temp_file)
        request = build_launch_request(self.config, command, directory)
        self._launch(request)

    def _validate(
        self, code: str | None, language: str | Language | None, working_directory: str | Path | None
    ) -> tuple[Language, Path]:
        if code is None:
            raise PreconditionError("Code must not be None", "code")
        if language is None:
            raise PreconditionError("Language must not be None", "language")
        if working_directory is None:
            raise PreconditionError("Working directory must not be None", "working_directory")

        if code == "":
            raise PreconditionError("Code must not be empty", "code")

        if not str(language).strip():
            raise PreconditionError("Language must not be blank", "language")
        resolved = parse_language(language)
        if resolved is None or resolved not in self.languages:
            raise PreconditionError(f"Unsupported language: {language}", "language")

        if not str(working_directory).strip():
            raise PreconditionError("Working directory must not be blank", "working_directory")
        directory = Path(working_directory)
        if not directory.is_dir():
            raise PreconditionError(f"Working directory does not exist: {directory}", "working_directory")

        return resolved, directory

    def _write_temp_file(self, code: str, language: Language, directory: Path) -> Path:
        path = self.temp_file_path(language, directory)
        try:
            with path.open("w", encoding="utf-8", newline="") as f:
                f.write(code)
        except OSError as e:
            logger.error("Failed to write temporary script {}: {}", path, e)
            raise ScriptWriteError(f"Cannot create temporary file: {path}", str(path)) from e

        logger.debug("Wrote temporary script {}", path)
        return path

    def _launch(self, request: LaunchRequest) -> None:
        try:
            self.launcher.launch(request)
        except OSError as e:
            logger.error("Failed to start terminal {}: {}", request.executable, e)
            raise LaunchError("Cannot start terminal process", request.executable) from e

        logger.info("Launched {} in {}", request.executable, request.working_directory)
