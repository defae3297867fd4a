"""Tests for RunOnce error types."""

from runonce.errors import (
    ConfigurationError,
    InvalidArgumentError,
    LaunchError,
    PreconditionError,
    RunOnceError,
    ScriptWriteError,
)


class TestErrorHierarchy:
    """Test error class hierarchy."""

    def test_all_errors_inherit_from_runonce_error(self) -> None:
        """All custom errors should inherit from RunOnceError."""
        assert issubclass(ConfigurationError, RunOnceError)
        assert issubclass(InvalidArgumentError, RunOnceError)
        assert issubclass(PreconditionError, RunOnceError)
        assert issubclass(ScriptWriteError, RunOnceError)
        assert issubclass(LaunchError, RunOnceError)

    def test_runonce_error_inherits_from_exception(self) -> None:
        """RunOnceError should inherit from Exception."""
        assert issubclass(RunOnceError, Exception)


class TestPreconditionError:
    """Test PreconditionError specifics."""

    def test_stores_argument_name(self) -> None:
        """PreconditionError should name the rejected argument."""
        error = PreconditionError("Code must not be empty", "code")
        assert error.argument == "code"
        assert str(error) == "Code must not be empty"


class TestScriptWriteError:
    """Test ScriptWriteError specifics."""

    def test_stores_file_path(self) -> None:
        """ScriptWriteError should store the file path."""
        error = ScriptWriteError("Cannot create temporary file", "/work/__RunOnceTMP__.py")
        assert error.file_path == "/work/__RunOnceTMP__.py"
        assert str(error) == "Cannot create temporary file"


class TestLaunchError:
    """Test LaunchError specifics."""

    def test_stores_executable(self) -> None:
        """LaunchError should store the terminal executable."""
        error = LaunchError("Cannot start terminal process", "wt.exe")
        assert error.executable == "wt.exe"
        assert str(error) == "Cannot start terminal process"
