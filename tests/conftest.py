"""Shared pytest fixtures for RunOnce tests."""

import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from runonce.ports.launcher import LaunchRequest
from runonce.utils.logging import _InterceptHandler


class RecordingLauncher:
    """Launcher that records requests instead of starting processes."""

    def __init__(self, error: OSError | None = None) -> None:
        self.error = error
        self.requests: list[LaunchRequest] = []
        self.files_at_launch: list[list[str]] = []

    def launch(self, request: LaunchRequest) -> None:
        self.requests.append(request)
        if request.working_directory is not None:
            self.files_at_launch.append(sorted(p.name for p in request.working_directory.iterdir()))
        if self.error is not None:
            raise self.error


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Restore loguru and stdlib logging after tests that reconfigure them."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
    logging.root.handlers = [h for h in logging.root.handlers if not isinstance(h, _InterceptHandler)]
    logging.root.setLevel(logging.WARNING)


@pytest.fixture
def launcher() -> RecordingLauncher:
    """Provide a launcher that records launch requests."""
    return RecordingLauncher()


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Provide an empty working directory for script execution."""
    directory = tmp_path / "work"
    directory.mkdir()
    return directory


@pytest.fixture
def sample_python_code() -> str:
    """Sample Python script."""
    return '''import os
from sys import argv


def main():
    print(argv)


if __name__ == "__main__":
    main()
'''


@pytest.fixture
def sample_batch_code() -> str:
    """Sample batch script."""
    return "@echo off\nset NAME=world\necho Hello %NAME%\npause\n"


@pytest.fixture
def sample_go_code() -> str:
    """Sample Go program."""
    return 'package main\n\nimport "fmt"\n\nfunc main() {\n\tfmt.Println("hi")\n}\n'
