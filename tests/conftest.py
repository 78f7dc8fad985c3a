"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from typing import Sequence
from unittest.mock import MagicMock

import pytest

from src.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from src.container import DependencyContainer
from src.entities.Operation import ConflictDecision
from src.ports.prompt.conflict_prompt_port import ConflictPromptPort
from src.use_cases.files.file_operations import FileOperationEngine


class ScriptedConflictPrompt(ConflictPromptPort):
    """Conflict prompt answering from a fixed list of decisions."""

    def __init__(self, *decisions: ConflictDecision):
        self.decisions = list(decisions)
        self.calls: list[tuple[str, str, tuple[ConflictDecision, ...]]] = []

    def ask(
        self, title: str, message: str, options: Sequence[ConflictDecision]
    ) -> ConflictDecision:
        self.calls.append((title, message, tuple(options)))
        if not self.decisions:
            raise AssertionError(f"Unexpected prompt: {title}")
        return self.decisions.pop(0)


def _write(path: str, content: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w") as f:
        f.write(content)


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def tree(tmp_path):
    """
    Create a source tree src/{a.txt, sub/b.txt} and an empty dst directory.

    Returns:
        Tuple of (source directory, destination directory)
    """
    source = tmp_path / "src"
    destination = tmp_path / "dst"
    _write(str(source / "a.txt"), "alpha")
    _write(str(source / "sub" / "b.txt"), "beta")
    destination.mkdir()
    return str(source), str(destination)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def file_repository(mock_logger):
    return LocalFileSystemAdapter(mock_logger)


@pytest.fixture
def scripted_prompt():
    return ScriptedConflictPrompt()


@pytest.fixture
def engine(file_repository, scripted_prompt, mock_logger):
    return FileOperationEngine(file_repository, scripted_prompt, mock_logger)


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
