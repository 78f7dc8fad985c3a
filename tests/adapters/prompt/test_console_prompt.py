"""
Tests for the console adapters drawn with rich.
"""

import io
from unittest.mock import patch

import pytest
from rich.console import Console

from src.adapters.console.rich_renderer import RichConsoleRenderer
from src.adapters.prompt.console_prompt import ConsoleConflictPrompt
from src.entities.Notification import Notification
from src.entities.Operation import ConflictDecision
from src.use_cases.files.file_operations import RETRY_SKIP_ABORT
from src.use_cases.files.list_directory import DirectoryPage


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=40, highlight=False)


class TestConsoleConflictPrompt:
    """Test cases for the ConsoleConflictPrompt."""

    def test_choice_maps_to_decision(self, console, mock_logger):
        prompt = ConsoleConflictPrompt(console, mock_logger)

        with patch("src.adapters.prompt.console_prompt.Prompt.ask", return_value="2") as ask:
            decision = prompt.ask("File is in use", "a.txt is locked", RETRY_SKIP_ABORT)

        assert decision is ConflictDecision.SKIP
        assert ask.call_args.kwargs["choices"] == ["1", "2", "3"]
        output = console.file.getvalue()
        assert "File is in use" in output
        assert "1. try again" in output
        assert "3. abort the operation" in output
        mock_logger.info.assert_called_once()

    def test_requires_options(self, console, mock_logger):
        prompt = ConsoleConflictPrompt(console, mock_logger)

        with pytest.raises(ValueError, match="At least one option"):
            prompt.ask("title", "message", ())


class TestRichConsoleRenderer:
    """Test cases for the RichConsoleRenderer."""

    def test_render_page(self, console):
        renderer = RichConsoleRenderer(3, "#", console)
        page = DirectoryPage("/home", 1, 2, ["[D] docs", "[F] a.txt", "[F] b.txt"])

        renderer.render(page, Notification.warning("Careful"))

        output = console.file.getvalue()
        assert "#" * 40 in output
        assert "> /home" in output
        assert "[D] docs" in output
        assert "page 1 of 2" in output
        assert "! Careful !" in output

    def test_render_without_directory(self, console):
        renderer = RichConsoleRenderer(2, "=", console)

        renderer.render(DirectoryPage(None, 1, 0), Notification.error("No drive"))

        output = console.file.getvalue()
        assert "> ???" in output
        assert "page" not in output
        assert "!!! No drive !!!" in output

    def test_read_command(self, console):
        renderer = RichConsoleRenderer(2, "=", console)

        with patch("builtins.input", return_value='gotd "/"'):
            assert renderer.read_command() == 'gotd "/"'
