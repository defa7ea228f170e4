"""
Tests for the console command line interface.
"""

from unittest.mock import MagicMock, patch

import pytest

from console_emulator.cli_console import main, run_interactive
from console_emulator.exceptions import ConsoleInitializationError


@pytest.fixture
def cli_container(make_console):
    """Patch the CLI container so consoles run over the in-memory file system."""
    with patch("console_emulator.cli_console.container") as mock_container:
        mock_container.create_console.side_effect = (
            lambda user=None, buffer_size=None, root_directory=None: make_console(
                user=user or "alice",
                buffer_size=buffer_size or 10,
                root_directory=root_directory or "/root",
            )
        )
        yield mock_container


class TestCommandMode:
    """Test cases for -c mode."""

    def test_prints_each_output(self, cli_container, capsys):
        exit_code = main(["-c", "pwd", "-c", "whoami", "-c", "cd sub"])

        assert exit_code == 0
        assert capsys.readouterr().out == "/root\nalice\n"

    def test_options_are_passed_to_container(self, cli_container, capsys):
        main(["--user", "bob", "--buffer-size", "3", "--directory", "/root/sub", "-c", "pwd"])

        cli_container.create_console.assert_called_once_with(
            user="bob", buffer_size=3, root_directory="/root/sub"
        )
        assert capsys.readouterr().out == "/root/sub\n"

    def test_show_content(self, cli_container, capsys):
        """Test that --show-content prints the rendered buffer."""
        main(["-c", "cd sub", "-c", "pwd", "--show-content"])

        assert capsys.readouterr().out.rstrip() == (
            "alice@android:/root$ cd sub\n"
            "alice@android:/root/sub$ pwd\n"
            "/root/sub\n"
            "alice@android:/root/sub$"
        )

    def test_output_is_not_marked_up(self, cli_container, capsys):
        main(["-c", 'echo "[bold]x[/bold]"'])

        assert capsys.readouterr().out == "[bold]x[/bold]\n"

    def test_invalid_buffer_size(self, cli_container, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--buffer-size", "0", "-c", "pwd"])

        assert exc_info.value.code == 2
        assert "--buffer-size must be >= 1" in capsys.readouterr().err

    def test_empty_user(self, cli_container, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--user", " ", "-c", "whoami"])

        assert exc_info.value.code == 2
        assert "--user cannot be empty" in capsys.readouterr().err

    def test_initialization_error(self, capsys):
        """Test that an unusable directory is reported on stderr."""
        with patch("console_emulator.cli_console.container") as mock_container:
            mock_container.create_console.side_effect = ConsoleInitializationError(
                "Unable to create console: '/missing' does not exist."
            )

            exit_code = main(["--directory", "/missing", "-c", "pwd"])

        assert exit_code == 2
        assert "'/missing' does not exist." in capsys.readouterr().err


class TestInteractiveMode:
    """Test cases for the read-eval-print loop."""

    def _terminal(self, lines):
        term = MagicMock()
        term.input.side_effect = list(lines) + [EOFError()]
        return term

    def test_runs_until_eof(self, make_console):
        term = self._terminal(["pwd", "", "whoami"])
        console = make_console()

        assert run_interactive(term, console) == 0

        printed = [call.args[0] for call in term.out.call_args_list]
        assert printed == ["/root", "alice"]
        term.input.assert_any_call("alice@android:/root$ ", markup=False)

    def test_exit_stops_the_loop(self, make_console):
        term = self._terminal(["exit", "pwd"])
        console = make_console()

        run_interactive(term, console)

        term.out.assert_not_called()
        assert console.history == ()

    def test_keyboard_interrupt_stops_the_loop(self, make_console):
        term = MagicMock()
        term.input.side_effect = KeyboardInterrupt()

        assert run_interactive(term, make_console()) == 0

    def test_clear_clears_the_terminal(self, make_console):
        term = self._terminal(["pwd", "clear"])

        run_interactive(term, make_console())

        term.clear.assert_called_once()
