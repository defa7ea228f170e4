import argparse
import sys

from rich.console import Console

from console_emulator.container import container
from console_emulator.exceptions import ConsoleInitializationError
from console_emulator.use_cases.console.console_emulator import ConsoleEmulator

EXIT_COMMANDS = {"exit", "quit"}


def _print_output(term: Console, text: str) -> None:
    # out() skips markup, highlighting and wrapping so command output is shown verbatim
    if text.strip():
        term.out(text, highlight=False)


def run_interactive(term: Console, emulator: ConsoleEmulator) -> int:
    """Read commands until EOF, Ctrl-C or exit/quit."""
    while True:
        try:
            line = term.input(emulator.prompt, markup=False)
        except (EOFError, KeyboardInterrupt):
            term.print()
            break

        if not line.strip():
            continue
        if line.strip() in EXIT_COMMANDS:
            break

        output = emulator.execute(line)
        if not emulator.history:
            # Only the clear built-in leaves the history empty
            term.clear()
            continue
        _print_output(term, output)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="console-emulator",
        description=(
            "Emulated console: cd, ls, pwd, whoami, echo and clear are built in, "
            "anything else runs through the shell."
        ),
    )
    parser.add_argument(
        "--user", default=None, help="User shown in the prompt (default: CONSOLE_USER)"
    )
    parser.add_argument(
        "--buffer-size",
        type=int,
        default=None,
        help="Number of history lines kept (default: CONSOLE_BUFFER_SIZE)",
    )
    parser.add_argument(
        "--directory",
        default=None,
        help="Initial working directory (default: CONSOLE_ROOT_DIRECTORY)",
    )
    parser.add_argument(
        "-c",
        "--command",
        dest="commands",
        action="append",
        default=None,
        help="Run a command and exit instead of starting a session (repeatable)",
    )
    parser.add_argument(
        "--show-content",
        action="store_true",
        help="With -c, print the whole rendered buffer instead of each output",
    )

    args = parser.parse_args(argv)
    if args.buffer_size is not None and args.buffer_size < 1:
        parser.error("--buffer-size must be >= 1")
    if args.user is not None and not args.user.strip():
        parser.error("--user cannot be empty")

    term = Console(soft_wrap=True)
    try:
        emulator = container.create_console(
            user=args.user,
            buffer_size=args.buffer_size,
            root_directory=args.directory,
        )
    except ConsoleInitializationError as e:
        print(str(e), file=sys.stderr)
        return 2

    if not args.commands:
        return run_interactive(term, emulator)

    for command in args.commands:
        output = emulator.execute(command)
        if not args.show_content:
            _print_output(term, output)
    if args.show_content:
        term.out(emulator.get_content(), highlight=False)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
