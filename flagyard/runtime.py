# flagyard - MIT Licensed
"""
Process-facing helpers around `FlagParser` and `HelpRenderer`.

These are the only functions in flagyard that read `sys.argv` or terminate the
process:

- parse(): parse `sys.argv[1:]` (or given args) and return positional arguments.
- parse_or_exit(): as `parse()`, but report parse errors and exit non-zero.
- print_help_and_exit(): render help then exit with the given code.

Typical Usage:
    HELP = define_flag("--help", "-h", default=False, help="Show this help")

    def main():
        import_flag_modules("myapp")
        args = parse_or_exit()
        if HELP.value:
            print_help_and_exit(0)
"""
from __future__ import annotations

import sys
from typing import NoReturn, Sequence

from rich.console import Console
from rich.markup import escape

from flagyard.console import console as default_console
from flagyard.exceptions import FlagParseError
from flagyard.logger import logger
from flagyard.parser.flag_parser import FlagParser
from flagyard.parser.help import HelpRenderer
from flagyard.parser.registry import FlagRegistry


def parse(
    args: Sequence[str] | None = None,
    registry: FlagRegistry | None = None,
) -> list[str]:
    """
    Parse the command line into the registry.

    Args:
        args (Sequence[str] | None): Tokens to parse; `sys.argv[1:]` when None.
        registry (FlagRegistry | None): Target registry; the global one when None.

    Returns:
        list[str]: Positional arguments in their original order.
    """
    if args is None:
        args = sys.argv[1:]
    return FlagParser(registry).parse(args)


def parse_or_exit(
    args: Sequence[str] | None = None,
    registry: FlagRegistry | None = None,
    exit_code: int = 2,
    console: Console | None = None,
) -> list[str]:
    """
    Parse the command line, exiting with `exit_code` on any parse error.

    The error is printed to `console` (the flagyard console by default) together
    with a hint to run `--help`.
    """
    try:
        return parse(args, registry)
    except FlagParseError as error:
        logger.debug("Command line rejected: %s", error)
        console = console if console is not None else default_console
        console.print(f"[error]error:[/] {escape(error.message)}")
        console.print("[hint]Run with --help to list the available flags.[/]")
        sys.exit(exit_code)


def print_help_and_exit(
    code: int = 0,
    registry: FlagRegistry | None = None,
    console: Console | None = None,
    program: str | None = None,
    description: str = "",
) -> NoReturn:
    """Render help for the registry and exit with `code`."""
    HelpRenderer(registry, console, program, description).render()
    sys.exit(code)
