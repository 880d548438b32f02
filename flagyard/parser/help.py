# flagyard - MIT Licensed
"""
Renders help text for every flag in a registry.

Flags are listed sorted by long name using case-sensitive, code-point ordering
(`--Zeta` sorts before `--alpha`). Each row shows the short name column, the long
name, the placeholder for non-boolean flags, the help text, and the default for
non-boolean flags that have one. Rows whose flag column overflows push the help
text onto the next line.

Rendering never terminates the process; see `flagyard.runtime.print_help_and_exit`.
"""
from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.markup import escape

from flagyard.console import console as default_console
from flagyard.parser.flag import Flag
from flagyard.parser.registry import FlagRegistry, get_registry
from flagyard.themes import get_theme
from flagyard.utils import get_program_invocation

FLAG_COLUMN_WIDTH = 30


class HelpRenderer:
    """
    Renders registry help to a rich `Console`.

    Attributes:
        registry (FlagRegistry): Flags to document.
        console (Console): Output sink.
        program (str): Program name for the usage line.
        description (str): Optional text printed below the usage line.
    """

    def __init__(
        self,
        registry: FlagRegistry | None = None,
        console: Console | None = None,
        program: str | None = None,
        description: str = "",
    ) -> None:
        self.registry: FlagRegistry = registry if registry is not None else get_registry()
        self.console: Console = console if console is not None else default_console
        self.program: str = program or get_program_invocation()
        self.description: str = description

    def get_usage(self) -> str:
        return f"usage: {self.program} [flags] [args ...]"

    def get_flag_column(self, flag: Flag, plain_text: bool = False) -> tuple[str, int]:
        """
        Build the flag column for one row.

        Returns:
            tuple[str, int]: The (possibly styled) column text and its printed width.
        """
        short = f"-{flag.short_name}, " if flag.short_name else "    "
        long = f"--{flag.long_name}"
        placeholder = (
            f" {flag.placeholder}" if flag.placeholder and not flag.is_bool else ""
        )
        width = len(short) + len(long) + len(placeholder)
        if plain_text:
            return f"{short}{long}{placeholder}", width

        text = "    "
        if flag.short_name:
            text = f"[flag.short]{escape(short.rstrip(' ,'))}[/], "
        text += f"[flag.long]{escape(long)}[/]"
        if placeholder:
            text += f" [flag.placeholder]{escape(placeholder.strip())}[/]"
        return text, width

    def get_help_text(self, flag: Flag, plain_text: bool = False) -> str:
        help_text = flag.help if plain_text else escape(flag.help)
        if flag.is_bool or not flag.has_default:
            return help_text
        default = flag.coercer.format(flag.default)
        if plain_text:
            default_text = f"(default: {default})"
        else:
            default_text = f"[flag.default](default: {escape(default)})[/]"
        return f"{help_text} {default_text}" if help_text else default_text

    def get_rows(self, plain_text: bool = False) -> list[str]:
        rows = []
        for flag in self.registry.sorted():
            column, width = self.get_flag_column(flag, plain_text)
            help_text = self.get_help_text(flag, plain_text)
            if help_text and width > FLAG_COLUMN_WIDTH:
                rows.append(f"  {column}\n{'':<{FLAG_COLUMN_WIDTH + 3}}{help_text}")
                continue
            padding = " " * max(FLAG_COLUMN_WIDTH - width, 0)
            rows.append(f"  {column}{padding} {help_text}".rstrip())
        return rows

    def render(self) -> None:
        """Print formatted help for every registered flag."""
        self.console.print(f"[usage]{escape(self.get_usage())}[/]\n")
        if self.description:
            self.console.print(escape(self.description) + "\n")
        if not len(self.registry):
            self.console.print("no flags defined.")
            return
        self.console.print("[bold]flags:[/bold]")
        for row in self.get_rows():
            self.console.print(row)

    def format_help(self, width: int = 100) -> str:
        """Return the help text without styling."""
        buffer = StringIO()
        plain = Console(
            file=buffer,
            width=width,
            color_system=None,
            theme=get_theme(),
            highlight=False,
        )
        HelpRenderer(self.registry, plain, self.program, self.description).render()
        return buffer.getvalue()


def render_help(
    registry: FlagRegistry | None = None,
    console: Console | None = None,
    program: str | None = None,
    description: str = "",
) -> None:
    """Render help for `registry` (the global one by default) to `console`."""
    HelpRenderer(registry, console, program, description).render()


def format_help(
    registry: FlagRegistry | None = None,
    program: str | None = None,
    description: str = "",
    width: int = 100,
) -> str:
    """Return help for `registry` as plain text."""
    return HelpRenderer(registry, None, program, description).format_help(width)
