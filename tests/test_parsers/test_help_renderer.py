from pathlib import Path

import pytest
from rich.console import Console

from flagyard.parser.flag_parser import FlagParser
from flagyard.parser.help import FLAG_COLUMN_WIDTH, HelpRenderer, format_help, render_help
from flagyard.parser.registry import FlagRegistry, define_flag


@pytest.fixture
def registry():
    registry = FlagRegistry()
    define_flag(
        "--language",
        "-l",
        default="english,french,german",
        placeholder="LANG",
        help="Languages to print",
        registry=registry,
    )
    define_flag(
        "--big-menu",
        "-b",
        default=False,
        placeholder="IGNORED",
        help="Include big menu",
        registry=registry,
    )
    define_flag(
        "--file", type=Path, placeholder="PATH", help="Output file", registry=registry
    )
    return registry


def test_rows_sorted_by_long_name(registry):
    rows = HelpRenderer(registry, program="prog").get_rows(plain_text=True)
    assert [row.split("--")[1].split()[0] for row in rows] == ["big-menu", "file", "language"]


def test_row_layout(registry):
    rows = HelpRenderer(registry, program="prog").get_rows(plain_text=True)
    assert rows[0] == "  -b, --big-menu" + " " * 16 + " Include big menu"
    assert rows[1] == "      --file PATH" + " " * 15 + " Output file"
    assert rows[2] == (
        "  -l, --language LANG" + " " * 11
        + " Languages to print (default: english,french,german)"
    )


def test_bool_flags_hide_placeholder(registry):
    text = format_help(registry, program="prog")
    assert "IGNORED" not in text
    assert "PATH" in text


def test_flag_without_default_shows_no_default(registry):
    rows = HelpRenderer(registry, program="prog").get_rows(plain_text=True)
    assert "default" not in rows[1]


def test_long_flag_column_wraps_help():
    registry = FlagRegistry()
    define_flag(
        "--a-very-long-flag-name-indeed",
        default="x",
        placeholder="VALUE",
        help="Some help",
        registry=registry,
    )
    rows = HelpRenderer(registry, program="prog").get_rows(plain_text=True)
    first, second = rows[0].split("\n")
    assert first == "      --a-very-long-flag-name-indeed VALUE"
    assert second == " " * (FLAG_COLUMN_WIDTH + 3) + "Some help (default: x)"


def test_format_help(registry):
    text = format_help(registry, program="prog", description="Print a menu.")
    lines = text.splitlines()
    assert lines[0] == "usage: prog [flags] [args ...]"
    assert "Print a menu." in lines
    assert "flags:" in lines
    assert text.index("--big-menu") < text.index("--file") < text.index("--language")
    assert "\x1b[" not in text


def test_format_help_escapes_markup():
    registry = FlagRegistry()
    define_flag("--mode", default="[auto]", help="One of [auto] or [manual]", registry=registry)
    text = format_help(registry, program="prog")
    assert "One of [auto] or [manual] (default: [auto])" in text


def test_empty_registry():
    text = format_help(FlagRegistry(), program="prog")
    assert "no flags defined." in text


def test_render_help_to_console(registry, capsys):
    render_help(registry, program="prog")
    captured = capsys.readouterr()
    assert "usage: prog" in captured.out
    assert "Include big menu" in captured.out
    assert "-l, --language LANG" in captured.out


def test_render_help_to_custom_console(registry, tmp_path):
    path = tmp_path / "help.txt"
    with path.open("w", encoding="UTF-8") as handle:
        sink = Console(file=handle, width=120, color_system=None)
        render_help(registry, console=sink, program="prog")
    assert "Output file" in path.read_text(encoding="UTF-8")


def test_render_does_not_touch_values(registry):
    FlagParser(registry).parse(["--language=spanish"])
    format_help(registry, program="prog")
    assert registry.find_by_long("language").value == "spanish"
    assert "(default: english,french,german)" in format_help(registry, program="prog")
