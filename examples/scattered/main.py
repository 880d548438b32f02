"""
Flags declared in separate modules of the `kitchen` package, parsed in one place.

    python examples/scattered/main.py --big-menu -l spanish extra
    python examples/scattered/main.py --verbose --color never
    python examples/scattered/main.py --help
"""
import logging
from pathlib import Path

from flagyard import (
    define_flag,
    get_registry,
    import_flag_modules,
    parse_or_exit,
    print_help_and_exit,
    setup_logging,
)

HELP = define_flag("--help", "-h", default=False, help="Show this help message")
FILE = define_flag("--file", "-f", type=Path, placeholder="PATH", help="Write the menu here")
VERBOSE = define_flag(
    "--verbose", "-v", default=False, help="Log the parsed flags and later debug output"
)

logger = logging.getLogger("kitchen")


def main() -> None:
    setup_logging(mode="cli")
    kitchen = import_flag_modules("kitchen")[0]
    positional = parse_or_exit()
    if HELP.value:
        print_help_and_exit(0, description="Print a menu.")
    if VERBOSE.value:
        # flags are only known after parsing, so the handler is lowered now
        setup_logging(mode="cli", console_log_level=logging.DEBUG)
        logger.debug("Parsed flags: %s", get_registry().to_dict())
        logger.debug("Positional arguments: %s", positional)

    from kitchen.colors import COLOR
    from kitchen.menu import menu

    lines = menu() + positional
    if FILE.is_present():
        FILE.value.write_text("\n".join(lines) + "\n", encoding="UTF-8")
        logger.debug("Wrote %d lines to %s", len(lines), FILE.value)
    else:
        print(f"{kitchen.__name__} menu (color={COLOR.value.value}):")
        for line in lines:
            print(f"  {line}")


if __name__ == "__main__":
    main()
