# flagyard - MIT Licensed
"""
Provides `FlagRegistry`, the process-wide collection of declared flags, and
`define_flag()`, the registration API used at declaration sites.

Flags are declared where they are used, typically at module level:

    # myapp/render.py
    from flagyard import define_flag

    BIG_MENU = define_flag("--big-menu", default=False, help="Include big menu")

Importing the module registers the flag into the global `registry`. All
declaring modules must be imported before parsing starts; `import_flag_modules()`
makes that an explicit bootstrap step. Once a parser starts, the registry is
sealed and further registration fails with `RegistryClosedError`.

Duplicate long or short names raise `DuplicateFlagError` at registration time,
so a clash aborts startup instead of leaving one flag unreachable.

Public Interface:
- register(flag): Append a flag, rejecting duplicates.
- find_by_long(name) / find_by_short(char): Lookup for the parser.
- all(): Flags in registration order.
- sorted(): Flags sorted by long name for display.
- seal(): Close the registry to further registration.
- to_dict(): Mapping of storage identifier to value.
"""
from __future__ import annotations

from typing import Any, Iterator

from flagyard.exceptions import DuplicateFlagError, RegistryClosedError
from flagyard.logger import logger
from flagyard.parser.flag import Flag
from flagyard.utils import MISSING, strip_long_prefix, strip_short_prefix


class FlagRegistry:
    """
    Append-only, ordered collection of `Flag` descriptors with name indices.

    Attributes:
        _flags (list[Flag]): Flags in registration order.
        _by_long (dict[str, Flag]): Long name → flag.
        _by_short (dict[str, Flag]): Short name → flag.
        _sealed (bool): True once parsing has begun.
    """

    def __init__(self) -> None:
        self._flags: list[Flag] = []
        self._by_long: dict[str, Flag] = {}
        self._by_short: dict[str, Flag] = {}
        self._sealed: bool = False

    def register(self, flag: Flag) -> Flag:
        """
        Register a flag.

        Args:
            flag (Flag): The flag to add.

        Returns:
            Flag: The same flag, for assignment at the declaration site.

        Raises:
            RegistryClosedError: If parsing has already begun.
            DuplicateFlagError: If the long or short name is already taken.
        """
        if self._sealed:
            raise RegistryClosedError(
                f"Cannot register '--{flag.long_name}': parsing has already begun. "
                "Declare flags before calling parse()."
            )
        existing = self._by_long.get(flag.long_name)
        if existing is not None:
            raise DuplicateFlagError(
                f"Flag '--{flag.long_name}' is already registered by {existing}"
            )
        if flag.short_name is not None:
            existing = self._by_short.get(flag.short_name)
            if existing is not None:
                raise DuplicateFlagError(
                    f"Short flag '-{flag.short_name}' for '--{flag.long_name}' "
                    f"is already used by '--{existing.long_name}'"
                )
            self._by_short[flag.short_name] = flag
        self._by_long[flag.long_name] = flag
        self._flags.append(flag)
        logger.debug("Registered flag %s", flag.get_flags_text())
        return flag

    def find_by_long(self, name: str) -> Flag | None:
        return self._by_long.get(strip_long_prefix(name))

    def find_by_short(self, char: str) -> Flag | None:
        return self._by_short.get(strip_short_prefix(char))

    def all(self) -> list[Flag]:
        """Return all flags in registration order."""
        return list(self._flags)

    def sorted(self) -> list[Flag]:
        """Return all flags sorted by long name (case-sensitive, code-point order)."""
        return sorted(self._flags, key=lambda flag: flag.long_name)

    def seal(self) -> None:
        if not self._sealed:
            logger.debug("Sealing flag registry with %d flags", len(self._flags))
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def to_dict(self) -> dict[str, Any]:
        """Return `dest -> value` for every flag that currently has a value."""
        values = {}
        for flag in self._flags:
            value = flag.get(MISSING)
            if value is not MISSING:
                values[flag.dest] = value
        return values

    def reset_values(self) -> None:
        """Forget every parsed value, keeping registrations."""
        for flag in self._flags:
            flag.reset()

    def clear(self) -> None:
        """Drop every registration and reopen the registry."""
        self._flags.clear()
        self._by_long.clear()
        self._by_short.clear()
        self._sealed = False

    def __len__(self) -> int:
        return len(self._flags)

    def __iter__(self) -> Iterator[Flag]:
        return iter(list(self._flags))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and strip_long_prefix(name) in self._by_long

    def __str__(self) -> str:
        short = sum(flag.short_name is not None for flag in self._flags)
        present = sum(flag.is_present() for flag in self._flags)
        return (
            f"FlagRegistry(flags={len(self._flags)}, short={short}, "
            f"present={present}, sealed={self._sealed})"
        )

    def __repr__(self) -> str:
        return str(self)


registry = FlagRegistry()


def get_registry() -> FlagRegistry:
    """Return the process-wide registry."""
    return registry


def define_flag(
    long_name: str,
    short_name: str | None = None,
    *,
    default: Any = MISSING,
    type: Any = None,
    help: str = "",
    placeholder: str | None = None,
    registry: FlagRegistry | None = None,
) -> Flag:
    """
    Declare a flag and register it.

    Args:
        long_name (str): Long name, with or without the leading `--`.
        short_name (str | None): Optional single character, with or without `-`.
        default (Any): Pre-coerced default value. Omit for "no default".
        type (Any): Value type or `Coercer`. Inferred from `default` when omitted.
        help (str): Help text.
        placeholder (str | None): Label for the value in help output.
        registry (FlagRegistry | None): Target registry; the global one by default.

    Returns:
        Flag: The registered flag.

    Raises:
        FlagDefinitionError: On an invalid declaration.
        DuplicateFlagError: If a name is already registered.
        RegistryClosedError: If parsing has already begun.
    """
    flag = Flag.declare(
        long_name,
        short_name,
        default=default,
        type=type,
        help=help,
        placeholder=placeholder,
    )
    target = registry if registry is not None else get_registry()
    return target.register(flag)
