# flagyard - MIT Licensed
"""
Value coercion for flagyard flags.

Every flag owns a `Coercer`: an object with a single `parse()` operation that turns
the raw command-line token (`RawArgument`) into a typed value, or raises
`CoercionError` with a human-readable message. The parser only ever talks to this
interface, so built-in and user-defined types travel the same dispatch path.

Built-in coercers:
- BoolCoercer: `true`/`false` (and yes/no, on/off, 1/0), case-insensitive.
- IntCoercer: strict decimal integers with optional bit width and signedness.
  Ready-made widths: `int8`, `int16`, `int32`, `int64`, `uint8`, `uint16`,
  `uint32`, `uint64`.
- FloatCoercer, StrCoercer, PathCoercer (no existence check).
- EnumCoercer: resolves a member by name or value.
- ChoiceCoercer: one of a fixed set of strings (used for `Literal[...]`).
- DateTimeCoercer: free-form dates via `dateutil`.
- CallableCoercer: adapts any callable that raises ValueError/TypeError on bad input.

Custom types subclass `Coercer`:

    class ColorCoercer(Coercer):
        name = "color"

        def parse(self, raw: RawArgument) -> Color:
            try:
                return Color[raw.as_str().upper()]
            except KeyError:
                raise CoercionError("expected one of never, always, auto") from None

`coercer_for()` maps a Python type (or an existing coercer) onto a coercer, and
`infer_coercer()` does the same from a default value.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, EnumMeta
from pathlib import Path, PurePath
from typing import Any, Callable, Literal, get_args, get_origin

from dateutil import parser as date_parser

from flagyard.exceptions import CoercionError


@dataclass(frozen=True)
class RawArgument:
    """The literal text of one flag value, as it appeared on the command line."""

    text: str

    def as_str(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


class Coercer(ABC):
    """
    Turns a `RawArgument` into a typed value.

    Subclasses implement `parse()` and may override `format()` to give the
    canonical text form of a value (used for help output and round-tripping).
    """

    name: str = "value"

    @abstractmethod
    def parse(self, raw: RawArgument) -> Any:
        """Return the typed value for `raw` or raise `CoercionError`."""

    def format(self, value: Any) -> str:
        return str(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BoolCoercer(Coercer):
    name = "bool"

    TRUE = frozenset({"true", "t", "1", "yes", "y", "on"})
    FALSE = frozenset({"false", "f", "0", "no", "n", "off"})

    def parse(self, raw: RawArgument) -> bool:
        value = raw.as_str().strip().lower()
        if value in self.TRUE:
            return True
        if value in self.FALSE:
            return False
        raise CoercionError(f"expected 'true' or 'false', got {raw.as_str()!r}")

    def format(self, value: Any) -> str:
        return "true" if value else "false"


_DECIMAL = re.compile(r"[+-]?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class IntCoercer(Coercer):
    """
    Strict decimal integer coercion.

    Args:
        bits (int | None): Bit width. None means unbounded (Python `int`).
        signed (bool): Whether negative values are allowed.
    """

    def __init__(self, bits: int | None = None, signed: bool = True) -> None:
        if bits is not None and bits <= 0:
            raise ValueError("bits must be a positive integer")
        self.bits = bits
        self.signed = signed
        if bits is None:
            self.name = "int" if signed else "uint"
            self.minimum: int | None = None if signed else 0
            self.maximum: int | None = None
        else:
            self.name = f"{'' if signed else 'u'}int{bits}"
            self.minimum = -(2 ** (bits - 1)) if signed else 0
            self.maximum = 2 ** (bits - 1) - 1 if signed else 2**bits - 1

    def parse(self, raw: RawArgument) -> int:
        text = raw.as_str()
        if not _DECIMAL.fullmatch(text):
            raise CoercionError(f"invalid digit found in {text!r}")
        try:
            value = int(text, 10)
        except ValueError as error:
            # over the interpreter's integer string conversion limit
            raise CoercionError(f"number too long to parse: {error}") from None
        if self.minimum is not None and value < self.minimum:
            raise CoercionError(
                f"number too small to fit in {self.name} (minimum {self.minimum})"
            )
        if self.maximum is not None and value > self.maximum:
            raise CoercionError(
                f"number too large to fit in {self.name} (maximum {self.maximum})"
            )
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntCoercer):
            return NotImplemented
        return (self.bits, self.signed) == (other.bits, other.signed)

    def __hash__(self) -> int:
        return hash((IntCoercer, self.bits, self.signed))

    def __repr__(self) -> str:
        return f"IntCoercer(bits={self.bits}, signed={self.signed})"


class FloatCoercer(Coercer):
    """Decimal or exponent float literals, plus `inf` and `nan`. No whitespace or `_`."""

    name = "float"

    def parse(self, raw: RawArgument) -> float:
        text = raw.as_str()
        if not _FLOAT.fullmatch(text):
            raise CoercionError(f"invalid float literal {text!r}")
        return float(text)

    def format(self, value: Any) -> str:
        return repr(float(value))


class StrCoercer(Coercer):
    name = "str"

    def parse(self, raw: RawArgument) -> str:
        return raw.as_str()


class PathCoercer(Coercer):
    name = "path"

    def __init__(self, path_type: type[PurePath] = Path) -> None:
        self.path_type = path_type

    def parse(self, raw: RawArgument) -> PurePath:
        return self.path_type(raw.as_str())


class EnumCoercer(Coercer):
    """Resolve an Enum member by name (exact, then case-insensitive) or by value."""

    def __init__(self, enum_type: EnumMeta) -> None:
        self.enum_type = enum_type
        self.name = enum_type.__name__

    def choices(self) -> list[str]:
        return [self.format(member) for member in self.enum_type]

    def parse(self, raw: RawArgument) -> Enum:
        text = raw.as_str()
        members = self.enum_type.__members__
        if text in members:
            return members[text]
        for member_name, member in members.items():
            if member_name.lower() == text.lower():
                return member
        for member in self.enum_type:
            if str(member.value) == text:
                return member
        raise CoercionError(f"{text!r} should be one of {{{', '.join(self.choices())}}}")

    def format(self, value: Any) -> str:
        if isinstance(value.value, str):
            return value.value
        return value.name.lower()

    def __repr__(self) -> str:
        return f"EnumCoercer({self.enum_type.__name__})"


class ChoiceCoercer(Coercer):
    name = "choice"

    def __init__(self, choices: tuple[str, ...] | list[str]) -> None:
        if not choices:
            raise ValueError("choices must not be empty")
        self.choices = tuple(str(choice) for choice in choices)

    def parse(self, raw: RawArgument) -> str:
        text = raw.as_str()
        if text not in self.choices:
            raise CoercionError(
                f"{text!r} should be one of {{{', '.join(self.choices)}}}"
            )
        return text

    def __repr__(self) -> str:
        return f"ChoiceCoercer({self.choices!r})"


class DateTimeCoercer(Coercer):
    name = "datetime"

    def parse(self, raw: RawArgument) -> datetime:
        try:
            return date_parser.parse(raw.as_str())
        except (ValueError, OverflowError):
            raise CoercionError(
                f"{raw.as_str()!r} could not be parsed as a datetime"
            ) from None

    def format(self, value: Any) -> str:
        return value.isoformat()


class CallableCoercer(Coercer):
    """Adapt a plain callable (`int`, `Decimal`, a factory function, ...)."""

    def __init__(self, function: Callable[[str], Any]) -> None:
        if not callable(function):
            raise TypeError(f"{function!r} is not callable")
        self.function = function
        self.name = getattr(function, "__name__", "value")

    def parse(self, raw: RawArgument) -> Any:
        try:
            return self.function(raw.as_str())
        except (ValueError, TypeError) as error:
            raise CoercionError(str(error) or f"invalid {self.name} value") from error

    def __repr__(self) -> str:
        return f"CallableCoercer({self.name})"


int8 = IntCoercer(8)
int16 = IntCoercer(16)
int32 = IntCoercer(32)
int64 = IntCoercer(64)
uint8 = IntCoercer(8, signed=False)
uint16 = IntCoercer(16, signed=False)
uint32 = IntCoercer(32, signed=False)
uint64 = IntCoercer(64, signed=False)


def coercer_for(target: Any) -> Coercer:
    """
    Resolve a coercer for the given target.

    Args:
        target (Any): A `Coercer` instance or subclass, a Python type (`bool`, `int`,
            `float`, `str`, a `PurePath` subclass, an `Enum` subclass, `datetime`),
            a `Literal[...]` of strings, or any callable taking a string.

    Returns:
        Coercer: The coercer to use.

    Raises:
        TypeError: If nothing sensible can be derived from `target`.
    """
    if isinstance(target, Coercer):
        return target
    if isinstance(target, type) and issubclass(target, Coercer):
        return target()

    if get_origin(target) is Literal:
        return ChoiceCoercer(get_args(target))

    if isinstance(target, type):
        if issubclass(target, bool):
            return BoolCoercer()
        if issubclass(target, Enum):
            return EnumCoercer(target)
        if issubclass(target, int):
            return IntCoercer()
        if issubclass(target, float):
            return FloatCoercer()
        if issubclass(target, str):
            return StrCoercer()
        if issubclass(target, PurePath):
            return PathCoercer(target)
        if issubclass(target, datetime):
            return DateTimeCoercer()

    if callable(target):
        return CallableCoercer(target)

    raise TypeError(f"Cannot derive a coercer from {target!r}")


def infer_coercer(default: Any) -> Coercer:
    """Resolve a coercer from the type of a default value."""
    if isinstance(default, Enum):
        return EnumCoercer(type(default))
    if isinstance(default, (bool, int, float, str, PurePath, datetime)):
        return coercer_for(type(default))
    raise TypeError(
        f"Cannot infer a flag type from default {default!r}; pass type= explicitly"
    )
