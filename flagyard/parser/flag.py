# flagyard - MIT Licensed
"""
Defines the `Flag` descriptor: the metadata and storage for one declared flag.

A `Flag` couples a validated `FlagDeclaration` (names, help text, placeholder)
with a `Coercer`, an optional default and a single storage cell. The storage
cell is written only by `FlagParser` and read by the rest of the program through
`Flag.value`, `Flag.get()` and `Flag.is_present()`.

Flags are normally created through `define_flag()`, which also registers them:

    BIG_MENU = define_flag("--big-menu", default=False, help="Include big menu")
    LANGUAGE = define_flag("--language", "-l", default="english,french,german")
    FILE = define_flag("--file", "-f", type=Path, placeholder="PATH")

    ...
    if BIG_MENU.value:
        ...
    if FILE.is_present():
        open(FILE.value)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from flagyard.exceptions import (
    CoercionError,
    FlagDefinitionError,
    FlagNotPresentError,
)
from flagyard.parser.coercion import (
    BoolCoercer,
    Coercer,
    RawArgument,
    coercer_for,
    infer_coercer,
)
from flagyard.utils import MISSING, strip_long_prefix, strip_short_prefix, to_dest


def _check_default(long_name: str, coercer: Coercer, default: Any) -> None:
    """
    Reject a default the coercer could not have produced.

    The default must survive `coercer.format` followed by `coercer.parse`.
    Custom coercers used with a default therefore need a `format` that emits
    text their `parse` accepts.
    """
    try:
        text = coercer.format(default)
        parsed = coercer.parse(RawArgument(text))
    except (CoercionError, ValueError, TypeError) as error:
        raise FlagDefinitionError(
            f"Default {default!r} for flag '--{long_name}' is not a valid "
            f"{coercer.name}: {error}"
        ) from error
    # NaN never equals itself
    if parsed != default and not (parsed != parsed and default != default):
        raise FlagDefinitionError(
            f"Default {default!r} for flag '--{long_name}' is not a valid "
            f"{coercer.name}: it reads back as {parsed!r}"
        )


class FlagDeclaration(BaseModel):
    """Validated static metadata for one flag."""

    model_config = ConfigDict(frozen=True)

    long_name: str
    short_name: str | None = None
    help: str = ""
    placeholder: str | None = None

    @field_validator("long_name")
    @classmethod
    def validate_long_name(cls, value: str) -> str:
        name = strip_long_prefix(value)
        if not name:
            raise ValueError("long name must not be empty")
        if name.startswith("-"):
            raise ValueError(f"long name {value!r} must be written as '--name' or 'name'")
        if "=" in name or any(char.isspace() for char in name):
            raise ValueError(
                f"long name {value!r} must not contain '=' or whitespace"
            )
        return name

    @field_validator("short_name")
    @classmethod
    def validate_short_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        name = strip_short_prefix(value)
        if len(name) != 1:
            raise ValueError(f"short name {value!r} must be a single character")
        if name in ("-", "=") or name.isspace():
            raise ValueError(f"short name {value!r} is not a valid flag character")
        return name


@dataclass(eq=False)
class Flag:
    """
    Represents a declared command-line flag.

    Attributes:
        declaration (FlagDeclaration): Names, help text and placeholder.
        coercer (Coercer): Converts raw tokens to this flag's value type.
        default (Any): Pre-coerced default value, or MISSING when there is none.
    """

    declaration: FlagDeclaration
    coercer: Coercer
    default: Any = MISSING
    _value: Any = field(default=MISSING, init=False, repr=False)
    _present: bool = field(default=False, init=False, repr=False)

    @classmethod
    def declare(
        cls,
        long_name: str,
        short_name: str | None = None,
        *,
        default: Any = MISSING,
        type: Any = None,
        help: str = "",
        placeholder: str | None = None,
    ) -> Flag:
        """
        Validate a declaration and build an unregistered `Flag`.

        The value type comes from `type` when given, otherwise from the type of
        `default`. Boolean flags without a default default to False.

        Raises:
            FlagDefinitionError: If names are malformed, no value type can be found,
                or the default is not a valid value of an explicit `type`.
        """
        try:
            declaration = FlagDeclaration(
                long_name=long_name,
                short_name=short_name,
                help=help,
                placeholder=placeholder,
            )
        except ValidationError as error:
            messages = "; ".join(item["msg"] for item in error.errors())
            raise FlagDefinitionError(
                f"Invalid declaration for flag {long_name!r}: {messages}"
            ) from error

        try:
            if type is not None:
                coercer = coercer_for(type)
            elif default is not MISSING:
                coercer = infer_coercer(default)
            else:
                raise FlagDefinitionError(
                    f"Flag '--{declaration.long_name}' has no default; "
                    "its value type must be given with type="
                )
        except TypeError as error:
            raise FlagDefinitionError(
                f"Flag '--{declaration.long_name}': {error}"
            ) from error

        if isinstance(coercer, BoolCoercer):
            if default is MISSING:
                default = False
            elif not isinstance(default, bool):
                raise FlagDefinitionError(
                    f"Boolean flag '--{declaration.long_name}' needs a bool default, "
                    f"got {default!r}"
                )
        elif type is not None and default is not MISSING:
            _check_default(declaration.long_name, coercer, default)
        return cls(declaration=declaration, coercer=coercer, default=default)

    @property
    def long_name(self) -> str:
        return self.declaration.long_name

    @property
    def short_name(self) -> str | None:
        return self.declaration.short_name

    @property
    def help(self) -> str:
        return self.declaration.help

    @property
    def placeholder(self) -> str | None:
        return self.declaration.placeholder

    @property
    def dest(self) -> str:
        """Storage identifier: the long name with separators normalised."""
        return to_dest(self.long_name)

    @property
    def is_bool(self) -> bool:
        return isinstance(self.coercer, BoolCoercer)

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    @property
    def value(self) -> Any:
        """
        The flag's value: the last one parsed, else the default.

        Raises:
            FlagNotPresentError: If the flag has no default and was not supplied.
        """
        if self._present:
            return self._value
        if self.default is MISSING:
            raise FlagNotPresentError(
                f"Flag '--{self.long_name}' accessed without default and not present; "
                "check is_present() first or declare a default"
            )
        return self.default

    def get(self, fallback: Any = None) -> Any:
        """Return the flag's value, or `fallback` when it has none."""
        if self._present:
            return self._value
        if self.default is MISSING:
            return fallback
        return self.default

    def is_present(self) -> bool:
        """Whether the command line supplied this flag."""
        return self._present

    def _store(self, value: Any) -> None:
        self._value = value
        self._present = True

    def reset(self) -> None:
        """Forget any parsed value."""
        self._value = MISSING
        self._present = False

    def get_flags_text(self) -> str:
        """Render `-x, --name` as written on the command line."""
        long_text = f"--{self.long_name}"
        if self.short_name:
            return f"-{self.short_name}, {long_text}"
        return long_text

    def __str__(self) -> str:
        return (
            f"Flag(--{self.long_name}, short={self.short_name!r}, "
            f"type={self.coercer.name}, present={self._present})"
        )
