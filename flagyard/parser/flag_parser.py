# flagyard - MIT Licensed
"""
This module implements `FlagParser`, which parses a command line into the flags
held by a `FlagRegistry`.

The parser walks the tokens left to right. Each flag token is resolved against
the registry, its value is run through the flag's coercer and the result is
written into the flag's storage cell. Everything else is collected, in order, as
a positional argument.

Syntax:
- `--name=value`: long flag with an inline value (split on the first `=`).
- `--name value`: long non-boolean flag; the next token is always its value,
  even when it starts with `-`.
- `--name`: long boolean flag, set to true.
- `--no-name`: long boolean flag, set to false (unless `no-name` is itself a flag).
- `-x value` / `-xvalue`: short non-boolean flag.
- `-x`: short boolean flag, set to true. `-x=false` / `-xfalse` pass the
  remainder to the boolean coercer.
- `--`: ends flag processing; every later token is positional.
- `-` and tokens not starting with `-`: positional.

Any error stops the parse immediately. Flags matched before the error keep the
values already written; callers treat the whole invocation as failed.

Example Usage:
    registry = FlagRegistry()
    define_flag("--file", "-f", type=Path, registry=registry)

    positional = FlagParser(registry).parse(["-f", "/tmp/x", "input.txt"])
    # positional == ["input.txt"]
"""
from __future__ import annotations

from typing import Any, Sequence

from flagyard.exceptions import (
    CoercionError,
    FlagValueError,
    MissingFlagValueError,
    UnrecognizedFlagError,
)
from flagyard.logger import logger
from flagyard.parser.coercion import RawArgument
from flagyard.parser.flag import Flag
from flagyard.parser.registry import FlagRegistry, get_registry


class FlagParser:
    """
    Parses raw argument tokens into the flags of a registry.

    Attributes:
        registry (FlagRegistry): The flags to resolve tokens against. The global
            registry is used when none is given.
    """

    def __init__(self, registry: FlagRegistry | None = None) -> None:
        self.registry: FlagRegistry = registry if registry is not None else get_registry()

    def parse(self, args: Sequence[str]) -> list[str]:
        """
        Parse `args` (the command line without the program name).

        Args:
            args (Sequence[str]): Raw argument tokens.

        Returns:
            list[str]: Positional arguments in their original order.

        Raises:
            UnrecognizedFlagError: A flag token names no registered flag.
            MissingFlagValueError: A non-boolean flag has no value.
            FlagValueError: A value failed coercion.
        """
        self.registry.seal()
        tokens = list(args)
        positional: list[str] = []

        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token == "--":
                positional.extend(tokens[i + 1 :])
                break
            if token.startswith("--"):
                i = self._handle_long(token, tokens, i)
            elif token.startswith("-") and token != "-":
                i = self._handle_short(token, tokens, i)
            else:
                positional.append(token)
                i += 1

        logger.debug(
            "Parsed %d tokens into %d positional arguments", len(tokens), len(positional)
        )
        return positional

    def _handle_long(self, token: str, tokens: list[str], i: int) -> int:
        name, has_inline, inline = token[2:].partition("=")
        flag = None if name.startswith("-") else self.registry.find_by_long(name)

        if flag is None:
            negated = self._find_negated(name)
            if negated is not None and not has_inline:
                self._assign(negated, False, token)
                return i + 1
            raise UnrecognizedFlagError(f"Unrecognized flag: '--{name}'", flag=name)

        if has_inline:
            self._assign(flag, self._coerce(flag, inline, f"--{name}"), token)
            return i + 1
        if flag.is_bool:
            self._assign(flag, True, token)
            return i + 1
        if i + 1 >= len(tokens):
            raise MissingFlagValueError(
                f"Flag '--{name}' requires a value", flag=flag.long_name
            )
        self._assign(flag, self._coerce(flag, tokens[i + 1], f"--{name}"), token)
        return i + 2

    def _handle_short(self, token: str, tokens: list[str], i: int) -> int:
        char, remainder = token[1], token[2:]
        flag = self.registry.find_by_short(char)
        if flag is None:
            raise UnrecognizedFlagError(f"Unrecognized flag: '-{char}'", flag=char)

        if flag.is_bool:
            if remainder:
                value = remainder[1:] if remainder.startswith("=") else remainder
                self._assign(flag, self._coerce(flag, value, f"-{char}"), token)
            else:
                self._assign(flag, True, token)
            return i + 1
        if remainder:
            self._assign(flag, self._coerce(flag, remainder, f"-{char}"), token)
            return i + 1
        if i + 1 >= len(tokens):
            raise MissingFlagValueError(
                f"Flag '-{char}' (--{flag.long_name}) requires a value",
                flag=flag.long_name,
            )
        self._assign(flag, self._coerce(flag, tokens[i + 1], f"-{char}"), token)
        return i + 2

    def _find_negated(self, name: str) -> Flag | None:
        if not name.startswith("no-"):
            return None
        flag = self.registry.find_by_long(name[3:])
        if flag is not None and flag.is_bool:
            return flag
        return None

    def _coerce(self, flag: Flag, text: str, written: str) -> Any:
        try:
            return flag.coercer.parse(RawArgument(text))
        except (CoercionError, ValueError) as error:
            raise FlagValueError(
                f"Invalid value {text!r} for flag '{written}': {error}",
                flag=flag.long_name,
            ) from error

    def _assign(self, flag: Flag, value: Any, token: str) -> None:
        flag._store(value)
        logger.debug("Set %s from %r to %r", flag.get_flags_text(), token, value)

    def __str__(self) -> str:
        return f"FlagParser(registry={self.registry})"

    def __repr__(self) -> str:
        return str(self)
