"""
flagyard

Licensed under the MIT License. See LICENSE file for details.
"""

from .coercion import (
    BoolCoercer,
    CallableCoercer,
    ChoiceCoercer,
    Coercer,
    DateTimeCoercer,
    EnumCoercer,
    FloatCoercer,
    IntCoercer,
    PathCoercer,
    RawArgument,
    StrCoercer,
    coercer_for,
    infer_coercer,
    int8,
    int16,
    int32,
    int64,
    uint8,
    uint16,
    uint32,
    uint64,
)
from .flag import Flag, FlagDeclaration
from .flag_parser import FlagParser
from .help import HelpRenderer, format_help, render_help
from .registry import FlagRegistry, define_flag, get_registry

__all__ = [
    "BoolCoercer",
    "CallableCoercer",
    "ChoiceCoercer",
    "Coercer",
    "DateTimeCoercer",
    "EnumCoercer",
    "FloatCoercer",
    "IntCoercer",
    "PathCoercer",
    "RawArgument",
    "StrCoercer",
    "coercer_for",
    "infer_coercer",
    "int8",
    "int16",
    "int32",
    "int64",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "Flag",
    "FlagDeclaration",
    "FlagParser",
    "HelpRenderer",
    "format_help",
    "render_help",
    "FlagRegistry",
    "define_flag",
    "get_registry",
]
