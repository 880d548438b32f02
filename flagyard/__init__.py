"""
flagyard

Declare command-line flags where they are used and parse them in one place.

Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    CoercionError,
    DuplicateFlagError,
    FlagDefinitionError,
    FlagNotPresentError,
    FlagParseError,
    FlagValueError,
    FlagyardError,
    MissingFlagValueError,
    RegistryClosedError,
    UnrecognizedFlagError,
)
from .importer import import_flag_modules
from .logger import logger
from .parser import (
    BoolCoercer,
    CallableCoercer,
    ChoiceCoercer,
    Coercer,
    DateTimeCoercer,
    EnumCoercer,
    Flag,
    FlagParser,
    FlagRegistry,
    FloatCoercer,
    HelpRenderer,
    IntCoercer,
    PathCoercer,
    RawArgument,
    StrCoercer,
    coercer_for,
    define_flag,
    format_help,
    get_registry,
    int8,
    int16,
    int32,
    int64,
    render_help,
    uint8,
    uint16,
    uint32,
    uint64,
)
from .parser.registry import registry
from .runtime import parse, parse_or_exit, print_help_and_exit
from .utils import MISSING, setup_logging

__version__ = "0.1.0"

__all__ = [
    "BoolCoercer",
    "CallableCoercer",
    "ChoiceCoercer",
    "Coercer",
    "CoercionError",
    "DateTimeCoercer",
    "DuplicateFlagError",
    "EnumCoercer",
    "Flag",
    "FlagDefinitionError",
    "FlagNotPresentError",
    "FlagParseError",
    "FlagParser",
    "FlagRegistry",
    "FlagValueError",
    "FlagyardError",
    "FloatCoercer",
    "HelpRenderer",
    "IntCoercer",
    "MISSING",
    "MissingFlagValueError",
    "PathCoercer",
    "RawArgument",
    "RegistryClosedError",
    "StrCoercer",
    "UnrecognizedFlagError",
    "coercer_for",
    "define_flag",
    "format_help",
    "get_registry",
    "import_flag_modules",
    "int8",
    "int16",
    "int32",
    "int64",
    "logger",
    "parse",
    "parse_or_exit",
    "print_help_and_exit",
    "registry",
    "render_help",
    "setup_logging",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
]
