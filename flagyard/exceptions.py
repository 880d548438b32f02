# flagyard - MIT Licensed
"""
Defines all custom exception classes used by flagyard.

Errors fall into three groups:
- definition errors, raised while flags are declared and registered. These are
  programming defects and are expected to abort startup.
- parse errors, raised while a command line is parsed. Each one names the flag it
  concerns so a caller can print a usage diagnostic and exit non-zero.
- access errors, raised when a flag without a default is read before the command
  line supplied it.

Exception Hierarchy:
- FlagyardError
    ├── FlagDefinitionError
    │    └── DuplicateFlagError
    ├── RegistryClosedError
    ├── CoercionError
    ├── FlagParseError
    │    ├── UnrecognizedFlagError
    │    ├── MissingFlagValueError
    │    └── FlagValueError
    └── FlagNotPresentError
"""


class FlagyardError(Exception):
    """Base exception for flagyard."""


class FlagDefinitionError(FlagyardError):
    """Exception raised when a flag declaration is invalid."""


class DuplicateFlagError(FlagDefinitionError):
    """Exception raised when two flags share a long or short name."""


class RegistryClosedError(FlagyardError):
    """Exception raised when a flag is registered after parsing has begun."""


class CoercionError(FlagyardError, ValueError):
    """Exception raised by a coercer when a raw token cannot become a typed value."""


class FlagParseError(FlagyardError):
    """
    Exception raised when the command line cannot be parsed.

    Attributes:
        flag (str | None): The bare name of the implicated flag, without dashes.
            For a registered flag this is its long name (`color`, even when the
            command line used `-c`). For an unrecognized token it is the name as
            typed (`nope` for `--nope`, `x` for `-x`). None when no single flag
            is implicated.
        message (str): Human-readable cause. It quotes the flag as written
            (`--nope`, `-x`), which tells short and long forms apart.
    """

    def __init__(self, message: str, flag: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.flag = flag


class UnrecognizedFlagError(FlagParseError):
    """Exception raised when a token uses flag syntax but names no registered flag."""


class MissingFlagValueError(FlagParseError):
    """Exception raised when a non-boolean flag is given without a value."""


class FlagValueError(FlagParseError):
    """Exception raised when a flag value fails coercion to the flag's type."""


class FlagNotPresentError(FlagyardError, LookupError):
    """Exception raised when reading a flag with no default that was never supplied."""
