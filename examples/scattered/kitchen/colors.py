from enum import Enum

from flagyard import Coercer, CoercionError, RawArgument, define_flag


class Color(Enum):
    NEVER = "never"
    ALWAYS = "always"
    AUTO = "auto"


class ColorCoercer(Coercer):
    name = "color"

    def parse(self, raw: RawArgument) -> Color:
        try:
            return Color(raw.as_str())
        except ValueError:
            raise CoercionError("expected one of never, always, auto") from None

    def format(self, value: Color) -> str:
        return value.value


COLOR = define_flag(
    "--color",
    default=Color.AUTO,
    type=ColorCoercer(),
    placeholder="WHEN",
    help="Colorize output",
)
