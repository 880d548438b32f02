# flagyard - MIT Licensed
"""
Colour constants and the rich `Theme` used by flagyard output.

`OneColors` values are plain hex strings so they can be dropped straight into
rich markup (`f"[{OneColors.DARK_RED}]error[/]"`). The theme maps the semantic
style names used by the help renderer and diagnostics onto those colours.
"""
from rich.theme import Theme


class OneColors:
    BLACK = "#282C34"
    GUTTER_GREY = "#4B5263"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"


def get_theme() -> Theme:
    """Return the rich theme for flagyard consoles."""
    return Theme(
        {
            "flag.short": f"bold {OneColors.CYAN}",
            "flag.long": f"bold {OneColors.BLUE}",
            "flag.placeholder": OneColors.LIGHT_YELLOW,
            "flag.default": f"dim {OneColors.COMMENT_GREY}",
            "usage": "bold",
            "error": f"bold {OneColors.DARK_RED}",
            "hint": f"italic {OneColors.GREEN}",
        }
    )
