# flagyard - MIT Licensed
"""Global console instance for flagyard output."""
from rich.console import Console

from flagyard.themes import get_theme

console = Console(theme=get_theme(), highlight=False)
