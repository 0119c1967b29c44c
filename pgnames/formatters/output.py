"""Output utilities for terminal display with Rich console."""

from typing import Optional, Union

from rich.console import Console, RenderableType
from rich.json import JSON
from rich.text import Text


class OutputFormatter:
    """Handles formatted output using Rich console."""

    def __init__(self, no_color: bool = False, console: Optional[Console] = None):
        """Initialize output formatter.

        Args:
            no_color: If True, disable all colors and styling
            console: Console to print to (a new stdout console by default)
        """
        self._no_color = no_color
        self._console = console or Console(
            no_color=no_color,
            force_terminal=None,
            highlight=False,
        )

    @property
    def console(self) -> Console:
        """Get the underlying Rich console."""
        return self._console

    @property
    def no_color(self) -> bool:
        """Check if colors are disabled."""
        return self._no_color

    def print(self, message: Union[str, Text, RenderableType]) -> None:
        """Print message using Rich console.

        Args:
            message: Message to print (string, Rich Text or any renderable)
        """
        self._console.print(message, highlight=False)

    def print_json(self, json_text: str) -> None:
        """Print a JSON document, highlighted unless colors are disabled."""
        if self._no_color:
            self._console.print(json_text, highlight=False, markup=False, emoji=False, soft_wrap=True)
        else:
            self._console.print(JSON(json_text))

    def error(self, label: str, message: object) -> None:
        """Print an error line with a styled label."""
        text = Text()
        text.append(f"{label}:", style="bold red")
        text.append(f" {message}")
        self._console.print(text, highlight=False)
