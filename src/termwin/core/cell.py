"""Cell - one character position of a surface grid."""

from dataclasses import dataclass

from termwin.core.color import Color


@dataclass(slots=True)
class Cell:
    """
    A single character cell with its colors.

    Represents one position in the character grid as last painted.
    """
    char: str = ' '
    fg: Color = Color.WHITE
    bg: Color = Color.BLACK

    def copy(self) -> "Cell":
        """Create a copy of this cell."""
        return Cell(char=self.char, fg=self.fg, bg=self.bg)

    def is_blank(self) -> bool:
        """Check if this cell shows no character."""
        return self.char == ' '
