"""Canvas - an in-memory character grid that windows can render onto."""

from dataclasses import dataclass, field
from typing import Iterator

from termwin.core.cell import Cell
from termwin.core.color import Color


@dataclass
class Canvas:
    """
    Off-screen rendering surface.

    Implements the same drawing operations as the terminal surface
    (move, set_colors, write, cursor visibility, resize) against a
    fixed grid of Cells. Writes that run past the right or bottom edge
    are clipped, the way a console buffer would never show them.
    """
    width: int = 80
    height: int = 25
    cursor_x: int = 0
    cursor_y: int = 0
    cursor_visible: bool = True
    fg: Color = Color.WHITE
    bg: Color = Color.BLACK
    _buffer: list[list[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not self._buffer:
            self._allocate()

    def _allocate(self) -> None:
        self._buffer = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    # -------------------------------------------------------------------------
    # Surface operations
    # -------------------------------------------------------------------------

    def move(self, x: int, y: int) -> None:
        """Place the cursor at column x, row y (0-indexed)."""
        self.cursor_x = x
        self.cursor_y = y

    def set_colors(self, fg: Color, bg: Color) -> None:
        """Set the colors used by following writes."""
        self.fg = fg
        self.bg = bg

    def write(self, text: str) -> None:
        """Write text at the cursor and advance it; off-grid cells are dropped."""
        for char in text:
            if 0 <= self.cursor_y < self.height and 0 <= self.cursor_x < self.width:
                self._buffer[self.cursor_y][self.cursor_x] = Cell(char, self.fg, self.bg)
            self.cursor_x += 1

    def set_cursor_visible(self, visible: bool) -> None:
        self.cursor_visible = visible

    def resize(self, width: int, height: int) -> None:
        """Resize the grid, keeping whatever still fits."""
        old = self._buffer
        self.width = width
        self.height = height
        self._allocate()
        for y, row in enumerate(old[:height]):
            for x, cell in enumerate(row[:width]):
                self._buffer[y][x] = cell

    def flush(self) -> None:
        """Nothing is buffered off-screen."""

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        if x < 0 or x >= self.width:
            raise IndexError(f"x={x} out of bounds (width={self.width})")
        if y < 0 or y >= self.height:
            raise IndexError(f"y={y} out of bounds (height={self.height})")
        return self._buffer[y][x]

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: canvas[x, y]."""
        x, y = pos
        return self.get(x, y)

    def line(self, y: int) -> str:
        """Characters of row y, with trailing blanks removed."""
        return "".join(cell.char for cell in self._buffer[y]).rstrip()

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def to_text(self) -> str:
        """Plain-text dump of the grid, trailing blank lines removed."""
        lines = [self.line(y) for y in range(self.height)]
        while lines and not lines[-1]:
            lines.pop()
        return "\n".join(lines)
