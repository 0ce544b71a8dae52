"""Tests for core data structures: colors, themes and the canvas."""

import pytest

from termwin.core.canvas import Canvas
from termwin.core.cell import Cell
from termwin.core.color import Color, ColorMode
from termwin.core.theme import GREEN_THEME, THEMES, ColorScheme, get_theme


class TestColor:
    """Tests for Color."""

    def test_named_colors(self) -> None:
        assert Color.from_name("red") == Color.RED
        assert Color.from_name("Bright-Cyan") == Color.BRIGHT_CYAN

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError):
            Color.from_name("mauve")

    def test_parse_forms(self) -> None:
        assert Color.parse("cyan") == Color.CYAN
        assert Color.parse(196) == Color(ColorMode.EXTENDED_256, 196)
        assert Color.parse("42") == Color(ColorMode.EXTENDED_256, 42)
        assert Color.parse("#ff8800") == Color(ColorMode.TRUE_COLOR, (255, 136, 0))
        assert Color.parse(Color.BLUE) is Color.BLUE

    @pytest.mark.parametrize("bad", ["#ff88", "#gggggg", 300, True])
    def test_parse_rejects(self, bad) -> None:
        with pytest.raises(ValueError):
            Color.parse(bad)

    def test_sgr_codes(self) -> None:
        assert Color.RED.to_sgr_fg() == "31"
        assert Color.RED.to_sgr_bg() == "41"
        assert Color.BRIGHT_WHITE.to_sgr_fg() == "97"
        assert Color.BRIGHT_BLACK.to_sgr_bg() == "100"
        assert Color.from_256(200).to_sgr_fg() == "38;5;200"
        assert Color.from_rgb(1, 2, 3).to_sgr_bg() == "48;2;1;2;3"

    def test_name(self) -> None:
        assert Color.BRIGHT_GREEN.name == "bright_green"
        assert Color.from_256(99).name == "99"
        assert Color.from_rgb(255, 0, 16).name == "#ff0010"


class TestTheme:
    """Tests for color schemes."""

    def test_builtin_themes(self) -> None:
        assert set(THEMES) == {"black", "white", "light_blue", "dark_blue", "green"}
        assert len(ColorScheme.roles()) == 10

    def test_get_theme(self) -> None:
        assert get_theme("dark-blue") is THEMES["dark_blue"]
        assert get_theme(" Green ") is GREEN_THEME

    def test_unknown_theme_lists_choices(self) -> None:
        with pytest.raises(ValueError, match="available"):
            get_theme("purple")

    def test_overrides(self) -> None:
        scheme = GREEN_THEME.with_overrides({"foreground_error": "bright_yellow"})
        assert scheme.foreground_error == Color.BRIGHT_YELLOW
        assert scheme.foreground == GREEN_THEME.foreground
        assert GREEN_THEME.foreground_error == Color.BRIGHT_RED

    def test_unknown_role(self) -> None:
        with pytest.raises(ValueError, match="Unknown color role"):
            GREEN_THEME.with_overrides({"border": "red"})


class TestCell:
    """Tests for Cell dataclass."""

    def test_default_cell(self) -> None:
        cell = Cell()
        assert cell.char == ' '
        assert cell.fg == Color.WHITE
        assert cell.bg == Color.BLACK
        assert cell.is_blank()

    def test_cell_copy(self) -> None:
        cell = Cell(char='X', fg=Color.RED, bg=Color.BLUE)
        copy = cell.copy()
        assert copy == cell
        assert copy is not cell


class TestCanvas:
    """Tests for Canvas."""

    def test_default_canvas(self) -> None:
        canvas = Canvas()
        assert (canvas.width, canvas.height) == (80, 25)
        assert canvas.to_text() == ""

    def test_write_with_colors(self) -> None:
        canvas = Canvas(10, 3)
        canvas.move(2, 1)
        canvas.set_colors(Color.RED, Color.BLUE)
        canvas.write("Hi")
        assert canvas[2, 1] == Cell('H', Color.RED, Color.BLUE)
        assert canvas.get(3, 1).char == 'i'
        assert canvas.cursor_x == 4
        assert canvas.line(1) == "  Hi"

    def test_write_clips_at_edge(self) -> None:
        canvas = Canvas(5, 2)
        canvas.move(3, 0)
        canvas.write("abcdef")
        assert canvas.line(0) == "   ab"
        canvas.move(0, 5)
        canvas.write("zzz")
        assert canvas.to_text() == "   ab"

    def test_get_out_of_bounds(self) -> None:
        canvas = Canvas(5, 2)
        with pytest.raises(IndexError):
            canvas.get(5, 0)
        with pytest.raises(IndexError):
            canvas.get(0, -1)

    def test_resize_keeps_overlap(self) -> None:
        canvas = Canvas(4, 2)
        canvas.write("abcd")
        canvas.resize(2, 3)
        assert (canvas.width, canvas.height) == (2, 3)
        assert canvas.line(0) == "ab"
        assert canvas.line(2) == ""

    def test_cursor_visibility(self) -> None:
        canvas = Canvas(4, 2)
        canvas.set_cursor_visible(False)
        assert canvas.cursor_visible is False
