"""Color values used by themes and surfaces."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    STANDARD_16 = "16"      # Standard 16-color (SGR 30-37, 40-47, 90-97, 100-107)
    EXTENDED_256 = "256"    # Extended 256-color (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


# Palette index for every named 16-color entry
NAMED_COLORS: dict[str, int] = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "bright_black": 8,
    "bright_red": 9,
    "bright_green": 10,
    "bright_yellow": 11,
    "bright_blue": 12,
    "bright_magenta": 13,
    "bright_cyan": 14,
    "bright_white": 15,
}


@dataclass(frozen=True)
class Color:
    """
    A color value a surface can paint with.

    Themes mostly use the 16 named colors; 256-color indexes and
    RGB triples are accepted for user overrides.
    """
    mode: ColorMode
    value: int | tuple[int, int, int]

    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    BRIGHT_BLACK: ClassVar["Color"]
    BRIGHT_RED: ClassVar["Color"]
    BRIGHT_GREEN: ClassVar["Color"]
    BRIGHT_YELLOW: ClassVar["Color"]
    BRIGHT_BLUE: ClassVar["Color"]
    BRIGHT_MAGENTA: ClassVar["Color"]
    BRIGHT_CYAN: ClassVar["Color"]
    BRIGHT_WHITE: ClassVar["Color"]

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Create a Color from a palette name such as 'bright_red'."""
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        if key not in NAMED_COLORS:
            raise ValueError(f"Unknown color name: {name!r}")
        return cls(ColorMode.STANDARD_16, NAMED_COLORS[key])

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorMode.EXTENDED_256, index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    @classmethod
    def parse(cls, value: "str | int | Color") -> "Color":
        """
        Parse a color from config-style input.

        Accepts a palette name ("cyan"), a 256-color index (int or digit
        string) or a hex triple ("#ff8800").
        """
        if isinstance(value, Color):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Cannot parse color: {value!r}")
        if isinstance(value, int):
            return cls.from_256(value)
        text = value.strip()
        if text.startswith("#"):
            digits = text[1:]
            if len(digits) != 6:
                raise ValueError(f"Cannot parse color: {value!r}")
            try:
                r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
            except ValueError:
                raise ValueError(f"Cannot parse color: {value!r}") from None
            return cls.from_rgb(r, g, b)
        if text.isdigit():
            return cls.from_256(int(text))
        return cls.from_name(text)

    @property
    def name(self) -> str:
        """Palette name for 16-color values, otherwise a readable form."""
        if self.mode == ColorMode.STANDARD_16:
            for name, index in NAMED_COLORS.items():
                if index == self.value:
                    return name
        if self.mode == ColorMode.EXTENDED_256:
            return str(self.value)
        assert isinstance(self.value, tuple)
        return "#{:02x}{:02x}{:02x}".format(*self.value)

    def to_sgr_fg(self) -> str:
        """Return SGR sequence for foreground color."""
        if self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str(30 + self.value)
            return str(90 + self.value - 8)
        if self.mode == ColorMode.EXTENDED_256:
            return f"38;5;{self.value}"
        assert isinstance(self.value, tuple)
        r, g, b = self.value
        return f"38;2;{r};{g};{b}"

    def to_sgr_bg(self) -> str:
        """Return SGR sequence for background color."""
        if self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str(40 + self.value)
            return str(100 + self.value - 8)
        if self.mode == ColorMode.EXTENDED_256:
            return f"48;5;{self.value}"
        assert isinstance(self.value, tuple)
        r, g, b = self.value
        return f"48;2;{r};{g};{b}"


Color.BLACK = Color(ColorMode.STANDARD_16, 0)
Color.RED = Color(ColorMode.STANDARD_16, 1)
Color.GREEN = Color(ColorMode.STANDARD_16, 2)
Color.YELLOW = Color(ColorMode.STANDARD_16, 3)
Color.BLUE = Color(ColorMode.STANDARD_16, 4)
Color.MAGENTA = Color(ColorMode.STANDARD_16, 5)
Color.CYAN = Color(ColorMode.STANDARD_16, 6)
Color.WHITE = Color(ColorMode.STANDARD_16, 7)
Color.BRIGHT_BLACK = Color(ColorMode.STANDARD_16, 8)
Color.BRIGHT_RED = Color(ColorMode.STANDARD_16, 9)
Color.BRIGHT_GREEN = Color(ColorMode.STANDARD_16, 10)
Color.BRIGHT_YELLOW = Color(ColorMode.STANDARD_16, 11)
Color.BRIGHT_BLUE = Color(ColorMode.STANDARD_16, 12)
Color.BRIGHT_MAGENTA = Color(ColorMode.STANDARD_16, 13)
Color.BRIGHT_CYAN = Color(ColorMode.STANDARD_16, 14)
Color.BRIGHT_WHITE = Color(ColorMode.STANDARD_16, 15)
