"""Rainbow color stream: endless cycle of xterm-256 colors."""

from __future__ import annotations

import math

from rich.color import Color
from rich.style import Style
from rich.text import Text

# 6 colors per sine period, 7 periods.
RAINBOW_SIZE = 6 * 7


def generate_colors(size: int = RAINBOW_SIZE) -> tuple[int, ...]:
    """Generate rainbow color numbers in the xterm 6x6x6 color cube.

    Three phase-shifted sine waves give the red, green and blue levels
    (0..5 each); the cube starts at color 16.

    Args:
        size: Number of colors to generate (must be >= 1).

    Returns:
        Color numbers in 16..231.
    """
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")

    # floor(pi / 3) == 1: the waves are shifted by 2 and 4 radians.
    pi3 = math.floor(math.pi / 3)
    colors: list[int] = []
    for i in range(size):
        n = i * (1.0 / 6)
        r = math.floor(3 * math.sin(n) + 3)
        g = math.floor(3 * math.sin(n + 2 * pi3) + 3)
        b = math.floor(3 * math.sin(n + 4 * pi3) + 3)
        colors.append(36 * r + 6 * g + b + 16)
    return tuple(colors)


class Rainbow:
    """ColorStreamPort implementation.

    Every rainbowify() call consumes the next color and wraps around at
    the end of the cycle.
    """

    __slots__ = ("_color_index", "_colors")

    def __init__(self, colors: tuple[int, ...] | None = None) -> None:
        """Initialize stream.

        Args:
            colors: Color numbers to cycle. None = generate_colors().
        """
        self._colors = colors if colors is not None else generate_colors()
        if not self._colors:
            raise ValueError("colors must not be empty")
        self._color_index = 0

    @property
    def color_index(self) -> int:
        """Index of the next color to hand out."""
        return self._color_index

    def next_color(self) -> int:
        """Consume and return the next color number."""
        color = self._colors[self._color_index % len(self._colors)]
        self._color_index += 1
        return color

    def rainbowify(self, text: str) -> Text:
        """Style text with the next color."""
        return Text(text, style=Style(color=Color.from_ansi(self.next_color())))
