"""Nyan cat draw surface: scoreboard, rainbow trail and sprite.

Every render step prints its rows and moves the cursor back up, so the
next step paints over the same block of lines:

    +-----------+--------------------------+-----------+
    | scoreboard| rainbow trail (4 lines)  | sprite    |
    +-----------+--------------------------+-----------+
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.control import Control
from rich.text import Text

if TYPE_CHECKING:
    from rich.console import Console

    from nyanreporter.domain.ports import ColorStreamPort, TerminalControlPort


@dataclass(frozen=True, slots=True)
class DrawConfig:
    """Geometry of the animation.

    Attributes:
        lines: Rows of the rainbow trail (and of the sprite).
        scoreboard_width: Columns reserved for the counters.
        sprite_width: Columns taken by the cat.
        width_ratio: Share of the terminal width the animation may use.
    """

    lines: int = 4
    scoreboard_width: int = 5
    sprite_width: int = 11
    width_ratio: float = 0.75

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.lines != 4:
            # Sprite art is exactly four rows tall.
            raise ValueError(f"lines must be 4, got {self.lines}")
        if self.scoreboard_width < 0:
            raise ValueError(f"scoreboard_width must be >= 0, got {self.scoreboard_width}")
        if self.sprite_width < 1:
            raise ValueError(f"sprite_width must be >= 1, got {self.sprite_width}")
        if not 0.0 < self.width_ratio <= 1.0:
            raise ValueError(f"width_ratio must be in (0, 1], got {self.width_ratio}")


def _count(stats: Any, name: str) -> int:
    return getattr(stats, name, 0) or 0


def face(stats: Any) -> str:
    """Cat face for the current stats snapshot."""
    if _count(stats, "failed"):
        return "( x .x)"
    if _count(stats, "skipped"):
        return "( o .o)"
    if _count(stats, "success"):
        return "( ^ .^)"
    return "( - .-)"


class NyanDrawSurface:
    """DrawSurfacePort implementation rendering to a rich Console.

    Attributes:
        tick: Frame-parity flag, flipped once per frame by toggle_tick().
    """

    def __init__(
        self,
        console: Console,
        terminal: TerminalControlPort,
        color_stream: ColorStreamPort,
        config: DrawConfig | None = None,
    ) -> None:
        """Initialize surface.

        Args:
            console: Console to paint on.
            terminal: Source of the terminal width.
            color_stream: Colors for trail segments.
            config: Geometry. Uses defaults if None.
        """
        self._console = console
        self._terminal = terminal
        self._color_stream = color_stream
        self._config = config or DrawConfig()
        self.tick = False
        self._trajectories: list[list[Text]] = []
        self._trajectory_width_max = 1
        self.reset()

    @property
    def trajectories(self) -> tuple[tuple[Text, ...], ...]:
        """Current trail segments per line."""
        return tuple(tuple(line) for line in self._trajectories)

    @property
    def trajectory_width_max(self) -> int:
        return self._trajectory_width_max

    def reset(self) -> None:
        """Start a new trail; re-read the terminal width."""
        width = int(self._terminal.window.width * self._config.width_ratio)
        self._trajectory_width_max = max(1, width - self._config.sprite_width)
        self._trajectories = [[] for _ in range(self._config.lines)]
        self.tick = False

    def toggle_tick(self) -> None:
        self.tick = not self.tick

    def append_rainbow(self) -> None:
        """Push one rainbow segment onto every line, oldest drops off."""
        segment = "_" if self.tick else "-"
        rainbowified = self._color_stream.rainbowify(segment)

        for trajectory in self._trajectories:
            if len(trajectory) >= self._trajectory_width_max:
                trajectory.pop(0)
            trajectory.append(rainbowified)

    def draw_scoreboard(self, stats: Any) -> None:
        """Print passed/failed/skipped counters, one per line."""
        for name, style in (("success", "green"), ("failed", "red"), ("skipped", "cyan")):
            self._print(Text.assemble(" ", (str(_count(stats, name)), style)))
        self._print(Text())
        self._cursor_up(self._config.lines)

    def draw_rainbow(self) -> None:
        """Print the trail to the right of the scoreboard."""
        for trajectory in self._trajectories:
            self._console.control(Control.move_to_column(self._config.scoreboard_width))
            self._print(Text.assemble(*trajectory))
        self._cursor_up(self._config.lines)

    def draw_nyan_cat(self, stats: Any) -> None:
        """Print the cat at the head of the trail."""
        start = self._config.scoreboard_width + len(self._trajectories[0])
        rows = (
            "_,------,",
            "_|" + ("  " if self.tick else "   ") + "/\\_/\\ ",
            ("~" if self.tick else "^") + "|" + ("_" if self.tick else "__") + face(stats) + " ",
            (" " if self.tick else "  ") + '""  "" ',
        )
        for row in rows:
            self._console.control(Control.move_to_column(start))
            self._print(Text(row))
        self._cursor_up(self._config.lines)

    def _print(self, text: Text) -> None:
        self._console.print(text, soft_wrap=True)

    def _cursor_up(self, lines: int) -> None:
        self._console.control(Control.move(0, -lines))
