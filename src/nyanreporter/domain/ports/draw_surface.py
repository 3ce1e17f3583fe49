"""Draw surface port: renders one animation frame."""

from __future__ import annotations

from typing import Any, Protocol


class DrawSurfacePort(Protocol):
    """Contract for the animation renderer.

    One frame = append_rainbow → draw_scoreboard → draw_rainbow →
    draw_nyan_cat → toggle_tick. Reporter owns the order, the surface
    owns the pixels.

    Attributes:
        tick: Frame-parity flag. Alternates sprite and trail frames.
    """

    tick: bool

    def append_rainbow(self) -> None:
        """Append the next rainbow segment to every trail line."""
        ...

    def draw_scoreboard(self, stats: Any) -> None:
        """Render pass/fail/skip counters from the stats snapshot."""
        ...

    def draw_rainbow(self) -> None:
        """Render the rainbow trail."""
        ...

    def draw_nyan_cat(self, stats: Any) -> None:
        """Render the sprite. Face reflects the stats snapshot."""
        ...

    def toggle_tick(self) -> None:
        """Flip the frame-parity flag exactly once."""
        ...
