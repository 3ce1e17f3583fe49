"""Collaborators bundle injected into the reporter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from nyanreporter.domain.ports import (
        ColorStreamPort,
        DrawSurfacePort,
        OutputSinkPort,
        ResultStorePort,
        TerminalControlPort,
    )


@dataclass(frozen=True, slots=True)
class Collaborators:
    """Everything the reporter delegates to.

    The three accessors are get-or-create: repeated calls within a
    process return the same long-lived instance. Whether an instance is
    cleared on re-acquisition is the accessor's business.

    Attributes:
        result_store: Accessor for the result store.
        draw_surface: Accessor for the draw surface.
        color_stream: Accessor for the color stream.
        output: Output sink for summaries.
        terminal: Terminal control (cursor, width).
    """

    result_store: Callable[[], ResultStorePort]
    draw_surface: Callable[[], DrawSurfacePort]
    color_stream: Callable[[], ColorStreamPort]
    output: OutputSinkPort
    terminal: TerminalControlPort

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("result_store", "draw_surface", "color_stream"):
            accessor = getattr(self, name)
            if not callable(accessor):
                raise TypeError(f"{name} must be callable, got {type(accessor).__name__}")
        if self.output is None:
            raise TypeError("output must not be None")
        if self.terminal is None:
            raise TypeError("terminal must not be None")
