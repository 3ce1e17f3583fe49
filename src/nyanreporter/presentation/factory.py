"""Composition root: wires default collaborators around one console."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from rich import get_console
from rich.console import Console

from nyanreporter.application.reporters import Collaborators, NyanReporter
from nyanreporter.infrastructure.draw_surface import DrawConfig, NyanDrawSurface
from nyanreporter.infrastructure.output import RichOutputSink
from nyanreporter.infrastructure.providers import SingletonProvider
from nyanreporter.infrastructure.rainbow import Rainbow
from nyanreporter.infrastructure.result_store import MemoryResultStore
from nyanreporter.infrastructure.terminal import RichTerminal

if TYPE_CHECKING:
    from collections.abc import Mapping


def build_collaborators(console: Console, draw_config: DrawConfig | None = None) -> Collaborators:
    """Build a fresh set of default collaborators sharing one console.

    Draw surface and result store are cleared on every acquisition, so
    each run starts with an empty trail and no stored failures. The
    color stream keeps cycling across runs.

    Args:
        console: Console for all rendering and output.
        draw_config: Animation geometry. Uses defaults if None.

    Returns:
        Collaborators for NyanReporter.
    """
    terminal = RichTerminal(console)
    color_stream = SingletonProvider(Rainbow)
    draw_surface = SingletonProvider(
        lambda: NyanDrawSurface(console, terminal, color_stream(), draw_config),
        on_acquire=NyanDrawSurface.reset,
    )
    result_store = SingletonProvider(MemoryResultStore, on_acquire=MemoryResultStore.clear)

    return Collaborators(
        result_store=result_store,
        draw_surface=draw_surface,
        color_stream=color_stream,
        output=RichOutputSink(console),
        terminal=terminal,
    )


@functools.cache
def default_collaborators() -> Collaborators:
    """Process-wide collaborators on rich's global console."""
    return build_collaborators(get_console())


def create_reporter(
    config: Mapping[str, object] | None = None,
    *,
    console: Console | None = None,
) -> NyanReporter:
    """Create a reporter with default collaborators.

    Args:
        config: Host configuration (see ReporterOptions.from_config).
        console: Console to render on. None = process-wide collaborators
            on rich's global console.

    Returns:
        Ready-to-use reporter.

    Raises:
        ConfigurationError: config is malformed.
    """
    collaborators = default_collaborators() if console is None else build_collaborators(console)
    return NyanReporter(collaborators, config)
