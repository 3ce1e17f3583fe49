"""Default collaborators: rich-based terminal rendering and in-memory storage."""

from nyanreporter.infrastructure.draw_surface import DrawConfig, NyanDrawSurface
from nyanreporter.infrastructure.output import RichOutputSink
from nyanreporter.infrastructure.providers import SingletonProvider
from nyanreporter.infrastructure.rainbow import Rainbow, generate_colors
from nyanreporter.infrastructure.result_store import MemoryResultStore
from nyanreporter.infrastructure.terminal import RichCursor, RichTerminal, RichWindow

__all__ = [
    "DrawConfig",
    "MemoryResultStore",
    "NyanDrawSurface",
    "Rainbow",
    "RichCursor",
    "RichOutputSink",
    "RichTerminal",
    "RichWindow",
    "SingletonProvider",
    "generate_colors",
]
