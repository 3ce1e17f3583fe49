"""Domain ports (interfaces/protocols).

Collaborators of the reporter are described here; infrastructure
provides default implementations, users can substitute their own.
"""

from nyanreporter.domain.ports.color_stream import ColorStreamPort
from nyanreporter.domain.ports.draw_surface import DrawSurfacePort
from nyanreporter.domain.ports.lifecycle import LifecycleReporterProtocol
from nyanreporter.domain.ports.output_sink import OutputSinkPort
from nyanreporter.domain.ports.result_store import ResultStorePort
from nyanreporter.domain.ports.terminal import CursorPort, TerminalControlPort, WindowPort

__all__ = [
    "ColorStreamPort",
    "CursorPort",
    "DrawSurfacePort",
    "LifecycleReporterProtocol",
    "OutputSinkPort",
    "ResultStorePort",
    "TerminalControlPort",
    "WindowPort",
]
