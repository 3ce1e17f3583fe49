"""Application layer: the reporter core.

Depends only on domain (ports, model, events). Concrete collaborators
are wired by the presentation layer.
"""

from nyanreporter.application.reporters import Collaborators, NyanReporter

__all__ = [
    "Collaborators",
    "NyanReporter",
]
