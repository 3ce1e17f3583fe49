"""Reporters driven by host lifecycle events."""

from nyanreporter.application.reporters.collaborators import Collaborators
from nyanreporter.application.reporters.nyan import NyanReporter

__all__ = [
    "Collaborators",
    "NyanReporter",
]
