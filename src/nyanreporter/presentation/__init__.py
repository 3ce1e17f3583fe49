"""Presentation layer: composition root and host adapters."""

from nyanreporter.presentation.factory import build_collaborators, create_reporter, default_collaborators

__all__ = [
    "build_collaborators",
    "create_reporter",
    "default_collaborators",
]
