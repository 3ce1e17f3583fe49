"""nyanreporter - nyan cat test-run reporter driven by host lifecycle events."""

import logging

__version__ = "0.1.0"

from nyanreporter.application.reporters import Collaborators, NyanReporter
from nyanreporter.presentation.factory import create_reporter

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["Collaborators", "NyanReporter", "__version__", "create_reporter"]
