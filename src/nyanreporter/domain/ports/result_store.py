"""Result store port: persistence of per-browser results."""

from __future__ import annotations

from typing import Any, Protocol


class ResultStorePort(Protocol):
    """Contract for result persistence.

    Store decides what to keep (e.g. failures only). Reporter only
    forwards results and later hands get_data() to the output sink.
    """

    def save(self, browser: Any, result: Any) -> None:
        """Persist one spec result for a browser."""
        ...

    def get_data(self) -> Any:
        """Return everything accumulated so far."""
        ...
