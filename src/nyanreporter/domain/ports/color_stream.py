"""Color stream port: source of rainbow colors."""

from __future__ import annotations

from typing import Any, Protocol


class ColorStreamPort(Protocol):
    """Contract for the rainbow color generator.

    Each call consumes the next color of an endless cycle.
    """

    def rainbowify(self, text: str) -> Any:
        """Return text styled with the next color in the cycle."""
        ...
