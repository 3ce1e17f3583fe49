"""Browser handle: one execution environment reporting results."""

from __future__ import annotations

from dataclasses import dataclass, field

from nyanreporter.domain.model.results import BrowserResult


@dataclass(slots=True)
class Browser:
    """Default host-side browser handle.

    Reporter treats handles as opaque and only reads id, name and
    last_result, so any object with those attributes works too.
    last_result is mutable: the host swaps in a fresh snapshot after
    every finished spec.

    Attributes:
        id: Unique browser identifier within the run.
        name: Human readable name used in summaries.
        last_result: Current rolling result snapshot.
    """

    id: str
    name: str
    last_result: BrowserResult = field(default_factory=BrowserResult)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise ValueError("id must not be empty")
        if not self.name:
            raise ValueError("name must not be empty")
