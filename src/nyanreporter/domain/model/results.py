"""Result snapshots delivered by the host runner."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BrowserResult:
    """Rolling per-browser result snapshot.

    The host replaces the snapshot after every finished spec. Reporter
    never merges snapshots, it only keeps the last one seen.

    Attributes:
        success: Specs passed so far.
        failed: Specs failed so far.
        skipped: Specs skipped so far.
        total: Specs expected in the run (0 if unknown).
        total_time: Wall time of the run in seconds.
        net_time: Time spent inside specs in seconds.
        error: Host reported a run-level error (not a spec failure).
        disconnected: Browser disconnected before the run finished.
    """

    success: int = 0
    failed: int = 0
    skipped: int = 0
    total: int = 0
    total_time: float = 0.0
    net_time: float = 0.0
    error: bool = False
    disconnected: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("success", "failed", "skipped", "total"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        if self.total_time < 0:
            raise ValueError(f"total_time must be >= 0, got {self.total_time}")
        if self.net_time < 0:
            raise ValueError(f"net_time must be >= 0, got {self.net_time}")


@dataclass(frozen=True, slots=True)
class SpecResult:
    """Outcome of one finished spec.

    Attributes:
        description: Spec name (leaf of the suite path).
        suite: Enclosing suite names, outermost first.
        success: Spec passed.
        skipped: Spec was skipped.
        time: Spec duration in seconds.
        log: Failure messages, one entry per failed expectation.
    """

    description: str
    suite: tuple[str, ...] = ()
    success: bool = True
    skipped: bool = False
    time: float = 0.0
    log: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.description:
            raise ValueError("description must not be empty")
        if self.success and self.skipped:
            raise ValueError("spec cannot be both successful and skipped")
        if self.time < 0:
            raise ValueError(f"time must be >= 0, got {self.time}")

    @property
    def failed(self) -> bool:
        """Spec neither passed nor was skipped."""
        return not self.success and not self.skipped
