"""Get-or-create accessors for process-wide collaborators."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable


T = TypeVar("T")


class SingletonProvider(Generic[T]):
    """Lazily builds one instance and hands it out on every call.

    Contract:
      - First call builds the instance via factory
      - Later calls return the same instance
      - on_acquire (if set) runs on EVERY call, including the first;
        collaborators use it to clear per-run state

    Thread-safe: construction happens under a lock.
    """

    __slots__ = ("_factory", "_instance", "_lock", "_on_acquire")

    def __init__(
        self,
        factory: Callable[[], T],
        on_acquire: Callable[[T], None] | None = None,
    ) -> None:
        """Initialize provider.

        Args:
            factory: Zero-argument constructor of the instance.
            on_acquire: Hook run on each acquisition. None = no hook.

        Raises:
            TypeError: factory or on_acquire is not callable.
        """
        # FAIL-FIRST: validate callables immediately
        if not callable(factory):
            raise TypeError(f"factory must be callable, got {type(factory).__name__}")
        if on_acquire is not None and not callable(on_acquire):
            raise TypeError(f"on_acquire must be callable, got {type(on_acquire).__name__}")

        self._factory = factory
        self._on_acquire = on_acquire
        self._instance: T | None = None
        self._lock = threading.Lock()

    def __call__(self) -> T:
        """Get (or create) the instance."""
        with self._lock:
            if self._instance is None:
                self._instance = self._factory()
            instance = self._instance

        if self._on_acquire is not None:
            self._on_acquire(instance)
        return instance

