"""Domain exceptions: all public errors of nyanreporter.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application use these, not define their own public exceptions.
"""


class NyanReporterError(Exception):
    """Base for all nyanreporter error exceptions.

    Allows: except NyanReporterError to catch all library errors.
    """


class ConfigurationError(NyanReporterError, ValueError):
    """Reporter configuration has an invalid shape or value.

    Inherits ValueError for semantic correctness (bad input value).

    Attributes:
        key: Configuration key that failed validation.
        reason: Why the value was rejected.
    """

    def __init__(self, key: str, reason: str) -> None:
        """Initialize with offending key and reason."""
        # FAIL-FIRST validation
        if not key:
            raise ValueError("key must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.key = key
        self.reason = reason
        super().__init__(f"Invalid configuration '{key}': {reason}")


class RunNotStartedError(NyanReporterError, RuntimeError):
    """Collaborator needed before the first reset acquired it.

    Inherits RuntimeError for semantic correctness (invalid state).

    Attributes:
        collaborator: Name of the missing collaborator.
    """

    def __init__(self, collaborator: str) -> None:
        """Initialize with the collaborator name."""
        self.collaborator = collaborator
        super().__init__(f"{collaborator} not acquired: on_run_start() or reset() was never called")


class UnknownEventError(NyanReporterError, TypeError):
    """handle() received an object that is not a lifecycle event.

    Attributes:
        got: Type of the rejected object.
    """

    def __init__(self, got: type) -> None:
        """Initialize with the rejected type."""
        self.got = got
        super().__init__(f"Expected a lifecycle event, got {got.__name__}")
