"""Reporter options parsed from host configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from nyanreporter.domain.exceptions import ConfigurationError

# Key of the nested reporter section inside the host config mapping.
REPORTER_SECTION = "nyan_reporter"


@dataclass(frozen=True, slots=True)
class ReporterOptions:
    """Recognized reporter options.

    Only known fields exist on the object, so unrecognized config keys
    can never leak in.

    Attributes:
        suppress_error_report: Skip persisting failure detail and the
            failure tree in the final summary.
    """

    suppress_error_report: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.suppress_error_report, bool):
            raise ConfigurationError(
                "suppress_error_report",
                f"expected bool, got {type(self.suppress_error_report).__name__}",
            )

    @classmethod
    def from_config(cls, config: Mapping[str, object] | None) -> ReporterOptions:
        """Build options from a host config mapping.

        Reads config["nyan_reporter"]["suppress_error_report"]. Everything
        else is ignored.

        Args:
            config: Host configuration. None = defaults.

        Returns:
            Parsed options.

        Raises:
            ConfigurationError: Reporter section is not a mapping.
        """
        if not config:
            return cls()

        section = config.get(REPORTER_SECTION)
        if section is None:
            return cls()
        if not isinstance(section, Mapping):
            raise ConfigurationError(
                REPORTER_SECTION,
                f"expected mapping, got {type(section).__name__}",
            )

        # Truthiness decides.
        suppress = section.get("suppress_error_report", False)
        return cls(suppress_error_report=bool(suppress))
