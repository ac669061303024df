"""Versioned configuration API types.

This module defines the typed objects the config codec decodes
referenced configuration files into.

Design Principles:
    - Serializable: All types can be converted to dict (camelCase keys)
    - Immutable: API types use frozen dataclasses
"""

from dataclasses import dataclass
from typing import Any


CONFIG_GROUP = "apiserver.config"


@dataclass(frozen=True)
class GroupVersionKind:
    """Identifies a config API type.

    Attributes:
        group: API group (e.g., 'apiserver.config')
        version: API version (e.g., 'v1alpha1')
        kind: Type name (e.g., 'TracingConfiguration')
    """
    group: str
    version: str
    kind: str

    @property
    def api_version(self) -> str:
        """Return the 'group/version' string used in documents."""
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"

    @classmethod
    def from_api_version(cls, api_version: str, kind: str) -> "GroupVersionKind":
        """Build from an 'apiVersion' field and a kind."""
        group, _, version = api_version.rpartition("/")
        return cls(group=group, version=version, kind=kind)

    def __str__(self) -> str:
        return f"{self.api_version}, Kind={self.kind}"


@dataclass(frozen=True)
class TracingConfiguration:
    """Tracing exporter configuration.

    Attributes:
        endpoint: Collector endpoint (host:port); None uses the exporter default
        sampling_rate_per_million: Spans sampled per million; None uses the default
    """
    endpoint: str | None = None
    sampling_rate_per_million: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: dict[str, Any] = {}
        if self.endpoint is not None:
            result["endpoint"] = self.endpoint
        if self.sampling_rate_per_million is not None:
            result["samplingRatePerMillion"] = self.sampling_rate_per_million
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TracingConfiguration":
        """Create from dictionary.

        Raises:
            TypeError: If a field has the wrong type
        """
        endpoint = data.get("endpoint")
        if endpoint is not None and not isinstance(endpoint, str):
            raise TypeError(f"endpoint must be a string, got {type(endpoint).__name__}")

        rate = data.get("samplingRatePerMillion")
        if rate is not None and (isinstance(rate, bool) or not isinstance(rate, int)):
            raise TypeError(
                f"samplingRatePerMillion must be an integer, got {type(rate).__name__}"
            )

        return cls(endpoint=endpoint, sampling_rate_per_million=rate)
