"""Scheme and codec registry for versioned configuration files.

This module maps config API kinds (group/version/kind) to Python types and
decodes YAML or JSON documents into those types.

Design Principles:
    - Explicit Init: Types are installed by calling install(), never on import
    - Registry Pattern: Kinds are registered at runtime, no hardcoded lookup
    - Clear Errors: Decode failures name the offending apiVersion/kind

Usage:
    codecs = new_config_codecs()
    config = codecs.decode(Path("tracing.yaml").read_bytes())
"""

from typing import Any

import yaml

from core.types import CONFIG_GROUP, GroupVersionKind, TracingConfiguration
from observability.logger import get_logger

logger = get_logger(__name__)

# Config API versions served for the apiserver config group
CONFIG_VERSIONS = ("v1alpha1", "v1beta1", "v1")


class SchemeError(Exception):
    """Base exception for scheme and codec errors."""

    pass


class UnknownKindError(SchemeError):
    """Raised when a document names a kind the scheme does not know."""

    def __init__(self, message: str, gvk: GroupVersionKind | None = None) -> None:
        super().__init__(message)
        self.gvk = gvk


class DecodeError(SchemeError):
    """Raised when a document cannot be decoded."""

    pass


class Scheme:
    """Registry of config API kinds and the types that represent them."""

    def __init__(self) -> None:
        self._types: dict[GroupVersionKind, type] = {}

    def add_known_type(self, gvk: GroupVersionKind, type_: type) -> None:
        """Register a type for a kind.

        Registering the same type twice is a no-op.

        Raises:
            SchemeError: If a different type is already registered for gvk
        """
        existing = self._types.get(gvk)
        if existing is not None and existing is not type_:
            raise SchemeError(
                f"Double registration of different types for {gvk}: "
                f"{existing.__name__} and {type_.__name__}"
            )
        self._types[gvk] = type_

    def recognizes(self, gvk: GroupVersionKind) -> bool:
        return gvk in self._types

    def type_for(self, gvk: GroupVersionKind) -> type:
        """Return the type registered for gvk.

        Raises:
            UnknownKindError: If gvk is not registered
        """
        try:
            return self._types[gvk]
        except KeyError:
            raise UnknownKindError(f"no kind is registered for {gvk}", gvk=gvk) from None

    def known_kinds(self, api_version: str) -> list[str]:
        """List kinds registered for an apiVersion ('group/version')."""
        return sorted(gvk.kind for gvk in self._types if gvk.api_version == api_version)

    def group_versions(self) -> list[str]:
        return sorted({gvk.api_version for gvk in self._types})


def install(scheme: Scheme) -> None:
    """Register every known config API version into scheme."""
    for version in CONFIG_VERSIONS:
        gvk = GroupVersionKind(CONFIG_GROUP, version, "TracingConfiguration")
        scheme.add_known_type(gvk, TracingConfiguration)
    logger.debug(f"Installed config API versions: {', '.join(scheme.group_versions())}")


class CodecFactory:
    """Decodes config documents into the types known to a scheme."""

    def __init__(self, scheme: Scheme) -> None:
        self.scheme = scheme

    def decode(self, data: bytes | str) -> Any:
        """Decode a YAML or JSON document.

        Args:
            data: Raw document with 'apiVersion' and 'kind' fields

        Returns:
            Instance of the type registered for the document's kind

        Raises:
            DecodeError: If the document is malformed
            UnknownKindError: If the kind is not registered
        """
        try:
            doc = yaml.safe_load(data)
        except yaml.YAMLError as e:
            raise DecodeError(f"Invalid YAML in config document: {e}") from e

        if not isinstance(doc, dict):
            raise DecodeError("Config document must be a mapping")

        api_version = doc.get("apiVersion")
        kind = doc.get("kind")
        if not api_version or not kind:
            raise DecodeError("Config document is missing 'apiVersion' or 'kind'")

        gvk = GroupVersionKind.from_api_version(str(api_version), str(kind))
        type_ = self.scheme.type_for(gvk)

        fields = {k: v for k, v in doc.items() if k not in ("apiVersion", "kind")}
        try:
            return type_.from_dict(fields)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Invalid {gvk}: {e}") from e


def new_config_codecs() -> CodecFactory:
    """Build a scheme with all config API versions installed.

    The server bootstrap calls this once, before any component decodes
    a config file.
    """
    scheme = Scheme()
    install(scheme)
    return CodecFactory(scheme)
