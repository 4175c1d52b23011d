"""Host analytics event and the filter configuration applied to it."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from avo_forwarder.config.settings import Settings


@dataclass(frozen=True)
class IncomingEvent:
    """An event handed over by the host pipeline. Never mutated here."""

    name: str
    uuid: str
    properties: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_host(cls, data: Mapping[str, Any]) -> IncomingEvent:
        """Build from the host's event mapping (``event``, ``uuid``, ``properties``)."""
        properties = data.get("properties") or {}
        name = data.get("event")
        event_uuid = data.get("uuid")
        return cls(
            name="" if name is None else str(name),
            uuid="" if event_uuid is None else str(event_uuid),
            properties=MappingProxyType(dict(properties)),
        )


@dataclass(frozen=True)
class FilterConfig:
    """Include/exclude name sets. Built once at setup, immutable afterwards."""

    include_events: frozenset[str] = frozenset()
    exclude_events: frozenset[str] = frozenset()
    include_properties: frozenset[str] = frozenset()
    exclude_properties: frozenset[str] = frozenset()

    @classmethod
    def from_settings(cls, settings: Settings) -> FilterConfig:
        """Freeze the list-valued filter settings."""
        return cls(
            include_events=frozenset(settings.include_events),
            exclude_events=frozenset(settings.exclude_events),
            include_properties=frozenset(settings.include_properties),
            exclude_properties=frozenset(settings.exclude_properties),
        )
