"""Transformation of host events into Avo Inspector records."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from typing import Any

from avo_forwarder.config.settings import Settings
from avo_forwarder.models.event import FilterConfig, IncomingEvent
from avo_forwarder.models.payload import AvoEvent, AvoProperty, AvoSessionStarted
from avo_forwarder.utils.filters import NameFilter
from avo_forwarder.utils.property_types import PropertyType
from avo_forwarder.utils.time import Time


class PayloadService:
    """Built once at startup with settings and frozen filters pre-wired."""

    def __init__(self, settings: Settings, filters: FilterConfig) -> None:
        self._settings = settings
        self._filters = filters

    @property
    def filters(self) -> FilterConfig:
        """The include/exclude sets this service applies."""
        return self._filters

    def accepts(self, event: IncomingEvent) -> bool:
        """True if the event has a name and it passes the event filters."""
        if not event.name:
            return False
        return NameFilter.should_forward(
            event.name,
            self._filters.include_events,
            self._filters.exclude_events,
        )

    def convert_properties(self, properties: Mapping[str, Any]) -> list[AvoProperty]:
        """Filter and type-tag a property map, preserving its order."""
        return [
            AvoProperty(propertyName=name, propertyType=PropertyType.classify(value))
            for name, value in properties.items()
            if NameFilter.should_forward(
                name,
                self._filters.include_properties,
                self._filters.exclude_properties,
            )
        ]

    def to_payload(self, event: IncomingEvent, session_id: str) -> AvoEvent:
        """Build the Avo event record for one host event."""
        return AvoEvent(
            apiKey=self._settings.avo_api_key,
            env=self._settings.environment,
            appName=self._settings.app_name,
            sessionId=session_id,
            createdAt=Time.iso_timestamp(),
            avoFunction=False,
            eventId=None,
            eventHash=None,
            appVersion=self._settings.app_version,
            libVersion=self._settings.lib_version,
            libPlatform=self._settings.lib_platform,
            messageId=event.uuid,
            trackingId="",
            samplingRate=self._settings.sampling_rate,
            type="event",
            eventName=event.name,
            eventProperties=self.convert_properties(event.properties),
        )

    def session_started(self, session_id: str) -> AvoSessionStarted:
        """Build the marker record that opens a batch session."""
        return AvoSessionStarted(
            apiKey=self._settings.avo_api_key,
            env=self._settings.environment,
            appName=self._settings.app_name,
            sessionId=session_id,
            createdAt=Time.iso_timestamp(),
            appVersion=self._settings.app_version,
            libVersion=self._settings.lib_version,
            libPlatform=self._settings.lib_platform,
            messageId=str(uuid.uuid4()),
            trackingId="",
            samplingRate=self._settings.sampling_rate,
            type="sessionStarted",
        )

    @staticmethod
    def new_session_id() -> str:
        """Fresh identifier shared by a session marker and its batch."""
        return str(uuid.uuid4())
