"""Avo Inspector plugin — forward filtered host events to Avo."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx

from avo_forwarder.clients.avo_inspector_client import (
    AvoInspectorClient,
    InspectorRequestError,
)
from avo_forwarder.models.event import IncomingEvent
from avo_forwarder.models.payload import WebhookRequest
from avo_forwarder.plugins.event import EventPlugin, HostEvent
from avo_forwarder.services.payload_service import PayloadService

logger = logging.getLogger(__name__)


class AvoInspectorPlugin(EventPlugin):
    """Filter, reshape and send host events to the Avo Inspector endpoint.

    Transport failures are logged and swallowed; no call on this plugin
    raises because Avo was unreachable or rejected a request.
    """

    def __init__(
        self, payload_service: PayloadService, client: AvoInspectorClient,
    ) -> None:
        self._payloads = payload_service
        self._client = client

    @staticmethod
    def _coerce(event: HostEvent) -> IncomingEvent:
        if isinstance(event, IncomingEvent):
            return event
        return IncomingEvent.from_host(event)

    def compose_webhook(self, event: HostEvent) -> WebhookRequest | None:
        """Describe the single-event request, or None if the event is filtered out."""
        incoming = self._coerce(event)
        if not self._payloads.accepts(incoming):
            logger.debug("Skipping filtered event %s", incoming.name)
            return None
        payload = self._payloads.to_payload(
            incoming, PayloadService.new_session_id(),
        )
        return WebhookRequest(
            url=self._client.endpoint_url,
            headers=self._client.headers,
            body=self._client.encode([payload]),
        )

    async def on_event(self, event: HostEvent) -> bool:
        """Forward one event. Returns True if Avo accepted it."""
        incoming = self._coerce(event)
        if not self._payloads.accepts(incoming):
            logger.debug("Skipping filtered event %s", incoming.name)
            return False
        payload = self._payloads.to_payload(
            incoming, PayloadService.new_session_id(),
        )
        try:
            await self._client.track([payload])
        except (InspectorRequestError, httpx.HTTPError, httpx.InvalidURL) as error:
            logger.warning(
                "Failed to send event %s to Avo inspector: %s",
                incoming.name, error,
            )
            return False
        logger.debug("Sent event %s to Avo inspector", incoming.name)
        return True

    async def export_events(self, events: Sequence[HostEvent]) -> int:
        """Forward a batch behind a session marker. Returns count forwarded."""
        accepted = [
            incoming
            for incoming in (self._coerce(event) for event in events)
            if self._payloads.accepts(incoming)
        ]
        if not accepted:
            logger.debug("No events left to export after filtering %d", len(events))
            return 0

        session_id = PayloadService.new_session_id()
        marker = self._payloads.session_started(session_id)
        payloads = [
            self._payloads.to_payload(incoming, session_id) for incoming in accepted
        ]
        try:
            await self._client.track_session(marker, payloads)
        except (InspectorRequestError, httpx.HTTPError, httpx.InvalidURL) as error:
            logger.warning(
                "Failed to export %d events to Avo inspector: %s",
                len(payloads), error,
            )
            return 0
        logger.debug(
            "Exported %d events to Avo inspector in session %s",
            len(payloads), session_id,
        )
        return len(payloads)

    async def handle(self, events: Sequence[HostEvent]) -> int:
        """EventPlugin entry point — batch export."""
        return await self.export_events(events)
