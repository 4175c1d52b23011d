"""Event plugin contract — extensible host event processing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from avo_forwarder.models.event import IncomingEvent

HostEvent = IncomingEvent | Mapping[str, Any]


class EventPlugin(ABC):
    """Processes analytics events handed over by the host pipeline.

    Implementations decide what to do with the events — forward them to a
    partner API, store them, or both.
    """

    @abstractmethod
    async def handle(self, events: Sequence[HostEvent]) -> int:
        """Process a batch of host events.

        Args:
            events: Events as ``IncomingEvent`` or raw host mappings.

        Returns:
            Count of events forwarded.
        """
