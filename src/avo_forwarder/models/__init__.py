"""Event and payload models."""

from avo_forwarder.models.event import FilterConfig as FilterConfig
from avo_forwarder.models.event import IncomingEvent as IncomingEvent
from avo_forwarder.models.payload import AvoEvent as AvoEvent
from avo_forwarder.models.payload import AvoProperty as AvoProperty
from avo_forwarder.models.payload import AvoSessionStarted as AvoSessionStarted
from avo_forwarder.models.payload import WebhookRequest as WebhookRequest
