"""Avo Inspector wire records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypedDict


class AvoProperty(TypedDict):
    """One entry of ``eventProperties``."""

    propertyName: str
    propertyType: str


class AvoSessionStarted(TypedDict):
    """Marker record announcing a new session before a batch."""

    apiKey: str
    env: str
    appName: str
    sessionId: str
    createdAt: str
    appVersion: str
    libVersion: str
    libPlatform: str
    messageId: str
    trackingId: str
    samplingRate: float
    type: Literal["sessionStarted"]


class AvoEvent(TypedDict):
    """Event record in the Avo Inspector schema."""

    apiKey: str
    env: str
    appName: str
    sessionId: str
    createdAt: str
    avoFunction: bool
    eventId: str | None
    eventHash: str | None
    appVersion: str
    libVersion: str
    libPlatform: str
    messageId: str
    trackingId: str
    samplingRate: float
    type: Literal["event"]
    eventName: str
    eventProperties: list[AvoProperty]


@dataclass(frozen=True)
class WebhookRequest:
    """A fully composed HTTP request the host can send on our behalf."""

    url: str
    headers: dict[str, str]
    body: str
    method: str = "POST"
