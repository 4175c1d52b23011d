"""Avo Inspector HTTP client — constructed once at startup with all config."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

import httpx


class InspectorRequestError(ValueError):
    """The Avo endpoint rejected a request or answered with garbage."""


class AvoInspectorClient:
    """Posts JSON record arrays to the Avo ingestion endpoint.

    Built once at startup with the header map; every call opens its own
    ``httpx.AsyncClient`` and relies on its default timeout.
    """

    def __init__(self, *, endpoint_url: str, headers: Mapping[str, str]) -> None:
        self._endpoint_url = endpoint_url
        self._headers = dict(headers)

    @property
    def endpoint_url(self) -> str:
        """The ingestion URL every record array is posted to."""
        return self._endpoint_url

    @property
    def headers(self) -> dict[str, str]:
        """A copy of the default request headers."""
        return dict(self._headers)

    def encode(self, records: Sequence[Mapping[str, Any]]) -> str:
        """Serialize records into the JSON array request body."""
        return json.dumps([dict(record) for record in records])

    async def _post(
        self, http_client: httpx.AsyncClient, records: Sequence[Mapping[str, Any]],
    ) -> httpx.Response:
        response = await http_client.post(
            self._endpoint_url,
            headers=self._headers,
            content=self.encode(records),
        )
        if response.status_code != 200:
            raise InspectorRequestError(
                f"Avo inspector request failed: {response.status_code} {response.text}"
            )
        return response

    async def track(self, records: Sequence[Mapping[str, Any]]) -> None:
        """POST one record array.

        Raises:
            InspectorRequestError: If the endpoint does not answer 200.
            httpx.HTTPError: On network failures.
        """
        async with httpx.AsyncClient() as http_client:
            await self._post(http_client, records)

    async def track_session(
        self,
        session_marker: Mapping[str, Any],
        records: Sequence[Mapping[str, Any]],
    ) -> None:
        """POST a session marker, then the batch that belongs to it.

        Both calls must answer 200, and the batch response must be JSON
        without an explicit ``ok: false``.

        Raises:
            InspectorRequestError: If either call fails those checks.
            httpx.HTTPError: On network failures.
        """
        async with httpx.AsyncClient() as http_client:
            await self._post(http_client, [session_marker])
            response = await self._post(http_client, records)
            try:
                body = response.json()
            except ValueError as error:
                raise InspectorRequestError(
                    f"Avo inspector returned an unparseable body: {response.text}"
                ) from error
            if isinstance(body, dict) and body.get("ok") is False:
                raise InspectorRequestError(
                    f"Avo inspector rejected the batch: {body}"
                )
