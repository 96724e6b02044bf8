"""Status-tagged call results."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import httpx

from .endpoints import Endpoint
from .errors import ApiError


def _looks_like_json(content_type: str) -> bool:
    if not content_type:
        return False
    mime = content_type.split(";", 1)[0].strip().lower()
    return mime == "application/json" or mime.endswith("+json") or mime == "text/json"


def decode_payload(response: httpx.Response) -> Any:
    """Decode a response body: JSON when declared as such, text otherwise."""
    if response.status_code == 204 or not response.content:
        return None

    if not _looks_like_json(response.headers.get("Content-Type", "")):
        return response.text

    try:
        return json.loads(response.content)
    except json.JSONDecodeError as exc:
        raise ApiError(
            response.status_code,
            message=f"Invalid JSON response: {exc}",
            response_body=response.text,
        ) from exc


@dataclass(frozen=True)
class Result:
    """Outcome of one call, tagged by HTTP status code.

    Documented error statuses come back as a Result like any other; use
    :meth:`raise_for_status` to turn non-2xx results into :class:`ApiError`.
    """

    status: int
    data: Any
    headers: httpx.Headers
    endpoint: Endpoint | None = None

    @classmethod
    def from_response(cls, response: httpx.Response, endpoint: Endpoint | None = None) -> Result:
        return cls(
            status=response.status_code,
            data=decode_payload(response),
            headers=response.headers,
            endpoint=endpoint,
        )

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def documented(self) -> bool:
        """Whether the API description lists this status for the endpoint."""
        if self.endpoint is None:
            return False
        return self.status in self.endpoint.statuses

    def raise_for_status(self) -> Result:
        if self.ok:
            return self
        message = None
        if isinstance(self.data, dict):
            error = self.data.get("error")
            if isinstance(error, dict):
                message = error.get("message")
            elif isinstance(error, str):
                message = error
        elif isinstance(self.data, str) and self.data:
            message = self.data
        raise ApiError(self.status, message=message, response_body=self.data)
