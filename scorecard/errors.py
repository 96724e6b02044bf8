from __future__ import annotations

from typing import Any


class ScorecardError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(ScorecardError):
    """Invalid ``auth()``, ``server()`` or ``config()`` arguments."""


class DispatchError(ScorecardError):
    """A call was rejected before any request was sent."""


class UnknownEndpointError(DispatchError, KeyError):
    def __init__(self, endpoint_id: str) -> None:
        self.endpoint_id = endpoint_id
        super().__init__(endpoint_id)

    def __str__(self) -> str:
        return f"Unknown endpoint: {self.endpoint_id}"


class MissingBodyError(DispatchError, ValueError):
    def __init__(self, endpoint_id: str) -> None:
        self.endpoint_id = endpoint_id
        super().__init__(f"{endpoint_id} requires a request body")


class MissingParameterError(DispatchError, ValueError):
    def __init__(self, name: str, path: str) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Missing value for parameter {name!r} in {path}")


class ApiError(ScorecardError):
    def __init__(
        self,
        status_code: int,
        *,
        message: str | None = None,
        response_body: Any | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.response_body = response_body

        super().__init__(str(self))

    def __str__(self) -> str:
        if self.message:
            return f"API error {self.status_code}: {self.message}"
        return f"API error {self.status_code}"
