"""Dispatch core: configuration, authentication and transport for every call.

The core knows nothing about individual endpoints. A subclass (the generated
client) supplies the ``endpoints`` table; :meth:`Core.call` looks the
descriptor up there and hands path, verb, body and metadata to
:meth:`Core.fetch`, which sends exactly one request.

Status codes never raise here. Transport failures propagate as the httpx
exceptions they are.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from dataclasses import replace
from typing import Any, Self

import httpx

from . import __version__
from .endpoints import Endpoint, expand_path
from .errors import (
    ConfigurationError,
    DispatchError,
    MissingBodyError,
    MissingParameterError,
    UnknownEndpointError,
)
from .responses import Result

logger = logging.getLogger(__name__)

Metadata = Mapping[str, Any]

DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_USER_AGENT = f"scorecard-sdk/{__version__}"

ENV_API_TOKEN = "SCORECARD_API_TOKEN"
ENV_URL = "SCORECARD_URL"
ENV_TIMEOUT = "SCORECARD_TIMEOUT"

_SERVER_VARIABLE = re.compile(r"\{([^}]+)\}")


def fill_server_url(
    url: str,
    variables: Mapping[str, Any],
    declared: Mapping[str, Any] | None = None,
) -> str:
    """Substitute ``{name}`` server variables, falling back to declared defaults."""
    declared = declared or {}

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in variables:
            return str(variables[name])
        if "default" in declared.get(name, {}):
            return str(declared[name]["default"])
        raise ConfigurationError(f"No value for server variable {name!r} in {url}")

    return _SERVER_VARIABLE.sub(_substitute, url).rstrip("/")


class Core:
    """Shared HTTP core used by every generated method.

    ``definition`` is the part of the API description the core needs:
    ``servers``, ``security`` and ``components.securitySchemes``.
    """

    endpoints: Mapping[str, Endpoint] = {}

    def __init__(
        self,
        definition: Mapping[str, Any],
        user_agent: str = DEFAULT_USER_AGENT,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._definition = definition
        self._user_agent = user_agent
        self._timeout_ms = DEFAULT_TIMEOUT_MS
        self._auth_headers: dict[str, str] = {}
        self._auth_params: dict[str, str] = {}
        self._http_auth: httpx.Auth | None = None

        servers = definition.get("servers") or []
        self._declared_variables: Mapping[str, Any] = (
            servers[0].get("variables", {}) if servers else {}
        )
        self._base_url = (
            fill_server_url(servers[0]["url"], {}, self._declared_variables) if servers else ""
        )

        self._http = httpx.AsyncClient(transport=transport)

    @classmethod
    def from_env(cls, *args: Any, **kwargs: Any) -> Self:
        """Build an instance configured from ``SCORECARD_*`` environment variables."""
        client = cls(*args, **kwargs)
        token = os.environ.get(ENV_API_TOKEN)
        if token:
            client.auth(token)
        url = os.environ.get(ENV_URL)
        if url:
            client.server(url)
        timeout = os.environ.get(ENV_TIMEOUT)
        if timeout:
            try:
                client.config(timeout=int(timeout))
            except ValueError as exc:
                raise ConfigurationError(f"{ENV_TIMEOUT} must be an integer, got {timeout!r}") from exc
        return client

    # -- configuration --

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> int:
        """Request timeout in milliseconds."""
        return self._timeout_ms

    def config(self, *, timeout: int | None = None) -> None:
        """Set the request timeout in milliseconds."""
        if timeout is not None:
            if timeout <= 0:
                raise ConfigurationError(f"timeout must be positive, got {timeout}")
            self._timeout_ms = timeout

    def server(self, url: str, variables: Mapping[str, Any] | None = None) -> None:
        """Override the base server URL, filling any ``{name}`` variables in it."""
        self._base_url = fill_server_url(url, variables or {}, self._declared_variables)

    def _security_scheme(self) -> tuple[str, Mapping[str, Any]]:
        schemes = self._definition.get("components", {}).get("securitySchemes", {})
        if not schemes:
            raise ConfigurationError("The API declares no security schemes")
        for requirement in self._definition.get("security", []):
            for name in requirement:
                if name in schemes:
                    return name, schemes[name]
        name = next(iter(schemes))
        return name, schemes[name]

    def auth(self, *credentials: str) -> None:
        """Attach credentials, interpreted by the API's declared security scheme.

        apiKey and bearer schemes take one value; basic takes a user and an
        optional password.
        """
        name, scheme = self._security_scheme()
        kind = scheme.get("type")
        http_scheme = str(scheme.get("scheme", "")).lower()

        headers: dict[str, str] = {}
        params: dict[str, str] = {}
        http_auth: httpx.Auth | None = None

        if kind == "apiKey":
            _expect_credentials(name, credentials, 1, 1)
            location = scheme.get("in", "header")
            key = scheme["name"]
            if location == "header":
                headers[key] = credentials[0]
            elif location == "query":
                params[key] = credentials[0]
            elif location == "cookie":
                headers["Cookie"] = f"{key}={credentials[0]}"
            else:
                raise ConfigurationError(f"Unsupported apiKey location {location!r} in {name}")
        elif kind == "http" and http_scheme == "bearer":
            _expect_credentials(name, credentials, 1, 1)
            headers["Authorization"] = f"Bearer {credentials[0]}"
        elif kind == "http" and http_scheme == "basic":
            _expect_credentials(name, credentials, 1, 2)
            password = credentials[1] if len(credentials) > 1 else ""
            http_auth = httpx.BasicAuth(credentials[0], password)
        else:
            raise ConfigurationError(f"Unsupported security scheme {name}: {dict(scheme)}")

        self._auth_headers = headers
        self._auth_params = params
        self._http_auth = http_auth

    # -- dispatch --

    async def fetch(
        self,
        path: str,
        method: str,
        body: Any = None,
        metadata: Metadata | None = None,
    ) -> Result:
        """Send one request and return its status-tagged result."""
        if not self._base_url:
            raise ConfigurationError("No server configured; call server() first")

        values = dict(metadata or {})
        try:
            expanded = expand_path(path, values)
        except KeyError as exc:
            raise MissingParameterError(exc.args[0], path) from None

        params = {key: value for key, value in values.items() if value is not None}
        params.update(self._auth_params)
        headers = {
            "Accept": "application/json",
            "User-Agent": self._user_agent,
            **self._auth_headers,
        }

        response = await self._http.request(
            method.upper(),
            self._base_url + expanded,
            params=params,
            headers=headers,
            json=body,
            auth=self._http_auth,
            timeout=self._timeout_ms / 1000,
        )
        logger.debug("%s %s -> %d", method.upper(), response.url, response.status_code)
        return Result.from_response(response)

    async def call(
        self,
        endpoint_id: str,
        body: Any = None,
        metadata: Metadata | None = None,
    ) -> Result:
        """Dispatch a call through the endpoint table.

        Body and metadata are checked against the descriptor before any
        request is sent.
        """
        try:
            endpoint = self.endpoints[endpoint_id]
        except KeyError:
            raise UnknownEndpointError(endpoint_id) from None

        if body is None and endpoint.requires_body:
            raise MissingBodyError(endpoint_id)
        if body is not None and not endpoint.accepts_body:
            raise DispatchError(f"{endpoint_id} does not take a request body")
        if endpoint.requires_metadata:
            given = metadata or {}
            for name in (*endpoint.placeholders, *endpoint.required_query):
                if given.get(name) is None:
                    raise MissingParameterError(name, endpoint.path)
            if metadata is None:
                raise MissingParameterError("metadata", endpoint.path)

        result = await self.fetch(endpoint.path, endpoint.method, body, metadata)
        return replace(result, endpoint=endpoint)

    # -- lifecycle --

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def _expect_credentials(
    scheme_name: str,
    credentials: tuple[str, ...],
    minimum: int,
    maximum: int,
) -> None:
    if not minimum <= len(credentials) <= maximum:
        expected = str(minimum) if minimum == maximum else f"{minimum} to {maximum}"
        raise ConfigurationError(
            f"{scheme_name} takes {expected} credential(s), got {len(credentials)}"
        )
