"""Endpoint descriptors: static facts about one API operation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal
from urllib.parse import quote

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "PATCH", "DELETE")

_PLACEHOLDER = re.compile(r"\{([^}/]+)\}")


@dataclass(frozen=True)
class Endpoint:
    """One (path, verb) pair and what a call to it must carry.

    ``accepts_*`` says whether the operation takes a body / metadata at all,
    ``requires_*`` whether the caller must supply it. ``required_query``
    names the query parameters that must be present in the metadata.
    """

    id: str
    method: HttpMethod
    path: str
    accepts_body: bool = False
    requires_body: bool = False
    accepts_metadata: bool = False
    requires_metadata: bool = False
    required_query: tuple[str, ...] = ()
    statuses: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if self.method not in METHODS:
            raise ValueError(f"{self.id}: unsupported HTTP method {self.method!r}")
        if self.requires_body and not self.accepts_body:
            raise ValueError(f"{self.id}: requires_body without accepts_body")
        if self.requires_metadata and not self.accepts_metadata:
            raise ValueError(f"{self.id}: requires_metadata without accepts_metadata")
        if self.placeholders and not self.requires_metadata:
            raise ValueError(f"{self.id}: path placeholders need required metadata")
        if self.required_query and not self.requires_metadata:
            raise ValueError(f"{self.id}: required query parameters need required metadata")

    @property
    def placeholders(self) -> tuple[str, ...]:
        return tuple(_PLACEHOLDER.findall(self.path))


def expand_path(path: str, values: dict[str, object]) -> str:
    """Fill ``{name}`` placeholders, popping the used keys from ``values``.

    Raises KeyError naming the first placeholder without a value.
    """

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        value = values.pop(name, None)
        if value is None:
            raise KeyError(name)
        return quote(str(value), safe="")

    return _PLACEHOLDER.sub(_substitute, path)
