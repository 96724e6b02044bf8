"""Uptime check records and aggregate statistics.

Independent of the API client: plain data shapes, the helpers that produce
and summarise them, an in-memory website registry and a polling loop.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Literal

import httpx

logger = logging.getLogger(__name__)

UptimeStatus = Literal["up", "slow", "down"]

RESPONSE_THRESHOLD_MS = 5000
CHECK_TIMEOUT_S = 10.0
CHECK_INTERVAL_S = 5.0
HISTORY_LIMIT = 1000


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class UptimeCheck:
    timestamp: str
    status: UptimeStatus
    response_time: float
    website_name: str | None = None


@dataclass(frozen=True)
class UptimeStats:
    total_checks: int
    uptime: float
    average_response_time: float
    last_check: UptimeCheck


def calculate_uptime_stats(checks: Sequence[UptimeCheck]) -> UptimeStats:
    """Summarise checks: percentage of ``up`` samples and mean response time.

    ``slow`` samples count against uptime. An empty sequence yields zeros
    and a synthetic ``down`` check stamped now.
    """
    total = len(checks)
    if total == 0:
        return UptimeStats(
            total_checks=0,
            uptime=0.0,
            average_response_time=0.0,
            last_check=UptimeCheck(timestamp=_now(), status="down", response_time=0.0),
        )

    up = sum(1 for check in checks if check.status == "up")
    return UptimeStats(
        total_checks=total,
        uptime=up / total * 100,
        average_response_time=sum(check.response_time for check in checks) / total,
        last_check=checks[-1],
    )


async def check_website(
    client: httpx.AsyncClient,
    url: str,
    *,
    name: str | None = None,
    threshold: float = RESPONSE_THRESHOLD_MS,
    timeout: float = CHECK_TIMEOUT_S,
) -> UptimeCheck:
    """GET ``url`` once and classify it as up, slow or down.

    Response time is in milliseconds and covers any redirects followed. Any
    transport error or non-2xx final status is ``down``; a successful
    response slower than ``threshold`` is ``slow``.
    """
    started = time.monotonic()
    try:
        response = await client.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        elapsed = (time.monotonic() - started) * 1000
        logger.info("%s is down: %s", name or url, exc)
        return UptimeCheck(_now(), "down", elapsed, name)

    elapsed = (time.monotonic() - started) * 1000
    status: UptimeStatus = "slow" if elapsed > threshold else "up"
    return UptimeCheck(_now(), status, elapsed, name)


class UptimeHistory:
    """Bounded in-memory record of the most recent checks."""

    def __init__(self, limit: int = HISTORY_LIMIT) -> None:
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")
        self._checks: deque[UptimeCheck] = deque(maxlen=limit)

    def __len__(self) -> int:
        return len(self._checks)

    def __iter__(self) -> Iterator[UptimeCheck]:
        return iter(self._checks)

    def append(self, check: UptimeCheck) -> None:
        self._checks.append(check)

    def recent(self, n: int = 50) -> list[UptimeCheck]:
        if n <= 0:
            return []
        return list(self._checks)[-n:]

    def for_website(self, name: str) -> list[UptimeCheck]:
        return [check for check in self._checks if check.website_name == name]

    def stats(self) -> UptimeStats:
        return calculate_uptime_stats(list(self._checks))


@dataclass(frozen=True)
class Website:
    """A monitored site.

    ``interval`` is the check period the site asks for, in seconds. It is
    stored with the site; :func:`monitor` runs on its own period.
    """

    url: str
    name: str
    interval: float = CHECK_INTERVAL_S
    is_active: bool = True
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: str = field(default_factory=_now)


class WebsiteRegistry:
    """In-memory websites, each with its own bounded check history."""

    def __init__(self, limit: int = HISTORY_LIMIT) -> None:
        self._limit = limit
        self._websites: dict[str, Website] = {}
        self._histories: dict[str, UptimeHistory] = {}

    def __len__(self) -> int:
        return len(self._websites)

    def __iter__(self) -> Iterator[Website]:
        return iter(list(self._websites.values()))

    def add(
        self,
        url: str,
        name: str,
        *,
        interval: float = CHECK_INTERVAL_S,
        is_active: bool = True,
    ) -> Website:
        website = Website(url, name, interval, is_active)
        self._websites[website.id] = website
        self._histories[website.id] = UptimeHistory(self._limit)
        return website

    def get(self, website_id: str) -> Website | None:
        return self._websites.get(website_id)

    def update(self, website_id: str, **changes: object) -> Website | None:
        """Apply ``changes`` to a website; None if it is unknown.

        ``id`` and ``created_at`` cannot change.
        """
        current = self._websites.get(website_id)
        if current is None:
            return None
        frozen = {"id", "created_at"} & changes.keys()
        if frozen:
            raise ValueError(f"Cannot change {', '.join(sorted(frozen))}")
        updated = replace(current, **changes)
        self._websites[website_id] = updated
        return updated

    def delete(self, website_id: str) -> bool:
        self._histories.pop(website_id, None)
        return self._websites.pop(website_id, None) is not None

    def record(self, website_id: str, check: UptimeCheck) -> None:
        history = self._histories.get(website_id)
        if history is None:
            history = self._histories[website_id] = UptimeHistory(self._limit)
        history.append(check)

    def history(self, website_id: str) -> UptimeHistory:
        """Checks recorded for one website; empty for an unknown id."""
        history = self._histories.get(website_id)
        return history if history is not None else UptimeHistory(self._limit)


async def monitor(
    client: httpx.AsyncClient,
    websites: WebsiteRegistry,
    interval: float = CHECK_INTERVAL_S,
    *,
    history: UptimeHistory | None = None,
    rounds: int | None = None,
) -> None:
    """Check every active website, then sleep ``interval`` seconds; repeat.

    Each check goes to the website's own history in ``websites`` and, when
    given, to the shared ``history``. Runs until cancelled, or for ``rounds``
    rounds.
    """
    completed = 0
    while rounds is None or completed < rounds:
        for website in websites:
            if not website.is_active:
                continue
            check = await check_website(client, website.url, name=website.name)
            websites.record(website.id, check)
            if history is not None:
                history.append(check)
        completed += 1
        logger.debug("Monitoring round %d done (%d websites)", completed, len(websites))
        if rounds is None or completed < rounds:
            await asyncio.sleep(interval)
