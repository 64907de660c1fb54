"""Local-time projection: the one place that touches the tz database."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol
from zoneinfo import ZoneInfo

from dialwindow.window.model import LocalInstant


class LocalProjector(Protocol):
    """Port: project a UTC instant into a named zone's wall-clock time."""

    def project(self, timezone: str, instant: datetime) -> LocalInstant: ...


class ZoneInfoProjector:
    """Production projector backed by :mod:`zoneinfo`.

    Naive instants are read as UTC. Unknown zone names raise
    :class:`zoneinfo.ZoneInfoNotFoundError`.
    """

    def project(self, timezone: str, instant: datetime) -> LocalInstant:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        return LocalInstant.from_datetime(instant.astimezone(ZoneInfo(timezone)))


DEFAULT_PROJECTOR: LocalProjector = ZoneInfoProjector()

__all__ = ["DEFAULT_PROJECTOR", "LocalProjector", "ZoneInfoProjector"]
