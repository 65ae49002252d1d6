from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional


class _MissingSentinel:
    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _MissingSentinel()


DISCORD_EPOCH = 1420070400000


def snowflake_time(snowflake: int | str) -> Optional[datetime]:
    try:
        value = int(snowflake)
    except (TypeError, ValueError):
        return None
    timestamp = (value >> 22) + DISCORD_EPOCH
    return datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc)


def normalize_token(token: Optional[str]) -> Optional[str]:
    # Accept tokens pasted with their scheme prefix.
    if not token:
        return token
    lowered = token.lower()
    if lowered.startswith("bot "):
        return token[4:]
    if lowered.startswith("bearer "):
        return token[7:]
    return token


def object_id(value: Any) -> str:
    return str(getattr(value, "id", value))
