from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Iterable, List, Optional

from .utils import MISSING, object_id


@dataclass
class AllowedMentions:
    """Controls which mentions in an outgoing message actually ping.

    Each attribute is either ``MISSING`` (leave the platform default),
    ``True``/``False`` (allow or suppress the whole category), or for
    ``users``/``roles`` an iterable of objects or ids to allow explicitly.
    """

    everyone: bool | object = MISSING
    users: bool | Iterable[Any] | object = MISSING
    roles: bool | Iterable[Any] | object = MISSING
    replied_user: bool | object = MISSING

    @classmethod
    def none(cls) -> "AllowedMentions":
        return cls(everyone=False, users=False, roles=False, replied_user=False)

    @classmethod
    def all(cls) -> "AllowedMentions":
        return cls(everyone=True, users=True, roles=True, replied_user=True)

    def merge(self, other: Optional["AllowedMentions"]) -> "AllowedMentions":
        if other is None:
            return self
        merged = {}
        for item in fields(self):
            value = getattr(other, item.name)
            merged[item.name] = value if value is not MISSING else getattr(self, item.name)
        return AllowedMentions(**merged)

    def to_dict(self) -> dict:
        payload: dict = {}
        parse: List[str] = []
        explicit = False

        for name in ("everyone", "users", "roles"):
            value = getattr(self, name)
            if value is MISSING:
                continue
            explicit = True
            if value is True:
                parse.append(name)
            elif value is not False:
                payload[name] = [object_id(item) for item in value]

        if explicit:
            payload["parse"] = parse
        if self.replied_user is not MISSING:
            payload["replied_user"] = bool(self.replied_user)
        return payload
