from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional


class Embed:
    """Rich content block attached to an outgoing message."""

    _SECTIONS = ("footer", "image", "thumbnail", "author")

    def __init__(
        self,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        url: Optional[str] = None,
        color: Optional[int] = None,
        timestamp: Optional[datetime | str] = None,
    ) -> None:
        self.title = title
        self.description = description
        self.url = url
        self.color = color
        if isinstance(timestamp, datetime):
            timestamp = timestamp.isoformat()
        self.timestamp = timestamp
        self._sections: Dict[str, Dict[str, Any]] = {name: {} for name in self._SECTIONS}
        self._fields: List[Dict[str, Any]] = []

    def __len__(self) -> int:
        total = len(self.title or "") + len(self.description or "")
        for item in self._fields:
            total += len(item["name"]) + len(item["value"])
        total += len(self._sections["footer"].get("text", ""))
        total += len(self._sections["author"].get("name", ""))
        return total

    @property
    def fields(self) -> List[Dict[str, Any]]:
        return list(self._fields)

    def set_footer(self, *, text: Optional[str] = None, icon_url: Optional[str] = None) -> "Embed":
        self._sections["footer"] = _compact(text=text, icon_url=icon_url)
        return self

    def set_image(self, *, url: str) -> "Embed":
        self._sections["image"] = {"url": url}
        return self

    def set_thumbnail(self, *, url: str) -> "Embed":
        self._sections["thumbnail"] = {"url": url}
        return self

    def set_author(
        self,
        *,
        name: str,
        url: Optional[str] = None,
        icon_url: Optional[str] = None,
    ) -> "Embed":
        self._sections["author"] = _compact(name=name, url=url, icon_url=icon_url)
        return self

    def add_field(self, *, name: str, value: str, inline: bool = False) -> "Embed":
        self._fields.append({"name": str(name), "value": str(value), "inline": inline})
        return self

    def clear_fields(self) -> "Embed":
        self._fields.clear()
        return self

    def to_dict(self) -> Dict[str, Any]:
        payload = _compact(
            title=self.title,
            description=self.description,
            url=self.url,
            color=self.color,
            timestamp=self.timestamp,
        )
        for name, section in self._sections.items():
            if section:
                payload[name] = dict(section)
        if self._fields:
            payload["fields"] = [dict(item) for item in self._fields]
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Embed":
        embed = cls(
            title=data.get("title"),
            description=data.get("description"),
            url=data.get("url"),
            color=data.get("color"),
            timestamp=data.get("timestamp"),
        )
        for name in cls._SECTIONS:
            if data.get(name):
                embed._sections[name] = dict(data[name])
        embed._fields = [dict(item) for item in data.get("fields") or []]
        return embed


def _compact(**values: Any) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}
