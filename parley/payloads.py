from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .allowed_mentions import AllowedMentions
from .embeds import Embed
from .files import File
from .utils import object_id


@dataclass
class MessageSend:
    """Everything that can go into a single outgoing message."""

    content: Optional[str] = None
    embed: Optional[Embed | Dict[str, Any]] = None
    embeds: Optional[Sequence[Embed | Dict[str, Any]]] = None
    files: List[File] = field(default_factory=list)
    tts: bool = False
    allowed_mentions: Optional[AllowedMentions | Dict[str, Any]] = None
    reference: Any = None

    def __post_init__(self) -> None:
        if self.embed is not None and self.embeds is not None:
            raise ValueError("Use embed or embeds, not both")
        self.files = list(self.files or [])

    @property
    def all_embeds(self) -> List[Embed | Dict[str, Any]]:
        if self.embed is not None:
            return [self.embed]
        return list(self.embeds or [])

    def is_empty(self) -> bool:
        return not self.content and not self.all_embeds and not self.files

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.content is not None:
            payload["content"] = self.content
        if self.tts:
            payload["tts"] = True

        embeds = self.all_embeds
        if embeds:
            payload["embeds"] = [item.to_dict() if isinstance(item, Embed) else item for item in embeds]

        if isinstance(self.allowed_mentions, AllowedMentions):
            payload["allowed_mentions"] = self.allowed_mentions.to_dict()
        elif isinstance(self.allowed_mentions, dict):
            payload["allowed_mentions"] = self.allowed_mentions

        if self.reference is not None:
            if isinstance(self.reference, dict):
                payload["message_reference"] = self.reference
            else:
                payload["message_reference"] = {"message_id": object_id(self.reference)}

        if self.files:
            payload["attachments"] = [f.attachment(idx) for idx, f in enumerate(self.files)]
        return payload
