from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from . import endpoints
from .abc import Messageable
from .embeds import Embed
from .enums import DM_CHANNEL_TYPES, ChannelType
from .files import File
from .payloads import MessageSend
from .utils import snowflake_time


LOGGER = logging.getLogger("parley")


@dataclass(eq=False)
class User(Messageable):
    """A single account on the platform.

    ``email`` is only filled in when the application holds the email scope
    for the user, and ``token`` only for the user the session is logged in
    as. ``dm_channel`` starts out empty and is populated by :meth:`create_dm`,
    which :meth:`send_message` and :meth:`send_message_complex` call on
    demand.
    """

    id: str
    username: Optional[str] = None
    discriminator: Optional[str] = None
    avatar: Optional[str] = None
    email: Optional[str] = None
    locale: Optional[str] = None
    token: Optional[str] = field(default=None, repr=False)
    verified: bool = False
    mfa_enabled: bool = False
    bot: bool = False
    dm_channel: Optional["DMChannel"] = field(default=None, repr=False)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)
    _session: Any = field(default=None, repr=False)
    _dm_lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]], session: Any = None) -> "User":
        if data is None:
            return cls(id="0", _session=session)
        dm_data = data.get("dm_channel")
        return cls(
            id=str(data.get("id")),
            username=data.get("username"),
            discriminator=data.get("discriminator"),
            avatar=data.get("avatar"),
            email=data.get("email"),
            locale=data.get("locale"),
            token=data.get("token"),
            verified=bool(data.get("verified") or False),
            mfa_enabled=bool(data.get("mfa_enabled") or False),
            bot=bool(data.get("bot") or False),
            dm_channel=DMChannel.from_dict(dm_data, session=session) if dm_data else None,
            raw=data,
            _session=session,
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "email": self.email,
            "username": self.username,
            "avatar": self.avatar,
            "locale": self.locale,
            "discriminator": self.discriminator,
            "token": self.token,
            "verified": self.verified,
            "mfa_enabled": self.mfa_enabled,
            "bot": self.bot,
        }
        if self.dm_channel is not None:
            payload["dm_channel"] = self.dm_channel.to_dict()
        return payload

    def __str__(self) -> str:
        if self.discriminator:
            return f"{self.username or ''}#{self.discriminator}"
        return self.display_name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, User) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def mention(self) -> str:
        return f"<@{self.id}>"

    @property
    def display_name(self) -> str:
        return self.username or self.id

    @property
    def created_at(self) -> Optional[datetime]:
        return snowflake_time(self.id)

    @property
    def is_avatar_animated(self) -> bool:
        return bool(self.avatar) and self.avatar.startswith("a_")

    @property
    def _cdn_url(self) -> str:
        return getattr(self._session, "cdn_url", None) or endpoints.DEFAULT_CDN_URL

    @property
    def default_avatar_url(self) -> str:
        return endpoints.default_user_avatar(self.discriminator, cdn_url=self._cdn_url)

    def avatar_url(self, size: Optional[int | str] = None) -> str:
        """Return a URL to the user's avatar.

        ``size`` should be a power of two; when it is ``None`` or empty no
        size parameter is added to the URL.
        """
        if not self.avatar:
            url = self.default_avatar_url
        elif self.is_avatar_animated:
            url = endpoints.user_avatar_animated(self.id, self.avatar, cdn_url=self._cdn_url)
        else:
            url = endpoints.user_avatar(self.id, self.avatar, cdn_url=self._cdn_url)
        return endpoints.with_size(url, size)

    def is_mentioned_in(self, message: "Message") -> bool:
        if message.mention_everyone:
            return True
        return any(user.id == self.id for user in message.mentions)

    async def create_dm(self, session: Any = None) -> "DMChannel":
        if self.dm_channel is not None:
            return self.dm_channel
        session = self._resolve_session(session)
        async with self._dm_lock:
            # another caller may have opened it while we waited
            if self.dm_channel is None:
                channel = await session.create_dm_channel(self.id)
                LOGGER.debug("Opened DM channel %s with user %s", channel.id, self.id)
                self.dm_channel = channel
        return self.dm_channel

    async def send_message(
        self,
        session: Any = None,
        content: Optional[str] = None,
        embed: Optional[Embed] = None,
        files: Optional[Sequence[File]] = None,
    ) -> "Message":
        channel = await self.create_dm(session)
        return await channel.send_message(self._resolve_session(session), content, embed, files)

    async def send_message_complex(self, session: Any, data: MessageSend) -> "Message":
        # session may be None when the user was built with one attached
        channel = await self.create_dm(session)
        return await channel.send_message_complex(self._resolve_session(session), data)

    async def get_history(
        self,
        session: Any = None,
        limit: Optional[int] = None,
        before: Optional[str] = None,
        after: Optional[str] = None,
        around: Optional[str] = None,
    ) -> List["Message"]:
        channel = await self.create_dm(session)
        return await channel.history(
            self._resolve_session(session),
            limit=limit,
            before=before,
            after=after,
            around=around,
        )

    def _resolve_session(self, session: Any) -> Any:
        session = session or self._session
        if session is None:
            raise RuntimeError("User has no session attached")
        return session


@dataclass
class Channel:
    id: str
    type: Optional[int] = None
    name: Optional[str] = None
    guild_id: Optional[str] = None
    last_message_id: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], session: Any = None) -> "Channel":
        return cls(
            id=str(data.get("id")),
            type=data.get("type"),
            name=data.get("name"),
            guild_id=data.get("guild_id"),
            last_message_id=data.get("last_message_id"),
            raw=data,
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"id": self.id, "type": self.type}
        if self.name is not None:
            payload["name"] = self.name
        if self.guild_id is not None:
            payload["guild_id"] = self.guild_id
        if self.last_message_id is not None:
            payload["last_message_id"] = self.last_message_id
        return payload

    @property
    def mention(self) -> str:
        return f"<#{self.id}>"

    async def send_message(
        self,
        session: Any,
        content: Optional[str] = None,
        embed: Optional[Embed] = None,
        files: Optional[Sequence[File]] = None,
    ) -> "Message":
        return await session.send_message(self.id, content, embed=embed, files=files)

    async def send_message_complex(self, session: Any, data: MessageSend) -> "Message":
        return await session.send_message_complex(self.id, data)

    async def history(
        self,
        session: Any,
        *,
        limit: Optional[int] = None,
        before: Optional[str] = None,
        after: Optional[str] = None,
        around: Optional[str] = None,
    ) -> List["Message"]:
        return await session.fetch_messages(
            self.id,
            limit=limit,
            before=before,
            after=after,
            around=around,
        )


@dataclass
class DMChannel(Channel, Messageable):
    recipients: List[User] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], session: Any = None) -> "DMChannel":
        return cls(
            id=str(data.get("id")),
            type=data.get("type", ChannelType.dm),
            name=data.get("name"),
            last_message_id=data.get("last_message_id"),
            recipients=[User.from_dict(item, session=session) for item in data.get("recipients") or []],
            raw=data,
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["recipients"] = [user.to_dict() for user in self.recipients]
        return payload

    @property
    def recipient(self) -> Optional[User]:
        return self.recipients[0] if self.recipients else None


@dataclass
class Attachment:
    id: str
    filename: Optional[str] = None
    content_type: Optional[str] = None
    size: Optional[int] = None
    url: Optional[str] = None
    proxy_url: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Attachment":
        return cls(
            id=str(data.get("id")),
            filename=data.get("filename"),
            content_type=data.get("content_type"),
            size=data.get("size"),
            url=data.get("url"),
            proxy_url=data.get("proxy_url"),
            raw=data,
        )


@dataclass
class Message:
    id: str
    channel_id: str
    content: Optional[str] = None
    author: Optional[User] = None
    guild_id: Optional[str] = None
    mentions: List[User] = field(default_factory=list)
    mention_everyone: bool = False
    embeds: List[Embed] = field(default_factory=list)
    attachments: List[Attachment] = field(default_factory=list)
    timestamp: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)
    _session: Any = field(default=None, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], session: Any = None) -> "Message":
        return cls(
            id=str(data.get("id")),
            channel_id=str(data.get("channel_id")),
            content=data.get("content"),
            author=User.from_dict(data["author"], session=session) if data.get("author") else None,
            guild_id=data.get("guild_id"),
            mentions=[User.from_dict(item, session=session) for item in data.get("mentions") or []],
            mention_everyone=bool(data.get("mention_everyone") or False),
            embeds=[Embed.from_dict(item) for item in data.get("embeds") or []],
            attachments=[Attachment.from_dict(item) for item in data.get("attachments") or []],
            timestamp=data.get("timestamp"),
            raw=data,
            _session=session,
        )

    @property
    def channel(self) -> Channel:
        return Channel(id=self.channel_id, guild_id=self.guild_id)

    @property
    def created_at(self) -> Optional[datetime]:
        return snowflake_time(self.id)


def channel_from_data(data: Dict[str, Any], session: Any = None) -> Channel:
    if data.get("type") in DM_CHANNEL_TYPES:
        return DMChannel.from_dict(data, session=session)
    return Channel.from_dict(data, session=session)
