import logging
import os
from typing import Any, Dict, List, Optional, Sequence

from . import endpoints
from .embeds import Embed
from .errors import HTTPException, LoginFailure
from .files import File
from .http import RESTClient
from .models import DMChannel, Message, User, channel_from_data
from .payloads import MessageSend
from .utils import normalize_token, object_id


LOGGER = logging.getLogger("parley")

MAX_HISTORY_LIMIT = 100


class Session:
    """Authenticated REST access to the platform.

    This is the collaborator that :class:`~parley.models.User` and
    :class:`~parley.models.DMChannel` route their network operations
    through: opening DM channels, sending messages and reading message
    history. The underlying aiohttp session is opened by :meth:`start`
    (or ``async with``) and released by :meth:`close`.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        base_url: str = endpoints.DEFAULT_BASE_URL,
        api_version: str = endpoints.DEFAULT_API_VERSION,
        cdn_url: str = endpoints.DEFAULT_CDN_URL,
        token_prefix: str = "Bot ",
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.token = normalize_token(token)
        self.cdn_url = cdn_url.rstrip("/")
        options: Dict[str, Any] = {}
        if user_agent:
            options["user_agent"] = user_agent
        self.http = RESTClient(
            token=self.token,
            base_url=base_url,
            api_version=api_version,
            token_prefix=token_prefix,
            timeout=timeout,
            **options,
        )
        self.user: Optional[User] = None

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Session":
        env = os.environ
        kwargs.setdefault("base_url", env.get("PARLEY_BASE_URL", endpoints.DEFAULT_BASE_URL))
        kwargs.setdefault("api_version", env.get("PARLEY_API_VERSION", endpoints.DEFAULT_API_VERSION))
        kwargs.setdefault("cdn_url", env.get("PARLEY_CDN_URL", endpoints.DEFAULT_CDN_URL))
        return cls(env.get("PARLEY_TOKEN"), **kwargs)

    async def __aenter__(self) -> "Session":
        await self.start()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def start(self) -> None:
        LOGGER.info("Starting parley session")
        await self.http.start()

    async def close(self) -> None:
        LOGGER.info("Closing parley session")
        await self.http.close()

    async def login(self, token: Optional[str] = None) -> User:
        if token:
            self.token = normalize_token(token)
            self.http.set_token(self.token)
        if not self.token:
            raise LoginFailure("Token is required to log in")
        try:
            self.user = await self.fetch_current_user()
        except HTTPException as exc:
            if exc.status in (401, 403):
                raise LoginFailure("Invalid token") from exc
            raise
        LOGGER.info("Logged in as %s (%s)", self.user, self.user.id)
        return self.user

    async def fetch_user(self, user_id: str) -> User:
        data = await self.http.get_user(object_id(user_id))
        return User.from_dict(data, session=self)

    async def fetch_current_user(self) -> User:
        return await self.fetch_user("@me")

    async def create_dm_channel(self, user_id: str) -> DMChannel:
        data = await self.http.create_dm(object_id(user_id))
        channel = channel_from_data(data, session=self)
        if not isinstance(channel, DMChannel):
            # Some deployments omit the type on freshly created DMs.
            channel = DMChannel.from_dict(data, session=self)
        return channel

    async def send_message(
        self,
        channel_id: str,
        content: Optional[str] = None,
        *,
        embed: Optional[Embed] = None,
        files: Optional[Sequence[File]] = None,
    ) -> Message:
        data = MessageSend(content=content, embed=embed, files=list(files or []))
        return await self.send_message_complex(channel_id, data)

    async def send_message_complex(self, channel_id: str, data: MessageSend) -> Message:
        if data.is_empty():
            raise ValueError("Cannot send an empty message")
        channel_id = object_id(channel_id)
        LOGGER.debug("Sending message to channel %s (%d files)", channel_id, len(data.files))
        payload = await self.http.create_message(channel_id, data.to_dict(), files=data.files or None)
        return Message.from_dict(payload, session=self)

    async def fetch_messages(
        self,
        channel_id: str,
        limit: Optional[int] = None,
        before: Optional[str] = None,
        after: Optional[str] = None,
        around: Optional[str] = None,
    ) -> List[Message]:
        if limit is not None and not 0 < limit <= MAX_HISTORY_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_HISTORY_LIMIT}")
        data = await self.http.list_channel_messages(
            object_id(channel_id),
            limit=limit,
            before=before,
            after=after,
            around=around,
        )
        return [Message.from_dict(item, session=self) for item in data or []]
