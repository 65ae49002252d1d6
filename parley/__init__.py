from .allowed_mentions import AllowedMentions
from .embeds import Embed
from .enums import ChannelType
from .errors import (
    ClientException,
    Forbidden,
    HTTPException,
    LoginFailure,
    NotFound,
    ParleyError,
    RateLimited,
    Unauthorized,
)
from .files import File
from .models import Attachment, Channel, DMChannel, Message, User, channel_from_data
from .payloads import MessageSend
from .session import Session

__version__ = "0.1.0"

__all__ = [
    "AllowedMentions",
    "Attachment",
    "Channel",
    "ChannelType",
    "ClientException",
    "DMChannel",
    "Embed",
    "File",
    "Forbidden",
    "HTTPException",
    "LoginFailure",
    "Message",
    "MessageSend",
    "NotFound",
    "ParleyError",
    "RateLimited",
    "Session",
    "Unauthorized",
    "User",
    "channel_from_data",
]
