from __future__ import annotations

from typing import Optional
from urllib.parse import urlencode


DEFAULT_BASE_URL = "https://discord.com/api"
DEFAULT_API_VERSION = "10"
DEFAULT_CDN_URL = "https://cdn.discordapp.com"

# Number of built-in avatars a user without an avatar hash is spread over.
DEFAULT_AVATAR_COUNT = 5


def api_url(path: str, *, base_url: str = DEFAULT_BASE_URL, api_version: str = DEFAULT_API_VERSION) -> str:
    if path.startswith("http://") or path.startswith("https://"):
        return path
    path = path if path.startswith("/") else f"/{path}"
    base = base_url.rstrip("/")
    if path.startswith("/v") and len(path) > 2 and path[2].isdigit():
        return f"{base}{path}"
    version = str(api_version).lstrip("v")
    return f"{base}/v{version}{path}"


def user_avatar(user_id: str, avatar_hash: str, *, cdn_url: str = DEFAULT_CDN_URL) -> str:
    return f"{cdn_url.rstrip('/')}/avatars/{user_id}/{avatar_hash}.png"


def user_avatar_animated(user_id: str, avatar_hash: str, *, cdn_url: str = DEFAULT_CDN_URL) -> str:
    return f"{cdn_url.rstrip('/')}/avatars/{user_id}/{avatar_hash}.gif"


def default_user_avatar(discriminator: Optional[str], *, cdn_url: str = DEFAULT_CDN_URL) -> str:
    try:
        index = int(discriminator) % DEFAULT_AVATAR_COUNT
    except (TypeError, ValueError):
        index = 0
    return f"{cdn_url.rstrip('/')}/embed/avatars/{index}.png"


def with_size(url: str, size: Optional[int | str]) -> str:
    if size is None or size == "":
        return url
    return f"{url}?{urlencode({'size': str(size)})}"
