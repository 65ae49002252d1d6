import json as _json
import logging
from typing import Any, Dict, Optional, Sequence

import aiohttp
from aiohttp import FormData

from . import endpoints
from .errors import Forbidden, HTTPException, NotFound, RateLimited, Unauthorized


LOGGER = logging.getLogger("parley")

_STATUS_ERRORS = {
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    429: RateLimited,
}


class RESTClient:
    def __init__(
        self,
        token: Optional[str],
        base_url: str = endpoints.DEFAULT_BASE_URL,
        api_version: str = endpoints.DEFAULT_API_VERSION,
        token_prefix: str = "Bot ",
        user_agent: str = "parley (https://github.com/parley-py/parley)",
        timeout: Optional[float] = None,
    ) -> None:
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._api_version = str(api_version).lstrip("v")
        self._token_prefix = token_prefix
        self._user_agent = user_agent
        self._timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def start(self) -> None:
        if self._session is None or self._session.closed:
            if self._timeout:
                self._session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self._timeout))
            else:
                self._session = aiohttp.ClientSession()

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    def set_token(self, token: Optional[str]) -> None:
        self._token = token

    @property
    def session(self) -> aiohttp.ClientSession:
        if self._session is None:
            raise RuntimeError("RESTClient has not been started")
        return self._session

    def _headers(
        self,
        *,
        content_type: Optional[str] = "application/json",
        auth: bool = True,
    ) -> Dict[str, str]:
        base = {
            "User-Agent": self._user_agent,
        }
        if content_type:
            base["Content-Type"] = content_type
        if auth and self._token:
            base["Authorization"] = f"{self._token_prefix}{self._token}"
        return base

    def _url(self, path: str) -> str:
        return endpoints.api_url(path, base_url=self._base_url, api_version=self._api_version)

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        files: Optional[Sequence[Any]] = None,
        auth: bool = True,
    ) -> Any:
        url = self._url(path)
        content_type = "application/json" if json is not None else None
        payload = None
        json_param = json

        if files:
            form = FormData()
            if json is not None:
                form.add_field("payload_json", _json.dumps(json), content_type="application/json")
            for idx, file in enumerate(files):
                file.to_form(form, idx)
            payload = form
            content_type = None
            json_param = None

        LOGGER.debug("%s %s", method, url)
        async with self.session.request(
            method=method,
            url=url,
            headers=self._headers(content_type=content_type, auth=auth),
            params=params,
            json=json_param,
            data=payload,
        ) as resp:
            if resp.status == 204:
                return None
            try:
                data = await resp.json(content_type=None)
            except (aiohttp.ContentTypeError, ValueError):
                data = await resp.text()

            if resp.status >= 400:
                LOGGER.warning("%s %s failed with HTTP %s", method, url, resp.status)
                error_cls = _STATUS_ERRORS.get(resp.status, HTTPException)
                raise error_cls(resp.status, resp.reason, data)
            return data

    async def create_dm(self, recipient_id: str) -> Dict[str, Any]:
        return await self.request("POST", "/users/@me/channels", json={"recipient_id": recipient_id})

    async def get_user(self, user_id: str) -> Dict[str, Any]:
        return await self.request("GET", f"/users/{user_id}")

    async def list_channel_messages(
        self,
        channel_id: str,
        limit: Optional[int] = None,
        before: Optional[str] = None,
        after: Optional[str] = None,
        around: Optional[str] = None,
    ) -> Any:
        params: Dict[str, Any] = {}
        if limit is not None:
            params["limit"] = limit
        if before:
            params["before"] = before
        if after:
            params["after"] = after
        if around:
            params["around"] = around
        return await self.request("GET", f"/channels/{channel_id}/messages", params=params)

    async def create_message(
        self,
        channel_id: str,
        payload: Dict[str, Any],
        files: Optional[Sequence[Any]] = None,
    ) -> Any:
        return await self.request("POST", f"/channels/{channel_id}/messages", json=payload, files=files)
