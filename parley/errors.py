from __future__ import annotations

from typing import Any, Optional


class ParleyError(Exception):
    """Base exception for parley."""


class ClientException(ParleyError):
    pass


class HTTPException(ParleyError):
    def __init__(self, status: int, message: Optional[str], data: Any = None) -> None:
        super().__init__(f"HTTP {status}: {message}")
        self.status = status
        self.message = message
        self.data = data

    @property
    def code(self) -> Optional[int]:
        # API error code from the JSON body, when the platform sent one.
        if isinstance(self.data, dict):
            return self.data.get("code")
        return None


class Unauthorized(HTTPException):
    pass


class Forbidden(HTTPException):
    pass


class NotFound(HTTPException):
    pass


class RateLimited(HTTPException):
    def __init__(self, status: int, message: Optional[str], data: Any = None) -> None:
        super().__init__(status, message, data)
        retry_after = data.get("retry_after") if isinstance(data, dict) else None
        try:
            self.retry_after: Optional[float] = float(retry_after) if retry_after is not None else None
        except (TypeError, ValueError):
            self.retry_after = None


class LoginFailure(ClientException):
    pass
