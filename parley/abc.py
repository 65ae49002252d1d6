from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class Messageable(ABC):
    """Something a message can be routed to through a session."""

    @abstractmethod
    async def send_message(
        self,
        session: Any,
        content: Optional[str] = None,
        embed: Any = None,
        files: Any = None,
    ):
        raise NotImplementedError

    @abstractmethod
    async def send_message_complex(self, session: Any, data: Any):
        raise NotImplementedError
