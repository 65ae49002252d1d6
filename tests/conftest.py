"""Shared fixtures for parley tests."""

from typing import Any, Callable, Dict
from unittest.mock import AsyncMock, MagicMock

import pytest

from parley.models import DMChannel, Message, User


def _user_payload(**overrides: Any) -> Dict[str, Any]:
    data = {
        "id": "80351110224678912",
        "username": "Nelly",
        "discriminator": "1337",
        "avatar": "8342729096ea3675442027381ff50dfe",
        "email": "nelly@example.com",
        "locale": "en-US",
        "verified": True,
        "mfa_enabled": False,
        "bot": False,
    }
    data.update(overrides)
    return data


def _message_payload(**overrides: Any) -> Dict[str, Any]:
    data = {
        "id": "334385199974967042",
        "channel_id": "319674150115610528",
        "content": "hello",
        "author": _user_payload(),
        "mentions": [],
        "mention_everyone": False,
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_user_payload() -> Callable[..., Dict[str, Any]]:
    """Build a user wire payload with optional overrides."""
    return _user_payload


@pytest.fixture
def make_message_payload() -> Callable[..., Dict[str, Any]]:
    """Build a message wire payload with optional overrides."""
    return _message_payload


@pytest.fixture
def user() -> User:
    return User.from_dict(_user_payload())


@pytest.fixture
def dm_channel() -> DMChannel:
    return DMChannel.from_dict({"id": "319674150115610528", "type": 1, "recipients": [_user_payload()]})


@pytest.fixture
def mock_session(dm_channel: DMChannel) -> MagicMock:
    """Create a mock Session collaborator."""
    session = MagicMock()
    session.cdn_url = "https://cdn.example.com"
    session.create_dm_channel = AsyncMock(return_value=dm_channel)
    session.send_message = AsyncMock(return_value=Message.from_dict(_message_payload()))
    session.send_message_complex = AsyncMock(return_value=Message.from_dict(_message_payload()))
    session.fetch_messages = AsyncMock(return_value=[Message.from_dict(_message_payload())])
    return session
