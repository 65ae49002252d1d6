"""Tests for outgoing message payloads."""

import io

import pytest

from parley.allowed_mentions import AllowedMentions
from parley.embeds import Embed
from parley.files import File
from parley.models import User
from parley.payloads import MessageSend


class TestMessageSend:
    """MessageSend payload building."""

    def test_content_only(self) -> None:
        assert MessageSend(content="hi").to_dict() == {"content": "hi"}

    def test_embed_and_embeds_are_exclusive(self) -> None:
        with pytest.raises(ValueError):
            MessageSend(embed=Embed(), embeds=[Embed()])

    def test_single_embed_becomes_list(self) -> None:
        payload = MessageSend(embed=Embed(title="t")).to_dict()

        assert payload["embeds"] == [{"title": "t"}]

    def test_raw_embed_dicts_pass_through(self) -> None:
        payload = MessageSend(embeds=[{"title": "raw"}]).to_dict()

        assert payload["embeds"] == [{"title": "raw"}]

    def test_tts_reference_and_mentions(self) -> None:
        payload = MessageSend(
            content="x",
            tts=True,
            reference="123",
            allowed_mentions=AllowedMentions.none(),
        ).to_dict()

        assert payload["tts"] is True
        assert payload["message_reference"] == {"message_id": "123"}
        assert payload["allowed_mentions"] == {"parse": [], "replied_user": False}

    def test_files_become_attachments(self) -> None:
        data = MessageSend(files=[File(io.BytesIO(b"a"), "a.txt", description="first"), File(io.BytesIO(b"b"), "b.txt")])

        assert data.to_dict()["attachments"] == [
            {"id": 0, "filename": "a.txt", "description": "first"},
            {"id": 1, "filename": "b.txt"},
        ]

    def test_is_empty(self) -> None:
        assert MessageSend().is_empty() is True
        assert MessageSend(content="").is_empty() is True
        assert MessageSend(embed=Embed()).is_empty() is False
        assert MessageSend(files=[File(io.BytesIO(b""), "x")]).is_empty() is False


class TestAllowedMentions:
    """AllowedMentions serialization."""

    def test_default_is_empty(self) -> None:
        assert AllowedMentions().to_dict() == {}

    def test_all(self) -> None:
        assert AllowedMentions.all().to_dict() == {
            "parse": ["everyone", "users", "roles"],
            "replied_user": True,
        }

    def test_explicit_users(self) -> None:
        payload = AllowedMentions(users=[User(id="1"), "2"]).to_dict()

        assert payload == {"users": ["1", "2"], "parse": []}

    def test_merge_prefers_other(self) -> None:
        merged = AllowedMentions.none().merge(AllowedMentions(replied_user=True))

        assert merged.replied_user is True
        assert merged.everyone is False


class TestEmbed:
    """Embed builder."""

    def test_builder(self) -> None:
        embed = (
            Embed(title="Title", color=0xFF0000)
            .set_footer(text="foot")
            .set_author(name="me", url="https://example.com")
            .add_field(name="a", value=1, inline=True)
        )

        assert embed.to_dict() == {
            "title": "Title",
            "color": 0xFF0000,
            "footer": {"text": "foot"},
            "author": {"name": "me", "url": "https://example.com"},
            "fields": [{"name": "a", "value": "1", "inline": True}],
        }
        assert len(embed) == len("Title") + 2 + len("foot") + len("me")

    def test_from_dict_keeps_sections(self) -> None:
        embed = Embed.from_dict({"title": "t", "image": {"url": "https://img"}, "footer": {"text": "f"}})

        assert embed.to_dict() == {"title": "t", "footer": {"text": "f"}, "image": {"url": "https://img"}}

    def test_clear_fields(self) -> None:
        embed = Embed().add_field(name="a", value="b").clear_fields()

        assert embed.to_dict() == {}


class TestFile:
    """File attachments."""

    def test_spoiler_prefix(self) -> None:
        assert File(io.BytesIO(b""), "cat.png", spoiler=True).filename == "SPOILER_cat.png"

    def test_from_path(self, tmp_path) -> None:
        path = tmp_path / "notes.txt"
        path.write_bytes(b"data")

        file = File.from_path(path)
        try:
            assert file.filename == "notes.txt"
            assert file.fp.read() == b"data"
        finally:
            file.close()
