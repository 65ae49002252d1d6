"""Tests for URL builders."""

import pytest

from parley import endpoints


class TestApiUrl:
    def test_versioned_path(self) -> None:
        assert endpoints.api_url("/users/1") == "https://discord.com/api/v10/users/1"

    def test_explicit_version_is_kept(self) -> None:
        assert endpoints.api_url("/v9/users/1", base_url="https://x.test/") == "https://x.test/v9/users/1"

    def test_absolute_url_is_untouched(self) -> None:
        assert endpoints.api_url("https://other.test/a") == "https://other.test/a"


class TestAvatarUrls:
    def test_user_avatar(self) -> None:
        assert endpoints.user_avatar("1", "abc") == "https://cdn.discordapp.com/avatars/1/abc.png"

    def test_user_avatar_animated(self) -> None:
        assert endpoints.user_avatar_animated("1", "a_abc", cdn_url="https://cdn.test/") == (
            "https://cdn.test/avatars/1/a_abc.gif"
        )

    @pytest.mark.parametrize(
        ("discriminator", "index"),
        [("0001", 1), ("1337", 2), ("0005", 0), ("9999", 4), (None, 0), ("abc", 0)],
    )
    def test_default_user_avatar(self, discriminator, index) -> None:
        assert endpoints.default_user_avatar(discriminator) == (
            f"https://cdn.discordapp.com/embed/avatars/{index}.png"
        )

    def test_with_size(self) -> None:
        assert endpoints.with_size("https://a/b.png", 128) == "https://a/b.png?size=128"
        assert endpoints.with_size("https://a/b.png", "") == "https://a/b.png"
