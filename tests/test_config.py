"""Tests for environment-driven settings."""

from collections.abc import Iterator

import pytest

from hostelhub.config import Settings, get_settings
from hostelhub.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_loads_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SUPABASE_URL", "https://abcd1234.supabase.co/")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = get_settings()

        assert settings.supabase_url == "https://abcd1234.supabase.co"
        assert settings.supabase_anon_key == "anon-key"
        assert settings.log_level == "DEBUG"
        assert settings.app_name == "HostelHub"

    def test_loads_from_dotenv(self, tmp_path) -> None:
        (tmp_path / ".env").write_text("SUPABASE_URL=http://localhost:54321\nSUPABASE_ANON_KEY=local-key\n")
        assert get_settings().supabase_url == "http://localhost:54321"

    def test_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SUPABASE_URL", "https://abcd1234.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")
        assert get_settings() is get_settings()

    def test_missing_values_raise_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()
        assert "SUPABASE_URL" in str(exc_info.value)
        assert "SUPABASE_ANON_KEY" in str(exc_info.value)

    def test_missing_key_only(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SUPABASE_URL", "https://abcd1234.supabase.co")
        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()
        assert "SUPABASE_ANON_KEY" in str(exc_info.value)
        assert "SUPABASE_URL" not in str(exc_info.value)

    @pytest.mark.parametrize(
        ("url", "key"),
        [
            ("abcd1234.supabase.co", "anon-key"),
            ("https://abcd1234.supabase.co", "   "),
        ],
    )
    def test_malformed_values_rejected(self, monkeypatch: pytest.MonkeyPatch, url: str, key: str) -> None:
        monkeypatch.setenv("SUPABASE_URL", url)
        monkeypatch.setenv("SUPABASE_ANON_KEY", key)
        with pytest.raises(ConfigurationError):
            get_settings()

    def test_explicit_construction(self) -> None:
        settings = Settings(supabase_url="https://x.supabase.co", supabase_anon_key="k", debug=True)
        assert settings.debug is True
