"""
설정 단위 테스트
"""

import os

import pytest

from mcbe_translate.config import Config, Settings
from mcbe_translate.core import TranslationManager


class TestConfig:
    """Config.get_env 테스트"""

    def test_cast_types(self, monkeypatch):
        monkeypatch.setenv("MCBE_TEST_BOOL", "yes")
        monkeypatch.setenv("MCBE_TEST_INT", "7")
        monkeypatch.setenv("MCBE_TEST_BAD_INT", "seven")
        monkeypatch.setenv("MCBE_TEST_LIST", os.pathsep.join(["/a", " ", "/b"]))

        assert Config.get_env("MCBE_TEST_BOOL", False, bool) is True
        assert Config.get_env("MCBE_TEST_INT", 0, int) == 7
        assert Config.get_env("MCBE_TEST_BAD_INT", 3, int) == 3
        assert Config.get_env("MCBE_TEST_LIST", [], list) == ["/a", "/b"]
        assert Config.get_env("MCBE_TEST_MISSING", "default") == "default"


class TestSettings:
    """Settings.from_env 테스트"""

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MCBE_DEFAULT_LANGUAGE", "ko_KR")
        monkeypatch.setenv("MCBE_USE_VANILLA", "false")
        monkeypatch.setenv("MCBE_RESOURCE_PACK_PATHS", os.pathsep.join(["/packs/a", "/packs/b"]))
        monkeypatch.setenv("MCBE_CACHE_DIR", str(tmp_path / "cache"))
        monkeypatch.setenv("MCBE_CACHE_DURATION_HOURS", "12")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings.from_env(str(tmp_path / "missing.env"))

        assert settings.default_language == "ko_KR"
        assert settings.use_vanilla is False
        assert settings.resource_pack_paths == ["/packs/a", "/packs/b"]
        assert settings.cache_duration_hours == 12.0
        assert settings.log_level == "DEBUG"

    def test_from_env_file(self, monkeypatch, tmp_path):
        """.env 파일의 값 로드"""
        monkeypatch.delenv("MCBE_FETCH_TIMEOUT", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("MCBE_FETCH_TIMEOUT=2.5\n", encoding="utf-8")

        try:
            settings = Settings.from_env(str(env_file))
        finally:
            os.environ.pop("MCBE_FETCH_TIMEOUT", None)

        assert settings.fetch_timeout == 2.5

    def test_manager_from_settings(self, tmp_path):
        """설정으로 바닐라 제공자 구성"""
        settings = Settings(use_vanilla=False, cache_dir=str(tmp_path / "cache"), cache_duration_hours=1)

        manager = TranslationManager.from_settings(settings)

        assert manager.is_vanilla_enabled() is False
        assert manager.vanilla_provider.max_age_ms == 60 * 60 * 1000
        assert (tmp_path / "cache").is_dir()
