"""Tests for configuration resolution."""

from gemini_image_mcp.config import settings as settings_module
from gemini_image_mcp.config.settings import Settings, get_api_key, resolve_images_dir, validate_environment


class TestResolveImagesDir:
    def test_defaults_to_temp_under_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("IMAGES_DIR", raising=False)

        images_dir = resolve_images_dir()

        assert images_dir.resolve() == (tmp_path / "temp").resolve()
        assert images_dir.is_dir()

    def test_env_value_is_resolved_and_created(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("IMAGES_DIR", "nested/out")

        images_dir = resolve_images_dir()

        assert images_dir.is_absolute()
        assert images_dir == (tmp_path / "nested" / "out").resolve()
        assert images_dir.is_dir()


class TestApiKey:
    def test_gemini_key_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "gemini")
        monkeypatch.setenv("GOOGLE_API_KEY", "google")

        assert get_api_key(*settings_module.API_KEY_NAMES) == "gemini"

    def test_falls_back_to_google_key(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.setenv("GOOGLE_API_KEY", "google")

        assert get_api_key(*settings_module.API_KEY_NAMES) == "google"
        assert validate_environment() == {"GEMINI_API_KEY": False, "GOOGLE_API_KEY": True}


class TestSettings:
    def test_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "secret")
        monkeypatch.setenv("IMAGES_DIR", str(tmp_path / "images"))
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.api_key == "secret"
        assert settings.images_dir == (tmp_path / "images").resolve()
        assert settings.log_level == "DEBUG"
        assert settings.generation_model == "gemini-3-pro-image-preview"
        assert settings.analysis_model == "gemini-3-pro-preview"
