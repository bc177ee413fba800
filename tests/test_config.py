"""Tests for settings loading."""

from docjson.core.config import Settings, get_settings


def test_defaults(monkeypatch, tmp_path):
    for name in ("PORT", "HOST", "MAX_UPLOAD_MB", "TEMP_DIR", "ALLOW_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None, base_dir=tmp_path)

    assert settings.port == 3001
    assert settings.host == "0.0.0.0"
    assert settings.max_upload_mb == 50
    assert settings.max_upload_bytes == 50 * 1024 * 1024
    assert settings.allow_origins == ["*"]


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("MAX_UPLOAD_MB", "10")
    monkeypatch.setenv("ALLOW_ORIGINS", '["http://localhost:3000"]')

    settings = Settings(_env_file=None, base_dir=tmp_path)

    assert settings.port == 8080
    assert settings.max_upload_bytes == 10 * 1024 * 1024
    assert settings.allow_origins == ["http://localhost:3000"]


def test_configure_paths_creates_scratch_dir(monkeypatch, tmp_path):
    monkeypatch.delenv("TEMP_DIR", raising=False)
    settings = Settings(_env_file=None, base_dir=tmp_path)

    settings.configure_paths()

    assert settings.temp_dir == (tmp_path / "uploads" / "tmp").resolve()
    assert settings.temp_dir.is_dir()


def test_get_settings_uses_test_scratch_dir():
    settings = get_settings()
    assert settings.temp_dir.is_dir()
    assert settings.max_upload_mb == 10
