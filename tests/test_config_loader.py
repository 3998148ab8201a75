import pytest
from pydantic import ValidationError

from yapee.utils.config_loader import AppConfig, is_production, load_app_config, resolve_port


def test_load_default_config_file():
    cfg = load_app_config()
    assert cfg.server.port == 3001
    assert "http://localhost:5173" in cfg.allowed_origins(production=False)
    assert cfg.allowed_origins(production=True) == ["https://yapee.com", "https://www.yapee.com"]


def test_missing_config_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_app_config(tmp_path / "missing.yml")


def test_invalid_config_raises(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("server:\n  port: 0\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_app_config(path)


def test_empty_config_uses_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_app_config(path) == AppConfig()


def test_production_detection(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("FORCE_PRODUCTION", raising=False)
    assert is_production() is False
    monkeypatch.setenv("FORCE_PRODUCTION", "true")
    assert is_production() is True
    monkeypatch.delenv("FORCE_PRODUCTION")
    monkeypatch.setenv("APP_ENV", "production")
    assert is_production() is True


def test_port_env_override(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert resolve_port(AppConfig()) == 8080
    monkeypatch.delenv("PORT")
    assert resolve_port(AppConfig()) == 3001
