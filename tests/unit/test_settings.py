import sys

from app.config.settings import (
    Environment,
    Settings,
    StorageBackend,
    StorageSettings,
    TranslatorSettings,
)
from app.config.loader import ConfigLoader, load_config_for_environment


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.app_name == "Banjara Translator"
    assert settings.translator.source_hint == "hi"
    assert 3.0 <= settings.translator.timeout_seconds <= 5.0
    assert settings.storage.history_limit == 10


def test_nested_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "DATABASE")
    monkeypatch.setenv("STORAGE_DATABASE_URL", "sqlite:///./history.db")
    monkeypatch.setenv("TRANSLATOR_TIMEOUT_SECONDS", "3")
    monkeypatch.setenv("TRANSLATOR_API_KEY", "abc")

    storage = StorageSettings()
    translator = TranslatorSettings()

    assert storage.backend == StorageBackend.DATABASE
    assert storage.database_url == "sqlite:///./history.db"
    assert translator.timeout_seconds == 3.0
    assert translator.api_key == "abc"


def test_environment_is_normalized():
    settings = Settings(_env_file=None, environment="PRODUCTION")
    assert settings.environment == Environment.PRODUCTION
    assert settings.is_production()


def test_loader_falls_back_to_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = ConfigLoader.load_environment_config("staging")
    assert settings.environment == Environment.STAGING
    assert ConfigLoader.validate_environment_config("staging") is True
    assert ConfigLoader.validate_environment_config("nowhere") is False


def test_create_sample_env_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = ConfigLoader.create_sample_env_file("production")
    content = (tmp_path / path).read_text(encoding="utf-8")
    assert "ENVIRONMENT=production" in content
    assert "STORAGE_BACKEND=database" in content
    assert ConfigLoader.get_available_environments() == []


def test_reload_mode_passes_environment_to_workers(tmp_path, monkeypatch):
    import uvicorn
    import run

    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env.staging").write_text("LOG_FORMAT=text\n", encoding="utf-8")
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("DEBUG", "false")
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))
    monkeypatch.setattr(sys, "argv", ["run.py", "--env", "staging", "--reload", "--debug"])

    run.main()

    target, kwargs = calls[0]
    assert target == "app.main:app"
    assert kwargs["reload"] is True

    # what a reloaded worker rebuilds from the exported environment
    worker_settings = load_config_for_environment()
    assert worker_settings.environment == Environment.STAGING
    assert worker_settings.debug is True
    assert worker_settings.log_format == "text"
