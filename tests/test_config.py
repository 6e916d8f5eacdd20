"""Settings defaults and environment overrides."""
import pytest

from annotation_ui.config import Settings, load_settings


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "EXPORT_FILENAME", "EXPORT_MEDIA_TYPE", "VIEWER_ELEMENT_ID"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.HOST == "localhost"
    assert settings.PORT == 8001
    assert settings.EXPORT_FILENAME == "annotations.json"
    assert settings.EXPORT_MEDIA_TYPE == "text/plain"
    assert settings.VIEWER_ELEMENT_ID == "viewer"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("HOST", "0.0.0.0")
    settings = Settings()
    assert settings.PORT == 9001
    assert settings.HOST == "0.0.0.0"


def test_load_settings_keyword_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9001")
    assert load_settings(PORT=1234).PORT == 1234


def test_load_settings_rejects_unknown():
    with pytest.raises(TypeError):
        load_settings(NOT_A_SETTING=1)


def test_configure_logging_is_idempotent():
    import logging

    from annotation_ui.logging_setup import configure_logging

    logger = configure_logging("debug")
    configure_logging("warning")
    marked = [h for h in logger.handlers if getattr(h, "_annotation_ui", False)]
    assert len(marked) == 1
    assert logger.level == logging.WARNING
