# File: tests/test_config.py

from multitouch.core.config import Settings


def test_cors_origins_from_comma_string():
    s = Settings(backend_cors_origins="http://localhost:4200, http://example.com")
    assert [str(o).rstrip("/") for o in s.backend_cors_origins] == [
        "http://localhost:4200",
        "http://example.com",
    ]


def test_cors_origins_default_from_env(monkeypatch):
    monkeypatch.setenv("MULTITOUCH_CORS_ORIGINS", "http://a.example.com")
    s = Settings()
    assert [str(o).rstrip("/") for o in s.backend_cors_origins] == ["http://a.example.com"]


def test_log_level_is_upper_cased():
    assert Settings(log_level="debug").log_level == "DEBUG"
