from config import DEFAULT_ALLOWED_ORIGINS, DEFAULT_MODEL, Settings, get_settings


def clear_env(monkeypatch):
    for name in ("GEMINI_API_KEY", "API_KEY", "GEMINI_MODEL", "RATE_LIMIT", "ALLOWED_ORIGINS", "ENVIRONMENT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    clear_env(monkeypatch)

    settings = get_settings()

    assert settings.gemini_api_key is None
    assert settings.gemini_model == DEFAULT_MODEL
    assert settings.rate_limit == "10/minute"
    assert settings.allowed_origins == DEFAULT_ALLOWED_ORIGINS
    assert settings.environment == "development"


def test_api_key_fallback(monkeypatch):
    clear_env(monkeypatch)
    monkeypatch.setenv("API_KEY", "legacy-key")

    assert Settings.from_env().gemini_api_key == "legacy-key"

    monkeypatch.setenv("GEMINI_API_KEY", "gemini-key")
    assert Settings.from_env().gemini_api_key == "gemini-key"


def test_blank_api_key_counts_as_missing(monkeypatch):
    clear_env(monkeypatch)
    monkeypatch.setenv("GEMINI_API_KEY", "   ")

    assert Settings.from_env().gemini_api_key is None


def test_allowed_origins_are_split(monkeypatch):
    clear_env(monkeypatch)
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("ENVIRONMENT", "Production")

    settings = Settings.from_env()

    assert settings.allowed_origins == ("https://a.example", "https://b.example")
    assert settings.environment == "production"
