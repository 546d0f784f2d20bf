"""
Tests for centralized settings.
"""

from shared.config import Settings, get_settings


class TestSettings:

    def test_defaults(self):
        settings = Settings()

        assert settings.app_name == "PDF Chat Gateway"
        assert settings.port == 3000
        assert settings.backend_url == "http://localhost:8000"
        assert settings.backend_timeout == 30.0
        assert settings.session_cookie_name == "access_token"
        assert settings.session_ttl_login == 86400
        assert settings.session_ttl_signup == 3600
        assert settings.session_ttl_refresh == 3600
        assert settings.session_expired_redirect_delay == 2.0
        assert settings.login_path == "/login"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("BACKEND_URL", "http://backend:8000")
        monkeypatch.setenv("SESSION_TTL_LOGIN", "600")

        settings = Settings()

        assert settings.backend_url == "http://backend:8000"
        assert settings.session_ttl_login == 600

    def test_is_production(self):
        assert Settings(environment="production").is_production
        assert Settings(environment="Production").is_production
        assert not Settings(environment="development").is_production

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("PORT", "4000")
        get_settings.cache_clear()

        assert get_settings() is not first
        assert get_settings().port == 4000
