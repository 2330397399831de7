"""Unit tests for application settings."""

from natter.config import AdminSettings, Settings


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self):
        settings = Settings()

        assert settings.database.url is None
        assert settings.admin.allowed_users == []
        assert settings.moderation.auto_approve is True
        assert settings.rate_limit.max_comments == 3
        assert settings.rate_limit.window_seconds == 60
        assert settings.api.client_ip_header == "CF-Connecting-IP"

    def test_nested_environment_variables(self, monkeypatch):
        monkeypatch.setenv("ADMIN__ALLOWED_USERS", '["alice", "bob"]')
        monkeypatch.setenv("MODERATION__AUTO_APPROVE", "false")
        monkeypatch.setenv("RATE_LIMIT__MAX_COMMENTS", "5")

        settings = Settings()

        assert settings.admin.allowed_users == ["alice", "bob"]
        assert settings.moderation.auto_approve is False
        assert settings.rate_limit.max_comments == 5

    def test_allowed_users_accepts_comma_separated_string(self):
        admin = AdminSettings(allowed_users="alice, bob,,")

        assert admin.allowed_users == ["alice", "bob"]
