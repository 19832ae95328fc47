"""
Unit tests for the billing secret key credential source.
"""

from common.core.config import settings
from common.core.constants import Environment
from packages.billing.utils.secret_key_check import check_secret_key


class TestSecretKeyCheck:
    """Tests for check_secret_key."""

    def test_found_from_settings(self, monkeypatch):
        """Test a configured sandbox key is reported as found."""
        monkeypatch.setattr(settings, "autumn_secret_key", "am_sk_sandbox")

        result = check_secret_key()

        assert result.found is True
        assert result.secret_key == "am_sk_sandbox"
        assert result.error is None

    def test_missing_key_returns_client_error(self, no_env_secret_key):
        """Test a missing key reports a 400-class error with a code."""
        result = check_secret_key()

        assert result.found is False
        assert result.secret_key is None
        assert result.error.status_code == 400
        assert result.error.code == "no_secret_key"

    def test_empty_key_is_missing(self, monkeypatch, no_env_secret_key):
        """Test an empty string is not a usable key."""
        monkeypatch.setattr(settings, "autumn_secret_key", "")

        assert check_secret_key().found is False

    def test_production_key_preferred_in_production(self, monkeypatch):
        """Test the production key wins in the production environment."""
        monkeypatch.setattr(settings, "environment", Environment.PRODUCTION)
        monkeypatch.setattr(settings, "autumn_secret_key", "am_sk_sandbox")
        monkeypatch.setattr(settings, "autumn_prod_secret_key", "am_sk_prod")

        assert check_secret_key().secret_key == "am_sk_prod"

    def test_production_key_ignored_outside_production(self, monkeypatch):
        """Test the sandbox key is used outside production."""
        monkeypatch.setattr(settings, "environment", Environment.LOCAL)
        monkeypatch.setattr(settings, "autumn_secret_key", "am_sk_sandbox")
        monkeypatch.setattr(settings, "autumn_prod_secret_key", "am_sk_prod")

        assert check_secret_key().secret_key == "am_sk_sandbox"
