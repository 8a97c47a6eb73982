"""Tests for configuration loading."""
import pytest
from mgnrega.core import config
from mgnrega.core.config import read_credential


def test_credential_present(monkeypatch):
    """Test credential present."""
    monkeypatch.setenv("GEOAPIFY_API_KEY", "  abc123  ")
    assert read_credential("GEOAPIFY_API_KEY") == "abc123"


def test_credential_missing(monkeypatch):
    """Test credential missing."""
    monkeypatch.delenv("GEOAPIFY_API_KEY", raising=False)
    assert read_credential("GEOAPIFY_API_KEY") is None


@pytest.mark.parametrize("value", [
    "",
    "   ",
    "YOUR_GOOGLE_API_KEY_HERE",
    "your_api_key",
    "changeme",
    "xxxxxxxx",
    "<locationiq-key>",
])
def test_placeholder_credentials_are_absent(monkeypatch, value):
    """Test placeholder credentials are absent."""
    monkeypatch.setenv("LOCATIONIQ_API_KEY", value)
    assert read_credential("LOCATIONIQ_API_KEY") is None


def test_defaults():
    """Test defaults."""
    assert config.TARGET_REGION
    assert config.PROVIDER_ORDER
    assert all(name == name.lower() for name in config.PROVIDER_ORDER)
    assert 0 < config.FUZZY_THRESHOLD <= 1
