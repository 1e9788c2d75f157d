from __future__ import annotations

import pytest
from pydantic import ValidationError

from unbxd_client.config import ClientSettings


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("UNBXD_SITE_KEY", "env-site")
    monkeypatch.setenv("UNBXD_API_KEY", "env-key")
    monkeypatch.setenv("UNBXD_SECURE", "false")

    settings = ClientSettings()

    assert settings.site_key == "env-site"
    assert settings.api_key.get_secret_value() == "env-key"
    assert settings.secure is False
    assert settings.scheme == "http"


def test_secure_defaults_to_https():
    settings = ClientSettings(site_key="s", api_key="k")
    assert settings.scheme == "https"


def test_settings_are_immutable():
    settings = ClientSettings(site_key="s", api_key="k")
    with pytest.raises(ValidationError):
        settings.secure = False


def test_api_key_is_hidden_in_repr():
    settings = ClientSettings(site_key="s", api_key="very-secret")
    assert "very-secret" not in repr(settings)


def test_host_is_normalized():
    settings = ClientSettings(site_key="s", api_key="k", search_host=" search.example.test/ ")
    assert settings.search_host == "search.example.test"


def test_site_key_is_required(monkeypatch):
    monkeypatch.delenv("UNBXD_SITE_KEY", raising=False)
    with pytest.raises(ValidationError):
        ClientSettings(api_key="k", _env_file=None)
