from unittest.mock import patch

import pytest

from StorefrontPaginator.classes.Settings import ClientSettings, EnvVarNotSetException
from StorefrontPaginator.constants import API_VERSION

ENV_VARS = ["STOREFRONT_URL", "STOREFRONT_TOKEN", "STOREFRONT_API_VERSION", "STOREFRONT_TIMEOUT"]


@pytest.fixture(autouse=True)
def environment(monkeypatch):
    for key in ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    with patch("StorefrontPaginator.classes.Settings.load_dotenv") as load_dotenv:
        yield load_dotenv


def test_from_env(monkeypatch, environment):
    monkeypatch.setenv("STOREFRONT_URL", "https://example.myshopify.com/")
    monkeypatch.setenv("STOREFRONT_TOKEN", "token")
    monkeypatch.setenv("STOREFRONT_TIMEOUT", "7.5")

    settings = ClientSettings.from_env()

    environment.assert_called_once()
    assert settings.store_url == "https://example.myshopify.com"
    assert settings.storefront_token == "token"
    assert settings.api_version == API_VERSION
    assert settings.timeout == 7.5


def test_from_env_api_version(monkeypatch):
    monkeypatch.setenv("STOREFRONT_URL", "https://example.myshopify.com")
    monkeypatch.setenv("STOREFRONT_TOKEN", "token")
    monkeypatch.setenv("STOREFRONT_API_VERSION", "2024-04")

    settings = ClientSettings.from_env()

    assert settings.api_version == "2024-04"
    assert settings.timeout is None


test_from_env_missing_data = [
    {"STOREFRONT_TOKEN": "token"},
    {"STOREFRONT_URL": "https://example.myshopify.com"},
    {"STOREFRONT_URL": "", "STOREFRONT_TOKEN": "token"},
]


@pytest.mark.parametrize("env", test_from_env_missing_data)
def test_from_env_missing(monkeypatch, env):
    for key, value in env.items():
        monkeypatch.setenv(key, value)

    with pytest.raises(EnvVarNotSetException):
        ClientSettings.from_env()


def test_repr_hides_token():
    assert "secret" not in repr(ClientSettings("https://example.myshopify.com", "secret"))
