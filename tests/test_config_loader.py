"""Tests for checkout configuration loading and client wiring."""

import pytest
from pydantic import ValidationError

from checkout_gateway.clients import build_checkout_client, build_transport
from checkout_gateway.clients.mocks.transport import MockCheckoutTransport
from checkout_gateway.clients.real_http.transport import HttpxTransport
from checkout_gateway.contracts.context import RequestContext
from checkout_gateway.utils import config_loader
from checkout_gateway.utils.config_loader import CheckoutConfig, load_checkout_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in config_loader.ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)


def _write(tmp_path, text):
    path = tmp_path / "checkout_config.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_loads_yaml(tmp_path):
    path = _write(tmp_path, "checkout:\n  account: mystore\n  timeout_seconds: 5\n  headers:\n    X-Tenant: t1\n")

    config = load_checkout_config(path)

    assert config.account == "mystore"
    assert config.timeout_seconds == 5
    assert config.resolved_base_url == "https://mystore.vtexcommercestable.com.br"
    assert config.default_headers == {"User-Agent": "checkout-gateway/0.1.0", "X-Tenant": "t1"}


def test_env_overrides_file(tmp_path, monkeypatch):
    path = _write(tmp_path, "checkout:\n  account: mystore\n  use_mock: true\n")
    monkeypatch.setenv("CHECKOUT_BASE_URL", "https://checkout.example.com/")
    monkeypatch.setenv("CHECKOUT_USE_MOCK", "false")

    config = load_checkout_config(path)

    assert config.use_mock is False
    assert config.resolved_base_url == "https://checkout.example.com"


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_checkout_config(tmp_path / "nope.yml")


def test_env_only_when_default_file_absent(tmp_path, monkeypatch):
    monkeypatch.setattr(config_loader, "DEFAULT_CONFIG_PATH", tmp_path / "absent.yml")
    monkeypatch.setenv("VTEX_ACCOUNT", "envstore")
    monkeypatch.setenv("VTEX_ENVIRONMENT", "myvtex")

    config = load_checkout_config()

    assert config.resolved_base_url == "https://envstore.myvtex.com.br"


def test_invalid_timeout_rejected(tmp_path):
    path = _write(tmp_path, "checkout:\n  timeout_seconds: 0\n")
    with pytest.raises(ValidationError):
        load_checkout_config(path)


def test_base_url_needs_account_or_url():
    with pytest.raises(ValueError):
        CheckoutConfig().resolved_base_url


def test_build_transport_selects_mock_or_real():
    assert isinstance(build_transport(CheckoutConfig(use_mock=True)), MockCheckoutTransport)
    real = build_transport(CheckoutConfig(account="mystore", timeout_seconds=7))
    assert isinstance(real, HttpxTransport)
    assert real.client.base_url.host == "mystore.vtexcommercestable.com.br"
    assert real.client.timeout.read == 7


@pytest.mark.asyncio
async def test_build_checkout_client_applies_default_headers():
    config = CheckoutConfig(use_mock=True, headers={"X-Tenant": "t1"})
    client = build_checkout_client(RequestContext(store_user_auth_token="tok"), config)

    await client.orders()

    headers = client.transport.last_request.headers
    assert headers["X-Tenant"] == "t1"
    assert headers["User-Agent"] == "checkout-gateway/0.1.0"
    assert headers["VtexIdclientAutCookie"] == "tok"


def test_empty_checkout_section_uses_env(tmp_path, monkeypatch):
    path = _write(tmp_path, "checkout:\n")
    monkeypatch.setenv("VTEX_ACCOUNT", "envstore")

    config = load_checkout_config(path)

    assert config.account == "envstore"
    assert config.timeout_seconds == 20.0
