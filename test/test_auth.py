from zoho_inventory_client.auth import Credentials, TokenManager
from zoho_inventory_client.config import ClientConfig
from zoho_inventory_client.exceptions import ConfigurationError
from unittest.mock import patch, MagicMock
import requests
import pytest


@pytest.fixture
def credentials():
    return Credentials(
        access_token="abc123",
        refresh_token="rftoken",
        client_id="id",
        client_secret="secret",
        redirect_uri="https://example.com/cb",
    )


@pytest.fixture
def tm(credentials):
    return TokenManager(credentials, accounts_url="https://example.com/token")


def test_get_token_returns_current(tm):
    assert tm.get_token() == "abc123"


@patch("zoho_inventory_client.auth.requests.post")
def test_refresh_success(mock_post, tm):
    mock_response = MagicMock()
    mock_response.json.return_value = {
        "access_token": "newtoken",
        "expires_in": 3600,
        "token_type": "Bearer",
    }
    mock_post.return_value = mock_response

    assert tm.refresh() is True
    assert tm.get_token() == "newtoken"
    assert tm.credentials.refresh_token == "rftoken"

    mock_post.assert_called_once()
    args, kwargs = mock_post.call_args
    assert args == ("https://example.com/token",)
    assert kwargs["params"] == {
        "refresh_token": "rftoken",
        "client_id": "id",
        "client_secret": "secret",
        "redirect_uri": "https://example.com/cb",
        "grant_type": "refresh_token",
    }


@pytest.mark.parametrize("payload", [
    {"error": "invalid_code"},
    {"access_token": ""},
    {"access_token": None},
    ["access_token"],
])
@patch("zoho_inventory_client.auth.requests.post")
def test_refresh_without_token_keeps_credentials(mock_post, payload, tm):
    mock_post.return_value = MagicMock(**{"json.return_value": payload})

    assert tm.refresh() is False
    assert tm.get_token() == "abc123"


@patch("zoho_inventory_client.auth.requests.post")
def test_refresh_malformed_json(mock_post, tm):
    mock_post.return_value = MagicMock(
        **{"json.side_effect": ValueError("Expecting value")}
    )

    assert tm.refresh() is False
    assert tm.get_token() == "abc123"


@patch(
    "zoho_inventory_client.auth.requests.post",
    side_effect=requests.exceptions.ConnectionError("refused"),
)
def test_refresh_transport_failure(mock_post, tm):
    assert tm.refresh() is False
    assert tm.get_token() == "abc123"


def test_from_config_missing_field():
    config = ClientConfig(
        access_token="a",
        refresh_token="r",
        client_id="c",
        redirect_uri="https://example.com/cb",
    )
    with pytest.raises(ConfigurationError, match="client_secret") as exc:
        TokenManager.from_config(config)

    assert exc.value.field == "client_secret"


def test_credentials_repr_hides_tokens(credentials):
    assert "abc123" not in repr(credentials)
    assert "rftoken" not in repr(credentials)
