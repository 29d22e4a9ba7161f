from zoho_inventory_client import (
    ClientConfig,
    ConfigurationError,
    HttpMethod,
    RequestDescriptor,
    ZohoInventoryClient,
)
from unittest.mock import MagicMock, patch
import dataclasses
import requests
import pytest
import json


@pytest.fixture
def config():
    return ClientConfig(
        access_token="OLD",
        refresh_token="rftoken",
        client_id="cid",
        client_secret="secret",
        redirect_uri="https://example.com/cb",
        organization_id="42",
    )


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


def test_sub_clients_share_token_manager_and_transport(config, session):
    client = ZohoInventoryClient(config, session=session)

    for api in (
        client.organizations,
        client.settings,
        client.items,
        client.purchase_orders,
        client.sales_orders,
        client.invoices,
        client.contacts,
        client.inventory_adjustments,
    ):
        assert api.token_manager is client.token_manager
        assert api.transport is client.transport
        assert api.base_url == config.api_base_url


@patch("zoho_inventory_client.auth.requests.post")
def test_idempotent_construction(mock_post, config, session):
    first = ZohoInventoryClient(config, session=session)
    second = ZohoInventoryClient(config, session=session)

    assert first.credentials == second.credentials
    assert first.credentials is not second.credentials
    session.request.assert_not_called()
    mock_post.assert_not_called()


def test_missing_field_fails_construction(config):
    with pytest.raises(ConfigurationError, match="refresh_token"):
        ZohoInventoryClient(dataclasses.replace(config, refresh_token=""))


def test_auth_params(config):
    client = ZohoInventoryClient(config)
    assert client.auth_params() == {"organization_id": "42"}


@patch("zoho_inventory_client.auth.requests.post")
def test_refresh_seen_by_every_sub_client(mock_post, config, session):
    """
    A refresh triggered through one endpoint group is used by the others.
    """
    session.request.side_effect = [
        MagicMock(text=json.dumps({
            "code": 14, "message": "Invalid value passed for authtoken."
        })),
        MagicMock(text=json.dumps({"code": 0, "items": []})),
        MagicMock(text=json.dumps({"code": 0, "contacts": []})),
    ]
    mock_post.return_value = MagicMock(
        **{"json.return_value": {"access_token": "NEW"}}
    )
    client = ZohoInventoryClient(config, session=session)

    assert client.items.list_items() == {"code": 0, "items": []}
    assert client.contacts.list_contacts() == {"code": 0, "contacts": []}

    last_headers = session.request.call_args.kwargs["headers"]
    assert last_headers == {"Authorization": "Bearer NEW"}
    assert client.credentials.access_token == "NEW"


def test_execute_raw_descriptor(config, session):
    session.request.return_value = MagicMock(text='{"code": 0, "ok": 1}')
    client = ZohoInventoryClient(config, session=session)

    result = client.execute(
        RequestDescriptor("/bills", HttpMethod.GET, {"page": 1})
    )

    assert result.ok
    assert result.payload == {"code": 0, "ok": 1}
    method, url = session.request.call_args.args
    assert method == "GET"
    assert url == (
        "https://inventory.zoho.com/api/v1/bills?organization_id=42&page=1"
    )


def test_context_manager_closes_session(config, session):
    with ZohoInventoryClient(config, session=session):
        pass
    session.close.assert_called_once()
