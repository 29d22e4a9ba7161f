from zoho_inventory_client.request import (
    HttpMethod,
    RequestDescriptor,
    build_url,
    json_string,
)
import dataclasses
import pytest
import json


BASE = "https://inventory.zoho.com/api/v1"


def test_build_url_adds_organization_first():
    url = build_url(BASE, "/items", {"search_text": "bolt"}, "42")
    assert url == (
        "https://inventory.zoho.com/api/v1/items"
        "?organization_id=42&search_text=bolt"
    )


def test_build_url_collapses_duplicate_separators():
    url = build_url(BASE + "/", "//items//123/", {}, None)
    assert url == "https://inventory.zoho.com/api/v1/items/123/"


def test_build_url_drops_missing_organization():
    assert build_url(BASE, "/organizations") == (
        "https://inventory.zoho.com/api/v1/organizations"
    )


def test_build_url_encodes_values_and_booleans():
    url = build_url(
        BASE,
        "/salesorders",
        {"ignore_auto_number_generation": False, "q": "a b&c"},
        "1",
    )
    assert url.endswith(
        "?organization_id=1&ignore_auto_number_generation=false&q=a+b%26c"
    )


def test_descriptor_get_merges_params_into_url():
    d = RequestDescriptor(
        "/items", "GET", body_params={"page": 1}, query_params={"x": "y"}
    )
    assert d.method is HttpMethod.GET
    assert dict(d.url_params) == {"page": 1, "x": "y"}
    assert d.form_data is None


def test_descriptor_write_keeps_body_out_of_url():
    d = RequestDescriptor(
        "/items",
        HttpMethod.PUT,
        body_params={"JSONString": "{}"},
        query_params={"ignore_auto_number_generation": True},
    )
    assert dict(d.url_params) == {"ignore_auto_number_generation": True}
    assert d.form_data == {"JSONString": "{}"}


def test_descriptor_is_immutable():
    params = {"page": 1}
    d = RequestDescriptor("/items", body_params=params)
    params["page"] = 2

    assert d.body_params["page"] == 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.alias = "/contacts"
    with pytest.raises(TypeError):
        d.body_params["page"] = 3


def test_descriptor_rejects_unknown_method():
    with pytest.raises(ValueError):
        RequestDescriptor("/items", "PATCH")


def test_json_string():
    body = json_string({"name": "Bolt", "rate": 1.5})
    assert list(body) == ["JSONString"]
    assert json.loads(body["JSONString"]) == {"name": "Bolt", "rate": 1.5}
    assert json_string(None) == {"JSONString": "{}"}


def test_build_url_expands_list_values():
    url = build_url(BASE, "/items", {"item_ids": ["1", "2"]}, "42")
    assert url.endswith("/items?organization_id=42&item_ids=1&item_ids=2")


def test_build_url_formats_booleans_inside_lists():
    url = build_url(BASE, "/items", {"flags": (True, False)})
    assert url.endswith("/items?flags=true&flags=false")


def test_form_data_formats_booleans():
    d = RequestDescriptor(
        "/items",
        HttpMethod.POST,
        body_params={"send": True, "draft": False, "name": "Bolt"},
    )
    assert d.form_data == {"send": "true", "draft": "false", "name": "Bolt"}
