from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional
from urllib.parse import urlencode, urlsplit, urlunsplit
import json
import re


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


def _frozen(mapping: Optional[Mapping]) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class RequestDescriptor:
    """
    One logical API call: where to send it and what to send.

    For GET requests ``body_params`` are merged into the query string.
    For write requests they are sent as form fields, and
    ``query_params`` carries out-of-band flags such as
    ``ignore_auto_number_generation``. ``files`` holds multipart uploads.
    """

    alias: str
    method: HttpMethod = HttpMethod.GET
    body_params: Mapping[str, Any] = field(default_factory=dict)
    query_params: Mapping[str, Any] = field(default_factory=dict)
    files: Optional[Mapping[str, Any]] = None

    def __post_init__(self):
        # Dataclass is frozen, so go through object.__setattr__.
        object.__setattr__(self, "method", HttpMethod(self.method))
        object.__setattr__(self, "body_params", _frozen(self.body_params))
        object.__setattr__(self, "query_params", _frozen(self.query_params))
        if self.files is not None:
            object.__setattr__(self, "files", _frozen(self.files))

    @property
    def url_params(self) -> Mapping[str, Any]:
        """Parameters that belong in the URL for this method."""
        if self.method is HttpMethod.GET:
            merged = dict(self.body_params)
            merged.update(self.query_params)
            return merged
        return self.query_params

    @property
    def form_data(self) -> Optional[dict]:
        """Form body for write requests, ``None`` for GET."""
        if self.method is HttpMethod.GET:
            return None
        return {k: _format_value(v) for k, v in self.body_params.items()}


def _format_value(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [_format_value(v) for v in value]
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def build_url(
    base_url: str,
    alias: str,
    query_params: Optional[Mapping[str, Any]] = None,
    organization_id: Optional[str] = None
) -> str:
    """
    Compose the final request URL.

    Parameters
    ----------
    base_url : str
        API root, e.g. ``https://inventory.zoho.com/api/v1``.
    alias : str
        Endpoint path, e.g. ``/items/123``.
    query_params : mapping, optional
        Extra query parameters. ``None`` values are dropped and list
        values are sent as repeated keys (``ids=1&ids=2``).
    organization_id : str, optional
        Added as ``organization_id`` ahead of the other parameters.

    Returns
    -------
    str
        Absolute URL with duplicate path separators collapsed.

    Examples
    --------
    >>> build_url("https://inventory.zoho.com/api/v1/", "/items//1", {}, "42")
    'https://inventory.zoho.com/api/v1/items/1?organization_id=42'
    """
    scheme, netloc, path, _, _ = urlsplit(base_url)
    path = re.sub(r"/+", "/", f"{path}/{alias}")

    params = {"organization_id": organization_id}
    params.update(query_params or {})
    params = {
        k: _format_value(v) for k, v in params.items() if v is not None
    }

    query = urlencode(params, doseq=True)
    return urlunsplit((scheme, netloc, path, query, ""))


def json_string(params: Optional[Mapping[str, Any]]) -> dict:
    """Wrap a write payload the way Zoho expects it: ``JSONString=<json>``."""
    return {"JSONString": json.dumps(dict(params or {}))}
