from .auth import Credentials, TokenManager
from .base_client import BaseAPIClient
from .client import ZohoInventoryClient
from .config import ClientConfig
from .exceptions import (
    ConfigurationError,
    RemoteError,
    ResponseParseError,
    TransportError,
    ZohoInventoryError,
)
from .request import HttpMethod, RequestDescriptor
from .result import Failure, Result, Success

__all__ = [
    "BaseAPIClient",
    "ClientConfig",
    "ConfigurationError",
    "Credentials",
    "Failure",
    "HttpMethod",
    "RemoteError",
    "RequestDescriptor",
    "ResponseParseError",
    "Result",
    "Success",
    "TokenManager",
    "TransportError",
    "ZohoInventoryClient",
    "ZohoInventoryError",
]
