from typing import Any, Dict, Mapping, Optional
import logging

from .auth import TokenManager
from .config import DEFAULT_API_BASE_URL
from .exceptions import TransportError
from .request import HttpMethod, RequestDescriptor, build_url
from .response import AuthExpired, interpret
from .result import Failure, Result, Success
from .transport import Transport


log = logging.getLogger(__name__)

# Original attempt plus one retry after a token refresh.
MAX_ATTEMPTS = 2


class BaseAPIClient:
    """
    Base HTTP client for Zoho Inventory API endpoints.

    Sends authenticated requests and, when Zoho reports the access token
    as invalid, refreshes it once and retries the call. Intended for
    inheritance by endpoint groups (e.g. ItemsAPI, ContactsAPI).

    Attributes
    ----------
    token_manager : TokenManager
        Provides the access token and performs refreshes. Shared by all
        endpoint groups of one client.
    transport : Transport
        Performs the HTTP calls.
    base_url : str
        API root.
    """

    def __init__(
        self,
        *,
        token_manager: TokenManager,
        transport: Optional[Transport] = None,
        base_url: str = DEFAULT_API_BASE_URL
    ) -> None:
        self.token_manager = token_manager
        self.transport = transport or Transport(
            timeout=token_manager.timeout
        )
        self.base_url = base_url

    def _send(self, descriptor: RequestDescriptor):
        url = build_url(
            self.base_url,
            descriptor.alias,
            descriptor.url_params,
            self.token_manager.organization_id,
        )
        token = self.token_manager.get_token()
        headers = {"Authorization": f"Bearer {token}"}

        body = self.transport.send(
            url,
            descriptor.method.value,
            headers,
            data=descriptor.form_data,
            files=descriptor.files,
        )
        return interpret(body)

    def execute(self, descriptor: RequestDescriptor) -> Result:
        """
        Execute one logical API call with at most one token refresh.

        Parameters
        ----------
        descriptor : RequestDescriptor
            What to send and where.

        Returns
        -------
        Success
            Carrying the decoded envelope when Zoho answers with code 0.
        Failure
            Carrying a ``TransportError`` (network failure or unreadable
            body, never retried) or a ``RemoteError`` (Zoho error
            envelope). When the token refresh fails, or the retried call
            is rejected again, the error is the one from the last
            response received.
        """
        already_refreshed = False

        with self.token_manager.lock:
            for _ in range(MAX_ATTEMPTS):
                try:
                    outcome = self._send(descriptor)
                except TransportError as e:
                    return Failure(e, refresh_attempted=already_refreshed)

                if isinstance(outcome, Success):
                    return outcome

                if isinstance(outcome, AuthExpired) and not already_refreshed:
                    log.warning(
                        f"Access token rejected on {descriptor.alias} "
                        "- refreshing and retrying once."
                    )
                    already_refreshed = True
                    if self.token_manager.refresh():
                        continue
                    log.warning(
                        "Token refresh failed - returning original error."
                    )
                break

        if isinstance(outcome, AuthExpired):
            outcome = outcome.to_error()
        return Failure(outcome, refresh_attempted=already_refreshed)

    def make_request(
        self,
        alias: str,
        method: HttpMethod = HttpMethod.GET,
        params: Optional[Mapping[str, Any]] = None,
        url_params: Optional[Mapping[str, Any]] = None,
        files: Optional[Mapping[str, Any]] = None
    ) -> Dict:
        """
        Execute a request and return the decoded envelope.

        Parameters
        ----------
        alias : str
            Endpoint path, e.g. ``/items/123``.
        method : HttpMethod
            HTTP method.
        params : mapping, optional
            Query parameters for GET, form fields for write requests.
        url_params : mapping, optional
            Extra query parameters for write requests.
        files : mapping, optional
            Multipart uploads.

        Returns
        -------
        dict
            Parsed JSON envelope (``code`` 0).

        Raises
        ------
        TransportError
            If the request could not be completed.
        RemoteError
            If Zoho answered with an error envelope.
        """
        descriptor = RequestDescriptor(
            alias=alias,
            method=method,
            body_params=params or {},
            query_params=url_params or {},
            files=files,
        )
        return self.execute(descriptor).unwrap()

