from typing import Dict, Mapping, Optional
import logging

import requests

from .config import DEFAULT_TIMEOUT
from .exceptions import TransportError


log = logging.getLogger(__name__)


class Transport:
    """
    Performs exactly one blocking HTTP call per ``send``.

    HTTP status codes are not interpreted here: Zoho reports its errors
    inside a JSON envelope, often together with a 4xx status, so the body
    is always returned to the caller. Only network-level failures raise.

    Attributes
    ----------
    session : requests.Session
        Session used for every call (connection pooling).
    timeout : float
        Per-request timeout in seconds.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(
        self,
        url: str,
        method: str,
        headers: Dict[str, str],
        data: Optional[Mapping] = None,
        files: Optional[Mapping] = None
    ) -> str:
        """
        Send one request and return the raw response body.

        Parameters
        ----------
        url : str
            Fully built URL, query string included.
        method : str
            HTTP method name.
        headers : dict
            Request headers (must include Authorization).
        data : mapping, optional
            Form fields for write requests.
        files : mapping, optional
            Multipart file fields.

        Returns
        -------
        str
            Response body as text.

        Raises
        ------
        TransportError
            If the request could not be completed (connection error,
            DNS failure, timeout, ...).
        """
        log.debug(f"{method} {url.split('?', 1)[0]}")
        try:
            resp = self.session.request(
                method,
                url,
                headers=headers,
                data=data,
                files=files,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            log.error(f"Connection error on {method} request: {e}")
            raise TransportError(type(e).__name__, str(e)) from e

        return resp.text

    def close(self) -> None:
        self.session.close()
