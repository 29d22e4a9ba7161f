from dataclasses import dataclass
from threading import RLock
from typing import Optional
import logging

import requests

from .config import ClientConfig, DEFAULT_ACCOUNTS_URL, DEFAULT_TIMEOUT


log = logging.getLogger(__name__)


@dataclass
class Credentials:
    """
    OAuth credentials of one client.

    Only ``access_token`` ever changes, and only through
    ``TokenManager.refresh``.
    """

    access_token: str
    refresh_token: str
    client_id: str
    client_secret: str
    redirect_uri: str
    organization_id: Optional[str] = None

    @classmethod
    def from_config(cls, config: ClientConfig) -> "Credentials":
        config.validate()
        return cls(
            access_token=config.access_token,
            refresh_token=config.refresh_token,
            client_id=config.client_id,
            client_secret=config.client_secret,
            redirect_uri=config.redirect_uri,
            organization_id=config.organization_id,
        )

    def __repr__(self) -> str:
        return (
            f"Credentials(client_id={self.client_id!r}, "
            f"organization_id={self.organization_id!r})"
        )


class TokenManager:
    """
    Owns the client's credentials and refreshes the access token.

    Responsibilities:
    - Hand out the current Bearer access token.
    - Exchange the refresh token for a new access token on demand.
    - Provide the lock that serializes calls made through one client, so
      a refresh never races a request that reads the token.
    """

    def __init__(
        self,
        credentials: Credentials,
        accounts_url: str = DEFAULT_ACCOUNTS_URL,
        timeout: float = DEFAULT_TIMEOUT
    ) -> None:
        """
        Initializes the TokenManager.

        Args:
            credentials (Credentials): Credentials to manage. Updated in
                place on a successful refresh.
            accounts_url (str, optional): Zoho OAuth token endpoint.
            timeout (float, optional): Timeout of the refresh request.
        """
        self.credentials = credentials
        self.accounts_url = accounts_url
        self.timeout = timeout
        self.lock = RLock()

    @classmethod
    def from_config(cls, config: ClientConfig) -> "TokenManager":
        return cls(
            Credentials.from_config(config),
            accounts_url=config.accounts_url,
            timeout=config.timeout,
        )

    @property
    def organization_id(self) -> Optional[str]:
        return self.credentials.organization_id

    def get_token(self) -> str:
        """Return the current access token."""
        return self.credentials.access_token

    def refresh(self) -> bool:
        """
        Request a new access token using the refresh token.

        The parameters travel in the query string of a POST to the
        accounts endpoint, which is what Zoho expects.

        Returns:
            bool: True if a non-empty ``access_token`` was received and
            stored, False otherwise. Credentials are left untouched on
            failure; this method never raises for network or payload
            problems.
        """
        params = {
            "refresh_token": self.credentials.refresh_token,
            "client_id": self.credentials.client_id,
            "client_secret": self.credentials.client_secret,
            "redirect_uri": self.credentials.redirect_uri,
            "grant_type": "refresh_token",
        }

        try:
            response = requests.post(
                self.accounts_url,
                params=params,
                timeout=self.timeout,
            )
            new_data = response.json()
        except requests.exceptions.RequestException as e:
            # The message may echo the URL, which carries the secrets.
            log.warning(f"Token refresh failed: {type(e).__name__}")
            return False
        except ValueError:
            log.warning("Token refresh failed: response is not valid JSON.")
            return False

        if not isinstance(new_data, dict):
            log.warning("Token refresh failed: unexpected response shape.")
            return False

        token = new_data.get("access_token")
        if not token or not isinstance(token, str):
            # Zoho answers e.g. {"error": "invalid_code"} with a 200
            log.warning(
                "Token refresh failed: no access_token in response "
                f"(error={new_data.get('error')!r})."
            )
            return False

        self.credentials.access_token = token
        log.info("Access token refreshed.")
        return True
