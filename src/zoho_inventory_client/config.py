from dataclasses import dataclass
from typing import Optional
import os

from .exceptions import ConfigurationError


DEFAULT_API_BASE_URL = "https://inventory.zoho.com/api/v1"
DEFAULT_ACCOUNTS_URL = "https://accounts.zoho.com/oauth/v2/token"
DEFAULT_TIMEOUT = 30.0

REQUIRED_FIELDS = (
    "access_token",
    "refresh_token",
    "client_id",
    "client_secret",
    "redirect_uri",
)


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings required to build a Zoho Inventory client.

    Attributes
    ----------
    access_token : str
        Current OAuth access token (sent as the Bearer token).
    refresh_token : str
        Long-lived token exchanged for a new access token when the
        current one expires.
    client_id, client_secret, redirect_uri : str
        OAuth client identity registered in the Zoho API console.
    organization_id : str, optional
        Only needed when the token has access to more than one
        organization.
    api_base_url : str
        Base URL of the Inventory API. Change it for other data centers
        (e.g. ``https://inventory.zoho.eu/api/v1``).
    accounts_url : str
        OAuth token endpoint used for refreshes.
    timeout : float
        Per-request timeout in seconds.
    """

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    redirect_uri: Optional[str] = None
    organization_id: Optional[str] = None
    api_base_url: str = DEFAULT_API_BASE_URL
    accounts_url: str = DEFAULT_ACCOUNTS_URL
    timeout: float = DEFAULT_TIMEOUT

    def validate(self) -> None:
        """
        Check that every required field is set.

        Raises
        ------
        ConfigurationError
            Naming the first missing field, or when ``timeout`` is not
            positive.
        """
        for name in REQUIRED_FIELDS:
            if not getattr(self, name):
                raise ConfigurationError(
                    f"You have to set '{name}' to use the Zoho client",
                    field=name,
                )

        if self.timeout is None or self.timeout <= 0:
            raise ConfigurationError(
                f"Invalid timeout: {self.timeout!r}",
                field="timeout",
            )

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Build a configuration from ``ZOHO_*`` environment variables.

        The returned configuration is validated.
        """
        timeout = os.getenv("ZOHO_TIMEOUT")
        try:
            timeout = float(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ConfigurationError(
                f"Invalid value for ZOHO_TIMEOUT: {timeout!r}",
                field="timeout",
            )

        config = cls(
            access_token=os.getenv("ZOHO_ACCESS_TOKEN"),
            refresh_token=os.getenv("ZOHO_REFRESH_TOKEN"),
            client_id=os.getenv("ZOHO_CLIENT_ID"),
            client_secret=os.getenv("ZOHO_CLIENT_SECRET"),
            redirect_uri=os.getenv("ZOHO_REDIRECT_URI"),
            organization_id=os.getenv("ZOHO_ORGANIZATION_ID") or None,
            api_base_url=os.getenv(
                "ZOHO_API_BASE_URL", DEFAULT_API_BASE_URL
            ),
            accounts_url=os.getenv(
                "ZOHO_ACCOUNTS_URL", DEFAULT_ACCOUNTS_URL
            ),
            timeout=timeout,
        )
        config.validate()
        return config
