from typing import Dict, Optional

import requests

from .auth import TokenManager
from .base_client import BaseAPIClient
from .config import ClientConfig
from .endpoints import (
    ContactsAPI,
    InventoryAdjustmentsAPI,
    InvoicesAPI,
    ItemsAPI,
    OrganizationsAPI,
    PurchaseOrdersAPI,
    SalesOrdersAPI,
    SettingsAPI,
)
from .request import RequestDescriptor
from .result import Result
from .transport import Transport


class ZohoInventoryClient:
    """
    Central entry point for all Zoho Inventory API modules.
    Aggregates sub-clients such as ItemsAPI, ContactsAPI, etc.

    Construction only validates the configuration and builds objects;
    no request is sent until an endpoint method is called.

    Raises
    ------
    ConfigurationError
        If a required configuration field is missing.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None
    ):
        config.validate()
        self.config = config
        self.token_manager = TokenManager.from_config(config)
        self.transport = Transport(session=session, timeout=config.timeout)

        # Sub-clients share the same TokenManager and Transport instances
        shared = {
            "token_manager": self.token_manager,
            "transport": self.transport,
            "base_url": config.api_base_url,
        }
        self._executor = BaseAPIClient(**shared)
        self.organizations = OrganizationsAPI(**shared)
        self.settings = SettingsAPI(**shared)
        self.items = ItemsAPI(**shared)
        self.purchase_orders = PurchaseOrdersAPI(**shared)
        self.sales_orders = SalesOrdersAPI(**shared)
        self.invoices = InvoicesAPI(**shared)
        self.contacts = ContactsAPI(**shared)
        self.inventory_adjustments = InventoryAdjustmentsAPI(**shared)

    @classmethod
    def from_env(cls, **kwargs) -> "ZohoInventoryClient":
        return cls(ClientConfig.from_env(), **kwargs)

    @property
    def credentials(self):
        return self.token_manager.credentials

    def auth_params(self) -> Dict[str, Optional[str]]:
        """Authentication parameters added to every request URL."""
        return {"organization_id": self.credentials.organization_id}

    def execute(self, descriptor: RequestDescriptor) -> Result:
        """
        Run a raw request descriptor, for endpoints without a wrapper.

        Returns a ``Success`` or ``Failure`` instead of raising.
        """
        return self._executor.execute(descriptor)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
