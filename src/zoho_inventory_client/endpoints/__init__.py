from .contacts import ContactsAPI
from .inventory import InventoryAdjustmentsAPI
from .items import ItemsAPI
from .orders import InvoicesAPI, PurchaseOrdersAPI, SalesOrdersAPI
from .settings import OrganizationsAPI, SettingsAPI

__all__ = [
    "ContactsAPI",
    "InventoryAdjustmentsAPI",
    "InvoicesAPI",
    "ItemsAPI",
    "OrganizationsAPI",
    "PurchaseOrdersAPI",
    "SalesOrdersAPI",
    "SettingsAPI",
]
