# Settings scopes accepted by SettingsAPI.update_settings
SCOPE_PURCHASEORDERS = "purchaseorders"
SCOPE_SALESORDERS = "salesorders"
SCOPE_ITEMGROUP = "itemgroup"
SCOPE_INVOICES = "invoices"
SCOPE_CONTACTS = "contacts"
SCOPE_ITEMS = "items"
SCOPE_BILLS = "bills"

# Contact list filters (filter_by)
STATUS_ALL = "Status.All"
STATUS_ACTIVE_CUSTOMERS = "Status.ActiveCustomers"
STATUS_ACTIVE_VENDORS = "Status.ActiveVendors"
STATUS_INACTIVE_CUSTOMERS = "Status.InactiveCustomers"
STATUS_INACTIVE_VENDORS = "Status.InactiveVendors"
STATUS_CRM = "Status.Crm"
STATUS_INACTIVE = "Status.Inactive"
STATUS_ACTIVE = "Status.Active"
