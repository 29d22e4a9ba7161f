from zoho_inventory_client import ZohoInventoryClient
from zoho_inventory_client.toolbox import (
    enable_console_logging,
    records_to_dataframe,
)

if __name__ == "__main__":
    enable_console_logging()

    # Reads ZOHO_ACCESS_TOKEN, ZOHO_REFRESH_TOKEN, ZOHO_CLIENT_ID,
    # ZOHO_CLIENT_SECRET, ZOHO_REDIRECT_URI (and ZOHO_ORGANIZATION_ID).
    with ZohoInventoryClient.from_env() as zoho:
        items = zoho.items.list_items({"filter_by": "Status.Active"})
        df = records_to_dataframe(
            items, "items", ["item_id", "name", "sku", "rate"]
        )
        print(df.head())
