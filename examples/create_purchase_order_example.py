from zoho_inventory_client import (
    ClientConfig,
    HttpMethod,
    RemoteError,
    RequestDescriptor,
    ZohoInventoryClient,
)
import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)

if __name__ == "__main__":
    config = ClientConfig(
        access_token="1000.xxxx",
        refresh_token="1000.yyyy",
        client_id="1000.CLIENTID",
        client_secret="secret",
        redirect_uri="https://example.com/oauth/callback",
        organization_id="10234695",
    )
    zoho = ZohoInventoryClient(config)

    # Endpoint wrappers raise on failure.
    try:
        po = zoho.purchase_orders.create_purchase_order(
            {
                "vendor_id": "460000000026049",
                "line_items": [{"item_id": "460000000027009", "quantity": 2}],
            }
        )
        print(po["purchaseorder"]["purchaseorder_number"])
    except RemoteError as e:
        print(f"Zoho refused the purchase order: {e.code} {e.message}")

    # Raw descriptors return a Success / Failure value instead.
    result = zoho.execute(RequestDescriptor("/bills", HttpMethod.GET))
    if result.ok:
        print(len(result.payload.get("bills", [])))
    else:
        print(f"Failed: {result.error}")
