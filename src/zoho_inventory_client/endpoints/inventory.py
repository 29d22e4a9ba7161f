from typing import Dict

from ..base_client import BaseAPIClient
from ..request import HttpMethod, json_string


class InventoryAdjustmentsAPI(BaseAPIClient):
    """Stock quantity and value adjustments."""

    def list_inventory_adjustments(self) -> Dict:
        return self.make_request("/inventoryadjustments")

    def create_inventory_adjustment(self, params: Dict) -> Dict:
        return self.make_request(
            "/inventoryadjustments", HttpMethod.POST, json_string(params)
        )

    def retrieve_inventory_adjustment(self, adjustment_id: str) -> Dict:
        return self.make_request(f"/inventoryadjustments/{adjustment_id}")

    def delete_inventory_adjustment(self, adjustment_id: str) -> Dict:
        return self.make_request(
            f"/inventoryadjustments/{adjustment_id}", HttpMethod.DELETE
        )
