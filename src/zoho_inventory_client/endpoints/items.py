from typing import Dict, Optional
import os

from ..base_client import BaseAPIClient
from ..request import HttpMethod, json_string


class ItemsAPI(BaseAPIClient):
    """
    Provides access to Zoho Inventory item and item group endpoints.

    All methods return the decoded Zoho envelope (``code`` 0) and raise
    ``RemoteError`` / ``TransportError`` on failure.
    """

    # -------------------------------------------------------------- items

    def create_item(self, params: Dict) -> Dict:
        """
        Create a new item.

        Parameters
        ----------
        params : dict
            Item properties (``name``, ``rate``, ``sku``, ...).

        Returns
        -------
        dict
            Envelope whose ``item`` key holds the created item.
        """
        return self.make_request(
            "/items", HttpMethod.POST, json_string(params)
        )

    def update_item(self, item_id: str, params: Dict) -> Dict:
        return self.make_request(
            f"/items/{item_id}", HttpMethod.PUT, json_string(params)
        )

    def retrieve_item(self, item_id: Optional[str] = None) -> Dict:
        """Retrieve one item, or every item when ``item_id`` is omitted."""
        return self.make_request(f"/items/{item_id or ''}")

    def list_items(self, filters: Optional[Dict] = None) -> Dict:
        """
        List items, optionally filtered.

        Parameters
        ----------
        filters : dict, optional
            Any filter understood by Zoho, for instance:
              - ``search_text``: text contained in the item
              - ``filter_by``: ``Status.Active``, ``Status.Lowstock``,
                ``ItemType.Inventory``, ...
              - ``page``, ``per_page``, ``sort_column``, ``sort_order``
            Custom fields can be used as filters as well.

        Returns
        -------
        dict
            Envelope whose ``items`` key holds the matching items.
        """
        return self.make_request("/items/", HttpMethod.GET, filters)

    def search_items(self, search_text: str) -> Dict:
        return self.list_items({"search_text": search_text})

    def delete_item(self, item_id: str) -> Dict:
        return self.make_request(f"/items/{item_id}", HttpMethod.DELETE)

    def add_item_image(
        self,
        item_id: str,
        image_path: str,
        content_type: str = "image/jpeg"
    ) -> Dict:
        """
        Upload an image for an item.

        Parameters
        ----------
        item_id : str
            Item to attach the image to.
        image_path : str
            Local path of the image file.
        content_type : str
            MIME type of the image.

        Raises
        ------
        FileNotFoundError
            If ``image_path`` does not exist.
        """
        with open(image_path, "rb") as f:
            files = {
                "image": (os.path.basename(image_path), f.read(), content_type)
            }

        return self.make_request(
            f"/items/{item_id}/image", HttpMethod.POST, files=files
        )

    def delete_item_image(self, item_id: str) -> Dict:
        return self.make_request(
            f"/items/{item_id}/image", HttpMethod.DELETE
        )

    def activate_item(self, item_id: str) -> Dict:
        return self.make_request(f"/items/{item_id}/active", HttpMethod.POST)

    def deactivate_item(self, item_id: str) -> Dict:
        return self.make_request(
            f"/items/{item_id}/inactive", HttpMethod.POST
        )

    # -------------------------------------------------------- item groups

    def create_item_group(self, params: Dict) -> Dict:
        return self.make_request(
            "/itemgroups", HttpMethod.POST, json_string(params)
        )

    def update_item_group(self, group_id: str, params: Dict) -> Dict:
        return self.make_request(
            f"/itemgroups/{group_id}", HttpMethod.PUT, json_string(params)
        )

    def retrieve_item_group(self, group_id: Optional[str] = None) -> Dict:
        return self.make_request(f"/itemgroups/{group_id or ''}")

    def list_item_groups(self) -> Dict:
        return self.retrieve_item_group()

    def delete_item_group(self, group_id: str) -> Dict:
        return self.make_request(
            f"/itemgroups/{group_id}", HttpMethod.DELETE
        )

    def activate_item_group(self, group_id: str) -> Dict:
        return self.make_request(
            f"/itemgroups/{group_id}/active", HttpMethod.POST
        )

    def deactivate_item_group(self, group_id: str) -> Dict:
        return self.make_request(
            f"/itemgroups/{group_id}/inactive", HttpMethod.POST
        )
