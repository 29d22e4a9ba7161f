from typing import Dict, Optional

from ..base_client import BaseAPIClient
from ..request import HttpMethod, json_string


class ContactsAPI(BaseAPIClient):
    """
    Customer and vendor contacts.

    ``list_contacts`` accepts Zoho filters such as
    ``{"filter_by": constants.STATUS_ACTIVE_VENDORS}``.
    """

    def create_contact(self, params: Optional[Dict] = None) -> Dict:
        return self.make_request(
            "/contacts", HttpMethod.POST, json_string(params)
        )

    def update_contact(
        self,
        contact_id: str,
        params: Optional[Dict] = None
    ) -> Dict:
        return self.make_request(
            f"/contacts/{contact_id}", HttpMethod.PUT, json_string(params)
        )

    def retrieve_contact(
        self,
        contact_id: Optional[str] = None,
        filters: Optional[Dict] = None
    ) -> Dict:
        return self.make_request(
            f"/contacts/{contact_id or ''}", HttpMethod.GET, filters
        )

    def list_contacts(self, filters: Optional[Dict] = None) -> Dict:
        return self.make_request("/contacts", HttpMethod.GET, filters)

    def delete_contact(self, contact_id: str) -> Dict:
        return self.make_request(
            f"/contacts/{contact_id}", HttpMethod.DELETE
        )

    def activate_contact(self, contact_id: str) -> Dict:
        return self.make_request(
            f"/contacts/{contact_id}/active", HttpMethod.POST
        )

    def deactivate_contact(self, contact_id: str) -> Dict:
        return self.make_request(
            f"/contacts/{contact_id}/inactive", HttpMethod.POST
        )
