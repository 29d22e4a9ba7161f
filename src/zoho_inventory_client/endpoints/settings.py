from typing import Dict, Optional

from ..base_client import BaseAPIClient
from ..request import HttpMethod, json_string


class OrganizationsAPI(BaseAPIClient):

    def retrieve_organizations_info(self) -> Dict:
        """
        List the organizations the access token can reach.

        Useful to discover the ``organization_id`` to configure when the
        token spans several organizations.
        """
        return self.make_request("/organizations")


class SettingsAPI(BaseAPIClient):
    """
    Organization settings and taxes.
    """

    def update_settings(self, scope: str, params: Dict) -> Dict:
        """
        Update the settings of one module.

        Parameters
        ----------
        scope : str
            One of the ``SCOPE_*`` constants, e.g.
            ``constants.SCOPE_PURCHASEORDERS``.
        params : dict
            Settings to change, e.g. ``{"next_number": 54}`` to move the
            purchase order counter.
        """
        return self.make_request(
            f"/settings/{scope}/", HttpMethod.PUT, json_string(params)
        )

    def create_tax(self, params: Dict) -> Dict:
        return self.make_request(
            "/settings/taxes", HttpMethod.POST, json_string(params)
        )

    def update_tax(self, tax_id: str, params: Dict) -> Dict:
        return self.make_request(
            f"/settings/taxes/{tax_id}", HttpMethod.PUT, json_string(params)
        )

    def retrieve_tax(self, tax_id: Optional[str] = None) -> Dict:
        return self.make_request(f"/settings/taxes/{tax_id or ''}")

    def list_taxes(self, filters: Optional[Dict] = None) -> Dict:
        return self.make_request("/settings/taxes/", HttpMethod.GET, filters)

    def search_taxes(self, search_text: str) -> Dict:
        return self.list_taxes({"search_text": search_text})
