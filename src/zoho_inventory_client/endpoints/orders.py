from typing import Dict, Optional

from ..base_client import BaseAPIClient
from ..request import HttpMethod, json_string


def _numbering(ignore: bool) -> Dict[str, bool]:
    return {"ignore_auto_number_generation": bool(ignore)}


class _TransactionAPI(BaseAPIClient):
    """
    Shared create/update/retrieve logic of sales transactions.

    Subclasses set ``resource`` to the collection path (e.g.
    ``purchaseorders``).

    When ``ignore_auto_number_generation`` is True, Zoho does not assign
    the document number and the payload must carry one.
    """

    resource = ""

    def _create(self, params: Optional[Dict], ignore: bool) -> Dict:
        return self.make_request(
            f"/{self.resource}",
            HttpMethod.POST,
            json_string(params),
            _numbering(ignore),
        )

    def _update(self, doc_id: str, params: Dict, ignore: bool) -> Dict:
        return self.make_request(
            f"/{self.resource}/{doc_id}",
            HttpMethod.PUT,
            json_string(params),
            _numbering(ignore),
        )

    def _retrieve(self, doc_id: Optional[str] = None) -> Dict:
        return self.make_request(f"/{self.resource}/{doc_id or ''}")

    def _delete(self, doc_id: str) -> Dict:
        return self.make_request(
            f"/{self.resource}/{doc_id}", HttpMethod.DELETE
        )

    def _set_status(self, doc_id: str, status: str) -> Dict:
        return self.make_request(
            f"/{self.resource}/{doc_id}/status/{status}", HttpMethod.POST
        )


class PurchaseOrdersAPI(_TransactionAPI):
    """Purchase order endpoints."""

    resource = "purchaseorders"

    def create_purchase_order(
        self,
        params: Dict,
        ignore_auto_number_generation: bool = False
    ) -> Dict:
        return self._create(params, ignore_auto_number_generation)

    def update_purchase_order(
        self,
        purchaseorder_id: str,
        params: Dict,
        ignore_auto_number_generation: bool = False
    ) -> Dict:
        return self._update(
            purchaseorder_id, params, ignore_auto_number_generation
        )

    def retrieve_purchase_order(
        self,
        purchaseorder_id: Optional[str] = None
    ) -> Dict:
        return self._retrieve(purchaseorder_id)

    def list_purchase_orders(self) -> Dict:
        return self._retrieve()

    def delete_purchase_order(self, purchaseorder_id: str) -> Dict:
        return self._delete(purchaseorder_id)

    def issue_purchase_order(self, purchaseorder_id: str) -> Dict:
        """Mark a draft purchase order as issued."""
        return self._set_status(purchaseorder_id, "issued")

    def cancel_purchase_order(self, purchaseorder_id: str) -> Dict:
        return self._set_status(purchaseorder_id, "cancelled")


class SalesOrdersAPI(_TransactionAPI):
    """Sales order endpoints."""

    resource = "salesorders"

    def create_sales_order(
        self,
        params: Optional[Dict] = None,
        ignore_auto_number_generation: bool = False
    ) -> Dict:
        return self._create(params, ignore_auto_number_generation)

    def update_sales_order(
        self,
        salesorder_id: str,
        params: Dict,
        ignore_auto_number_generation: bool = False
    ) -> Dict:
        return self._update(
            salesorder_id, params, ignore_auto_number_generation
        )

    def retrieve_sales_order(
        self,
        salesorder_id: Optional[str] = None
    ) -> Dict:
        return self._retrieve(salesorder_id)

    def list_sales_orders(self) -> Dict:
        return self._retrieve()

    def delete_sales_order(self, salesorder_id: str) -> Dict:
        return self._delete(salesorder_id)

    def void_sales_order(self, salesorder_id: str) -> Dict:
        return self._set_status(salesorder_id, "void")


class InvoicesAPI(_TransactionAPI):
    """Invoice endpoints."""

    resource = "invoices"

    def create_invoice(
        self,
        params: Optional[Dict] = None,
        ignore_auto_number_generation: bool = False
    ) -> Dict:
        return self._create(params, ignore_auto_number_generation)

    def update_invoice(
        self,
        invoice_id: str,
        params: Dict,
        ignore_auto_number_generation: bool = False
    ) -> Dict:
        return self._update(invoice_id, params, ignore_auto_number_generation)

    def retrieve_invoice(self, invoice_id: Optional[str] = None) -> Dict:
        return self._retrieve(invoice_id)

    def list_invoices(self) -> Dict:
        return self._retrieve()
