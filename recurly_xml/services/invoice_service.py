"""Invoice service."""

from __future__ import annotations

import logging
from typing import Any

from recurly_xml.schemas.invoice import Invoice, decode_invoice, decode_invoices, encode_invoice
from recurly_xml.services.base import ResourceService, build_path

logger = logging.getLogger(__name__)


class InvoiceService(ResourceService):
    def list(self, params: dict[str, Any] | None = None) -> list[Invoice]:
        root = self.client.request("GET", "invoices", params)
        if root is None:
            return []
        return decode_invoices(self.expect_root(root, "invoices"))

    def list_for_account(
        self, account_code: str, params: dict[str, Any] | None = None
    ) -> list[Invoice]:
        root = self.client.request("GET", build_path("accounts", account_code, "invoices"), params)
        if root is None:
            return []
        return decode_invoices(self.expect_root(root, "invoices"))

    def get(self, invoice_number: int | str) -> Invoice:
        root = self.client.request("GET", build_path("invoices", invoice_number))
        return decode_invoice(self.expect_root(root, "invoice"))

    def create(self, account_code: str, invoice: Invoice | None = None) -> Invoice:
        """Invoice all pending charges on an account.

        Args:
            account_code: Account whose uninvoiced adjustments are collected.
            invoice: Optional invoice options (PO number, notes, net terms).

        Raises:
            ValidationError: If the account has no pending charges.
        """
        root = self.client.request(
            "POST",
            build_path("accounts", account_code, "invoices"),
            body=encode_invoice(invoice or Invoice()),
        )
        created = decode_invoice(self.expect_root(root, "invoice"))
        logger.info("Created invoice %s for account %s", created.invoice_number, account_code)
        return created

    def mark_paid(self, invoice_number: int | str) -> Invoice:
        """Mark an open invoice as successfully collected offline."""
        root = self.client.request("PUT", build_path("invoices", invoice_number, "mark_successful"))
        return decode_invoice(self.expect_root(root, "invoice"))

    def mark_failed(self, invoice_number: int | str) -> Invoice:
        root = self.client.request("PUT", build_path("invoices", invoice_number, "mark_failed"))
        return decode_invoice(self.expect_root(root, "invoice"))
