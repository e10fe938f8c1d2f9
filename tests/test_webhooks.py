"""Tests for webhook notification parsing."""

import io
from datetime import UTC, datetime

import pytest

from recurly_xml.core.errors import ParseError, UnrecognizedWebhook
from recurly_xml.schemas.account import Account
from recurly_xml.schemas.notification import AccountNotification, InvoiceNotification
from recurly_xml.services.webhook_service import WEBHOOK_NOTIFICATION_TYPES, parse_webhook

NEW_ACCOUNT_NOTIFICATION = """<?xml version="1.0" encoding="UTF-8"?>
<new_account_notification>
    <account>
        <account_code>1</account_code>
        <username nil="true"></username>
        <email>verena@example.com</email>
        <first_name>Verena</first_name>
        <last_name>Example</last_name>
        <company_name nil="true"></company_name>
        </account>
 </new_account_notification>"""

NEW_INVOICE_NOTIFICATION = """<?xml version="1.0" encoding="UTF-8"?>
<new_invoice_notification>
  <account>
    <account_code>1</account_code>
    <username nil="true"></username>
    <email>verena@example.com</email>
    <first_name>Verana</first_name>
    <last_name>Example</last_name>
    <company_name nil="true"></company_name>
  </account>
  <invoice>
    <uuid>ffc64d71d4b5404e93f13aac9c63b007</uuid>
    <subscription_id nil="true"></subscription_id>
    <state>open</state>
    <invoice_number_prefix></invoice_number_prefix>
    <invoice_number type="integer">1000</invoice_number>
    <po_number></po_number>
    <vat_number></vat_number>
    <total_in_cents type="integer">1000</total_in_cents>
    <currency>USD</currency>
    <date type="datetime">2014-01-01T20:21:44Z</date>
    <closed_at type="datetime" nil="true"></closed_at>
    <net_terms type="integer">0</net_terms>
    <collection_method>manual</collection_method>
  </invoice>
</new_invoice_notification>"""


class TestParseWebhook:
    """Tests for parse_webhook dispatch."""

    def test_new_account_notification(self):
        """Test the account notification decodes to the literal payload values."""
        notification = parse_webhook(NEW_ACCOUNT_NOTIFICATION.encode("utf-8"))

        assert isinstance(notification, AccountNotification)
        assert notification.type == "new_account_notification"
        assert notification.account == Account(
            code="1",
            email="verena@example.com",
            first_name="Verena",
            last_name="Example",
        )

    def test_new_invoice_notification(self):
        """Test the invoice notification decodes account and invoice."""
        notification = parse_webhook(NEW_INVOICE_NOTIFICATION)

        assert isinstance(notification, InvoiceNotification)
        assert notification.type == "new_invoice_notification"
        assert notification.account.code == "1"
        assert notification.account.first_name == "Verana"
        invoice = notification.invoice
        assert invoice.uuid == "ffc64d71d4b5404e93f13aac9c63b007"
        assert invoice.state == "open"
        assert invoice.invoice_number == 1000
        assert invoice.total_in_cents == 1000
        assert invoice.currency == "USD"
        assert invoice.created_at == datetime(2014, 1, 1, 20, 21, 44, tzinfo=UTC)
        assert invoice.closed_at is None
        assert invoice.net_terms == 0
        assert invoice.collection_method == "manual"
        assert invoice.account_code is None

    def test_binary_stream(self):
        """Test a file-like request body is accepted."""
        notification = parse_webhook(io.BytesIO(NEW_ACCOUNT_NOTIFICATION.encode("utf-8")))
        assert notification.type == "new_account_notification"

    @pytest.mark.parametrize(
        "name",
        [
            "canceled_account_notification",
            "reactivated_account_notification",
            "billing_info_updated_notification",
        ],
    )
    def test_other_account_notifications(self, name):
        """Test every account variant shares the account decoder."""
        payload = f"<{name}><account><account_code>7</account_code></account></{name}>"
        notification = parse_webhook(payload)
        assert isinstance(notification, AccountNotification)
        assert notification.type == name
        assert notification.account.code == "7"

    def test_past_due_invoice_notification(self):
        """Test an invoice variant other than new_invoice."""
        payload = NEW_INVOICE_NOTIFICATION.replace(
            "new_invoice_notification", "past_due_invoice_notification"
        )
        notification = parse_webhook(payload)
        assert isinstance(notification, InvoiceNotification)
        assert notification.type == "past_due_invoice_notification"

    def test_unrecognized_root(self):
        """Test an unknown root element raises UnrecognizedWebhook."""
        with pytest.raises(UnrecognizedWebhook) as exc_info:
            parse_webhook(b"<mystery_notification><account/></mystery_notification>")
        assert exc_info.value.root_name == "mystery_notification"

    def test_missing_account(self):
        """Test a known notification without its account is a parse error."""
        with pytest.raises(ParseError):
            parse_webhook(b"<new_account_notification></new_account_notification>")

    def test_malformed_payload(self):
        """Test malformed XML is a parse error."""
        with pytest.raises(ParseError):
            parse_webhook(b"<new_account_notification><account>")

    def test_dispatch_table_is_closed(self):
        """Test the set of known notification types."""
        assert set(WEBHOOK_NOTIFICATION_TYPES) == {
            "new_account_notification",
            "canceled_account_notification",
            "reactivated_account_notification",
            "billing_info_updated_notification",
            "new_invoice_notification",
            "processing_invoice_notification",
            "closed_invoice_notification",
            "past_due_invoice_notification",
        }
