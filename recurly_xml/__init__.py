"""Client for the XML billing API (accounts, adjustments, invoices,
coupon redemptions and webhook notifications)."""

from recurly_xml.core.client import Client
from recurly_xml.core.errors import (
    FieldError,
    NotFound,
    ParseError,
    RateLimited,
    RecurlyError,
    RequestError,
    TransportError,
    UnrecognizedWebhook,
    ValidationError,
)
from recurly_xml.schemas import (
    Account,
    AccountNotification,
    Address,
    Adjustment,
    Invoice,
    InvoiceNotification,
    Notification,
    Redemption,
    TaxDetail,
)
from recurly_xml.services.webhook_service import parse_webhook

__all__ = [
    "Account",
    "AccountNotification",
    "Address",
    "Adjustment",
    "Client",
    "FieldError",
    "Invoice",
    "InvoiceNotification",
    "NotFound",
    "Notification",
    "ParseError",
    "RateLimited",
    "RecurlyError",
    "Redemption",
    "RequestError",
    "TaxDetail",
    "TransportError",
    "UnrecognizedWebhook",
    "ValidationError",
    "parse_webhook",
]
