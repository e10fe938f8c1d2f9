from recurly_xml.schemas.account import Account, Address, decode_account, encode_account
from recurly_xml.schemas.adjustment import (
    Adjustment,
    TaxDetail,
    decode_adjustment,
    decode_adjustments,
    encode_adjustment,
)
from recurly_xml.schemas.invoice import Invoice, decode_invoice, decode_invoices, encode_invoice
from recurly_xml.schemas.notification import (
    AccountNotification,
    InvoiceNotification,
    Notification,
)
from recurly_xml.schemas.redemption import Redemption, decode_redemption, encode_redeem_request

__all__ = [
    "Account",
    "AccountNotification",
    "Address",
    "Adjustment",
    "Invoice",
    "InvoiceNotification",
    "Notification",
    "Redemption",
    "TaxDetail",
    "decode_account",
    "decode_adjustment",
    "decode_adjustments",
    "decode_invoice",
    "decode_invoices",
    "decode_redemption",
    "encode_account",
    "encode_adjustment",
    "encode_invoice",
    "encode_redeem_request",
]
