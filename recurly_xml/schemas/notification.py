"""Webhook notification variants."""

from lxml import etree
from pydantic import BaseModel

from recurly_xml.codec.elements import local_name
from recurly_xml.core.errors import ParseError
from recurly_xml.schemas.account import Account, decode_account
from recurly_xml.schemas.invoice import Invoice, decode_invoice


class AccountNotification(BaseModel):
    type: str
    account: Account


class InvoiceNotification(BaseModel):
    type: str
    account: Account
    invoice: Invoice


Notification = AccountNotification | InvoiceNotification


def _required(element: etree._Element, tag: str) -> etree._Element:
    child = element.find(tag)
    if child is None:
        raise ParseError(f"<{local_name(element)}> is missing <{tag}>")
    return child


def decode_account_notification(element: etree._Element) -> AccountNotification:
    return AccountNotification(
        type=local_name(element),
        account=decode_account(_required(element, "account")),
    )


def decode_invoice_notification(element: etree._Element) -> InvoiceNotification:
    return InvoiceNotification(
        type=local_name(element),
        account=decode_account(_required(element, "account")),
        invoice=decode_invoice(_required(element, "invoice")),
    )
