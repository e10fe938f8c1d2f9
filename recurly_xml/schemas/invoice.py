"""Invoice schemas."""

from datetime import datetime

from lxml import etree
from pydantic import BaseModel, Field

from recurly_xml.codec.elements import append_text, child_float, child_int, child_text, to_bytes
from recurly_xml.codec.href import decode_href_string
from recurly_xml.codec.nullable import decode_null_time
from recurly_xml.schemas.adjustment import Adjustment, decode_adjustment


class Invoice(BaseModel):
    # Read only, resolved from <account href>
    account_code: str | None = None

    uuid: str | None = None
    state: str | None = None
    invoice_number_prefix: str | None = None
    invoice_number: int | None = None
    po_number: str | None = None
    vat_number: str | None = None
    subtotal_in_cents: int | None = None
    tax_in_cents: int | None = None
    total_in_cents: int | None = None
    currency: str | None = None
    tax_type: str | None = None
    tax_region: str | None = None
    tax_rate: float | None = None
    net_terms: int | None = None
    collection_method: str | None = None
    terms_and_conditions: str | None = None
    customer_notes: str | None = None
    vat_reverse_charge_notes: str | None = None
    created_at: datetime | None = None
    closed_at: datetime | None = None
    line_items: list[Adjustment] = Field(default_factory=list)


def encode_invoice(invoice: Invoice) -> bytes:
    """Serialize the options accepted when invoicing pending charges."""
    root = etree.Element("invoice")
    append_text(root, "po_number", invoice.po_number)
    append_text(root, "terms_and_conditions", invoice.terms_and_conditions)
    append_text(root, "customer_notes", invoice.customer_notes)
    append_text(root, "vat_reverse_charge_notes", invoice.vat_reverse_charge_notes)
    append_text(root, "collection_method", invoice.collection_method)
    append_text(root, "net_terms", invoice.net_terms)
    return to_bytes(root)


def decode_invoice(element: etree._Element) -> Invoice:
    account = element.find("account")
    # Webhook payloads embed the full account instead of a link
    account_code = None
    if account is not None and account.get("href"):
        account_code = decode_href_string(account)

    created_at = element.find("created_at")
    if created_at is None:
        created_at = element.find("date")

    return Invoice(
        account_code=account_code,
        uuid=child_text(element, "uuid"),
        state=child_text(element, "state"),
        invoice_number_prefix=child_text(element, "invoice_number_prefix"),
        invoice_number=child_int(element, "invoice_number"),
        po_number=child_text(element, "po_number"),
        vat_number=child_text(element, "vat_number"),
        subtotal_in_cents=child_int(element, "subtotal_in_cents"),
        tax_in_cents=child_int(element, "tax_in_cents"),
        total_in_cents=child_int(element, "total_in_cents"),
        currency=child_text(element, "currency"),
        tax_type=child_text(element, "tax_type"),
        tax_region=child_text(element, "tax_region"),
        tax_rate=child_float(element, "tax_rate"),
        net_terms=child_int(element, "net_terms"),
        collection_method=child_text(element, "collection_method"),
        terms_and_conditions=child_text(element, "terms_and_conditions"),
        customer_notes=child_text(element, "customer_notes"),
        vat_reverse_charge_notes=child_text(element, "vat_reverse_charge_notes"),
        created_at=decode_null_time(created_at),
        closed_at=decode_null_time(element.find("closed_at")),
        line_items=[decode_adjustment(a) for a in element.iterfind("line_items/adjustment")],
    )


def decode_invoices(element: etree._Element) -> list[Invoice]:
    return [decode_invoice(i) for i in element.iterfind("invoice")]
