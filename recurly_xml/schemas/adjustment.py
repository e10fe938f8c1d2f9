"""Adjustment (charge or credit) and TaxDetail schemas.

Adjustments have an asymmetric wire contract. ``encode_adjustment`` emits
only the fields a caller may set on create; ``decode_adjustment`` accepts
the full server representation, resolving ``<account href>`` and
``<invoice href>`` links to plain identifiers.
"""

from datetime import datetime

from lxml import etree
from pydantic import BaseModel, ConfigDict, Field

from recurly_xml.codec.elements import (
    append_text,
    child_float,
    child_int,
    child_text,
    to_bytes,
)
from recurly_xml.codec.href import decode_href_int, decode_href_string
from recurly_xml.codec.nullable import append_null_bool, decode_null_bool, decode_null_time


class TaxDetail(BaseModel):
    """Read-only tax breakdown line owned by an Adjustment."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    type: str | None = None
    tax_rate: float | None = None
    tax_in_cents: int | None = None


class Adjustment(BaseModel):
    # Read only, resolved from href links
    account_code: str | None = None
    invoice_number: int | None = None

    uuid: str | None = None
    state: str | None = None
    description: str | None = None
    accounting_code: str | None = None
    product_code: str | None = None
    origin: str | None = None
    unit_amount_in_cents: int = 0
    quantity: int | None = None
    original_adjustment_uuid: str | None = None
    discount_in_cents: int | None = None
    tax_in_cents: int | None = None
    total_in_cents: int | None = None
    currency: str = ""
    taxable: bool | None = None
    tax_code: str | None = None
    tax_type: str | None = None
    tax_region: str | None = None
    tax_rate: float | None = None
    tax_exempt: bool | None = None
    tax_details: list[TaxDetail] = Field(default_factory=list)
    start_date: datetime | None = None
    end_date: datetime | None = None
    created_at: datetime | None = None


def build_adjustment_element(adjustment: Adjustment) -> etree._Element:
    root = etree.Element("adjustment")
    append_text(root, "description", adjustment.description)
    append_text(root, "accounting_code", adjustment.accounting_code)
    append_text(root, "unit_amount_in_cents", adjustment.unit_amount_in_cents, omit_empty=False)
    append_text(root, "quantity", adjustment.quantity)
    append_text(root, "currency", adjustment.currency, omit_empty=False)
    append_text(root, "tax_code", adjustment.tax_code)
    append_null_bool(root, "tax_exempt", adjustment.tax_exempt)
    return root


def encode_adjustment(adjustment: Adjustment) -> bytes:
    """Serialize the fields needed to create an adjustment."""
    return to_bytes(build_adjustment_element(adjustment))


def decode_tax_detail(element: etree._Element) -> TaxDetail:
    return TaxDetail(
        name=child_text(element, "name"),
        type=child_text(element, "type"),
        tax_rate=child_float(element, "tax_rate"),
        tax_in_cents=child_int(element, "tax_in_cents"),
    )


def decode_adjustment(element: etree._Element) -> Adjustment:
    """Build an Adjustment from an ``<adjustment>`` element."""
    return Adjustment(
        account_code=decode_href_string(element.find("account")),
        invoice_number=decode_href_int(element.find("invoice")),
        uuid=child_text(element, "uuid"),
        state=child_text(element, "state"),
        description=child_text(element, "description"),
        accounting_code=child_text(element, "accounting_code"),
        product_code=child_text(element, "product_code"),
        origin=child_text(element, "origin"),
        unit_amount_in_cents=child_int(element, "unit_amount_in_cents") or 0,
        quantity=child_int(element, "quantity"),
        original_adjustment_uuid=child_text(element, "original_adjustment_uuid"),
        discount_in_cents=child_int(element, "discount_in_cents"),
        tax_in_cents=child_int(element, "tax_in_cents"),
        total_in_cents=child_int(element, "total_in_cents"),
        currency=child_text(element, "currency") or "",
        taxable=decode_null_bool(element.find("taxable")),
        tax_code=child_text(element, "tax_code"),
        tax_type=child_text(element, "tax_type"),
        tax_region=child_text(element, "tax_region"),
        tax_rate=child_float(element, "tax_rate"),
        tax_exempt=decode_null_bool(element.find("tax_exempt")),
        tax_details=[decode_tax_detail(d) for d in element.iterfind("tax_details/tax_detail")],
        start_date=decode_null_time(element.find("start_date")),
        end_date=decode_null_time(element.find("end_date")),
        created_at=decode_null_time(element.find("created_at")),
    )


def decode_adjustments(element: etree._Element) -> list[Adjustment]:
    """Decode an ``<adjustments>`` collection, preserving server order."""
    return [decode_adjustment(a) for a in element.iterfind("adjustment")]
