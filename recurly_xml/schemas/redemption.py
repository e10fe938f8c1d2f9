"""Coupon redemption schemas."""

from datetime import datetime

from lxml import etree
from pydantic import BaseModel

from recurly_xml.codec.elements import append_text, child_int, child_text, to_bytes
from recurly_xml.codec.href import decode_href_string
from recurly_xml.codec.nullable import decode_null_bool, decode_null_time


class Redemption(BaseModel):
    uuid: str | None = None
    # Resolved from <coupon href> and <account href>
    coupon_code: str | None = None
    account_code: str | None = None
    single_use: bool | None = None
    total_discounted_in_cents: int | None = None
    currency: str | None = None
    state: str | None = None
    created_at: datetime | None = None


def encode_redeem_request(account_code: str, currency: str) -> bytes:
    """Body for ``POST coupons/{code}/redeem``."""
    root = etree.Element("redemption")
    append_text(root, "account_code", account_code, omit_empty=False)
    append_text(root, "currency", currency, omit_empty=False)
    return to_bytes(root)


def decode_redemption(element: etree._Element) -> Redemption:
    return Redemption(
        uuid=child_text(element, "uuid"),
        coupon_code=decode_href_string(element.find("coupon")),
        account_code=decode_href_string(element.find("account")),
        single_use=decode_null_bool(element.find("single_use")),
        total_discounted_in_cents=child_int(element, "total_discounted_in_cents"),
        currency=child_text(element, "currency"),
        state=child_text(element, "state"),
        created_at=decode_null_time(element.find("created_at")),
    )
