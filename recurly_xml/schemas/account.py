"""Account and Address schemas."""

from datetime import datetime

from lxml import etree
from pydantic import BaseModel

from recurly_xml.codec.elements import append_text, child_text, to_bytes
from recurly_xml.codec.nullable import append_null_bool, decode_null_bool, decode_null_time

ADDRESS_FIELDS = ("address1", "address2", "city", "state", "zip", "country", "phone")


class Address(BaseModel):
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    phone: str | None = None


class Account(BaseModel):
    code: str | None = None
    state: str | None = None
    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    company_name: str | None = None
    vat_number: str | None = None
    tax_exempt: bool | None = None
    accept_language: str | None = None
    hosted_login_token: str | None = None
    address: Address | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None


def build_account_element(account: Account) -> etree._Element:
    root = etree.Element("account")
    append_text(root, "account_code", account.code)
    append_text(root, "username", account.username)
    append_text(root, "email", account.email)
    append_text(root, "first_name", account.first_name)
    append_text(root, "last_name", account.last_name)
    append_text(root, "company_name", account.company_name)
    append_text(root, "vat_number", account.vat_number)
    append_null_bool(root, "tax_exempt", account.tax_exempt)
    append_text(root, "accept_language", account.accept_language)
    if account.address is not None:
        address = etree.SubElement(root, "address")
        for field in ADDRESS_FIELDS:
            append_text(address, field, getattr(account.address, field))
    return root


def encode_account(account: Account) -> bytes:
    """Serialize the caller-controlled account fields for create/update."""
    return to_bytes(build_account_element(account))


def decode_address(element: etree._Element | None) -> Address | None:
    if element is None:
        return None
    return Address(**{field: child_text(element, field) for field in ADDRESS_FIELDS})


def decode_account(element: etree._Element) -> Account:
    return Account(
        code=child_text(element, "account_code"),
        state=child_text(element, "state"),
        username=child_text(element, "username"),
        email=child_text(element, "email"),
        first_name=child_text(element, "first_name"),
        last_name=child_text(element, "last_name"),
        company_name=child_text(element, "company_name"),
        vat_number=child_text(element, "vat_number"),
        tax_exempt=decode_null_bool(element.find("tax_exempt")),
        accept_language=child_text(element, "accept_language"),
        hosted_login_token=child_text(element, "hosted_login_token"),
        address=decode_address(element.find("address")),
        created_at=decode_null_time(element.find("created_at")),
        updated_at=decode_null_time(element.find("updated_at")),
        closed_at=decode_null_time(element.find("closed_at")),
    )


def decode_accounts(element: etree._Element) -> list[Account]:
    return [decode_account(a) for a in element.iterfind("account")]
