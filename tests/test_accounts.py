"""Tests for Account schemas and AccountService."""

from datetime import UTC, datetime

from lxml import etree

from recurly_xml.schemas.account import Account, Address, decode_account, encode_account

ACCOUNT_XML = """<?xml version="1.0" encoding="UTF-8"?>
<account href="https://your-subdomain.recurly.com/v2/accounts/1">
  <adjustments href="https://your-subdomain.recurly.com/v2/accounts/1/adjustments"/>
  <invoices href="https://your-subdomain.recurly.com/v2/accounts/1/invoices"/>
  <account_code>1</account_code>
  <state>active</state>
  <username nil="nil"></username>
  <email>verena@example.com</email>
  <first_name>Verena</first_name>
  <last_name>Example</last_name>
  <company_name></company_name>
  <vat_number nil="nil"></vat_number>
  <tax_exempt type="boolean">false</tax_exempt>
  <address>
    <address1>123 Main St.</address1>
    <address2 nil="nil"></address2>
    <city>San Francisco</city>
    <state>CA</state>
    <zip>94105</zip>
    <country>US</country>
    <phone nil="nil"></phone>
  </address>
  <accept_language nil="nil"></accept_language>
  <hosted_login_token>a92468579e9c4231a6c0031c4716c01d</hosted_login_token>
  <created_at type="datetime">2011-10-25T12:00:00Z</created_at>
  <closed_at nil="nil"></closed_at>
</account>
"""


class TestAccountSchema:
    """Tests for reading and writing accounts."""

    def test_decode(self):
        """Test a full account payload."""
        account = decode_account(etree.fromstring(ACCOUNT_XML.encode()))

        assert account.code == "1"
        assert account.state == "active"
        assert account.username is None
        assert account.email == "verena@example.com"
        assert account.first_name == "Verena"
        assert account.last_name == "Example"
        assert account.company_name is None
        assert account.tax_exempt is False
        assert account.hosted_login_token == "a92468579e9c4231a6c0031c4716c01d"
        assert account.address == Address(
            address1="123 Main St.",
            city="San Francisco",
            state="CA",
            zip="94105",
            country="US",
        )
        assert account.created_at == datetime(2011, 10, 25, 12, 0, 0, tzinfo=UTC)
        assert account.closed_at is None

    def test_encode_omits_server_fields(self):
        """Test state, login token and timestamps are never written."""
        account = decode_account(etree.fromstring(ACCOUNT_XML.encode()))
        root = etree.fromstring(encode_account(account))

        assert root.findtext("account_code") == "1"
        assert root.findtext("email") == "verena@example.com"
        assert root.findtext("tax_exempt") == "false"
        assert root.findtext("address/city") == "San Francisco"
        assert root.find("address/address2") is None
        for tag in ("state", "hosted_login_token", "created_at", "closed_at"):
            assert root.find(tag) is None, tag

    def test_encode_without_address(self):
        """Test no address element is written when the address is unset."""
        root = etree.fromstring(encode_account(Account(code="abc")))
        assert root.find("address") is None
        assert [child.tag for child in root] == ["account_code"]


class TestAccountService:
    """Tests for AccountService requests."""

    def test_list(self, client, api):
        """Test listing accounts."""
        api.respond(
            200,
            "<accounts><account><account_code>1</account_code></account>"
            "<account><account_code>2</account_code></account></accounts>",
        )

        accounts = client.accounts.list({"state": "active"})

        assert [a.code for a in accounts] == ["1", "2"]
        assert api.last_request.url.path == "/v2/accounts"
        assert api.last_request.url.params["state"] == "active"

    def test_get(self, client, api):
        """Test fetching one account."""
        api.respond(200, ACCOUNT_XML)
        account = client.accounts.get("1")
        assert account.email == "verena@example.com"
        assert api.last_request.url.path == "/v2/accounts/1"

    def test_create(self, client, api):
        """Test creating an account."""
        api.respond(201, ACCOUNT_XML)

        created = client.accounts.create(
            Account(code="1", email="verena@example.com", first_name="Verena")
        )

        request = api.last_request
        assert request.method == "POST"
        assert request.url.path == "/v2/accounts"
        assert etree.fromstring(request.content).findtext("account_code") == "1"
        assert created.state == "active"

    def test_update(self, client, api):
        """Test updating an account uses PUT."""
        api.respond(200, ACCOUNT_XML)

        client.accounts.update("1", Account(last_name="Example"))

        request = api.last_request
        assert request.method == "PUT"
        assert request.url.path == "/v2/accounts/1"
        assert etree.fromstring(request.content).findtext("last_name") == "Example"

    def test_close(self, client, api):
        """Test closing an account issues a DELETE."""
        api.respond(204)
        assert client.accounts.close("1") is None
        assert api.last_request.method == "DELETE"
        assert api.last_request.url.path == "/v2/accounts/1"

    def test_reopen(self, client, api):
        """Test reopening a closed account."""
        api.respond(200, ACCOUNT_XML)
        account = client.accounts.reopen("1")
        assert account.state == "active"
        assert api.last_request.method == "PUT"
        assert api.last_request.url.path == "/v2/accounts/1/reopen"
