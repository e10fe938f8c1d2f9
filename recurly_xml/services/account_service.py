"""Account service."""

from __future__ import annotations

import logging
from typing import Any

from recurly_xml.schemas.account import Account, decode_account, decode_accounts, encode_account
from recurly_xml.services.base import ResourceService, build_path

logger = logging.getLogger(__name__)


class AccountService(ResourceService):
    def list(self, params: dict[str, Any] | None = None) -> list[Account]:
        """List accounts, in server order.

        Args:
            params: Query parameters passed through as-is (e.g. ``state``,
                ``per_page``).
        """
        root = self.client.request("GET", "accounts", params)
        if root is None:
            return []
        return decode_accounts(self.expect_root(root, "accounts"))

    def get(self, account_code: str) -> Account:
        root = self.client.request("GET", build_path("accounts", account_code))
        return decode_account(self.expect_root(root, "account"))

    def create(self, account: Account) -> Account:
        root = self.client.request("POST", "accounts", body=encode_account(account))
        created = decode_account(self.expect_root(root, "account"))
        logger.info("Created account %s", created.code)
        return created

    def update(self, account_code: str, account: Account) -> Account:
        root = self.client.request(
            "PUT", build_path("accounts", account_code), body=encode_account(account)
        )
        return decode_account(self.expect_root(root, "account"))

    def close(self, account_code: str) -> None:
        """Close an account; its subscriptions are cancelled by the API."""
        self.client.request("DELETE", build_path("accounts", account_code))
        logger.info("Closed account %s", account_code)

    def reopen(self, account_code: str) -> Account:
        root = self.client.request("PUT", build_path("accounts", account_code, "reopen"))
        return decode_account(self.expect_root(root, "account"))
