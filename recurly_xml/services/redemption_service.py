"""Coupon redemption service."""

import logging

from recurly_xml.schemas.redemption import Redemption, decode_redemption, encode_redeem_request
from recurly_xml.services.base import ResourceService, build_path

logger = logging.getLogger(__name__)


class RedemptionService(ResourceService):
    """Coupons redeemed on accounts and invoices."""

    def get_for_account(self, account_code: str) -> Redemption:
        """Look up the active coupon redemption on an account."""
        root = self.client.request("GET", build_path("accounts", account_code, "redemption"))
        return decode_redemption(self.expect_root(root, "redemption"))

    def get_for_invoice(self, invoice_number: str | int) -> Redemption:
        """Look up the coupon redemption applied to an invoice."""
        root = self.client.request("GET", build_path("invoices", invoice_number, "redemption"))
        return decode_redemption(self.expect_root(root, "redemption"))

    def redeem(self, code: str, account_code: str, currency: str) -> Redemption:
        """Redeem a coupon on an account outside of a subscription signup.

        The coupon applies to the account's next new subscription,
        subscription change or renewal.
        """
        root = self.client.request(
            "POST",
            build_path("coupons", code, "redeem"),
            body=encode_redeem_request(account_code, currency),
        )
        redemption = decode_redemption(self.expect_root(root, "redemption"))
        logger.info("Redeemed coupon %s on account %s", code, account_code)
        return redemption

    def delete(self, account_code: str) -> None:
        """Remove a coupon from an account before it expires.

        The redemption still counts towards the coupon's redemption limit.
        """
        self.client.request("DELETE", build_path("accounts", account_code, "redemption"))
        logger.info("Removed coupon redemption from account %s", account_code)
