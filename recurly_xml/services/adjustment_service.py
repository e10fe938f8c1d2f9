"""Adjustment (charges and credits) service."""

from __future__ import annotations

import logging
from typing import Any

from recurly_xml.schemas.adjustment import (
    Adjustment,
    decode_adjustment,
    decode_adjustments,
    encode_adjustment,
)
from recurly_xml.services.base import ResourceService, build_path

logger = logging.getLogger(__name__)


class AdjustmentService(ResourceService):
    """Charges and credits on an account."""

    def list(self, account_code: str, params: dict[str, Any] | None = None) -> list[Adjustment]:
        """List all charges and credits issued for an account, in server order."""
        root = self.client.request(
            "GET", build_path("accounts", account_code, "adjustments"), params
        )
        if root is None:
            return []
        return decode_adjustments(self.expect_root(root, "adjustments"))

    def get(self, uuid: str) -> Adjustment:
        root = self.client.request("GET", build_path("adjustments", uuid))
        return decode_adjustment(self.expect_root(root, "adjustment"))

    def create(self, account_code: str, adjustment: Adjustment) -> Adjustment:
        """Create a one-time charge or credit on an account.

        Charges are not invoiced immediately; they are picked up by the next
        renewal or an explicit invoice.

        Returns:
            The server's version of the adjustment, with uuid, state and
            totals populated.

        Raises:
            ValidationError: If the API rejects one or more fields.
        """
        root = self.client.request(
            "POST",
            build_path("accounts", account_code, "adjustments"),
            body=encode_adjustment(adjustment),
        )
        created = decode_adjustment(self.expect_root(root, "adjustment"))
        logger.info("Created adjustment %s on account %s", created.uuid, account_code)
        return created

    def delete(self, uuid: str) -> None:
        """Remove a non-invoiced adjustment from an account."""
        self.client.request("DELETE", build_path("adjustments", uuid))
        logger.info("Deleted adjustment %s", uuid)
