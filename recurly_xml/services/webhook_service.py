"""Inbound webhook notification parsing.

A payload is dispatched on its root element name through a fixed table.
Signature and origin checks are the receiving application's concern.
"""

import logging
from collections.abc import Callable
from typing import BinaryIO

from lxml import etree

from recurly_xml.codec.elements import local_name, parse_document
from recurly_xml.core.errors import UnrecognizedWebhook
from recurly_xml.schemas.notification import (
    Notification,
    decode_account_notification,
    decode_invoice_notification,
)

logger = logging.getLogger(__name__)

# Root element name -> decoder for the matching notification variant
WEBHOOK_NOTIFICATION_TYPES: dict[str, Callable[[etree._Element], Notification]] = {
    "new_account_notification": decode_account_notification,
    "canceled_account_notification": decode_account_notification,
    "reactivated_account_notification": decode_account_notification,
    "billing_info_updated_notification": decode_account_notification,
    "new_invoice_notification": decode_invoice_notification,
    "processing_invoice_notification": decode_invoice_notification,
    "closed_invoice_notification": decode_invoice_notification,
    "past_due_invoice_notification": decode_invoice_notification,
}


def parse_webhook(payload: bytes | str | BinaryIO) -> Notification:
    """Decode a webhook payload into its notification variant.

    Args:
        payload: Raw request body, as bytes, text or a binary stream.

    Returns:
        An AccountNotification or InvoiceNotification whose ``type`` is the
        payload's root element name.

    Raises:
        UnrecognizedWebhook: If the root element is not a known notification.
        ParseError: If the payload is malformed.
    """
    if not isinstance(payload, (bytes, str)):
        payload = payload.read()

    root = parse_document(payload)
    name = local_name(root)

    decoder = WEBHOOK_NOTIFICATION_TYPES.get(name)
    if decoder is None:
        logger.warning("Unrecognized webhook notification: %s", name)
        raise UnrecognizedWebhook(name)

    return decoder(root)
