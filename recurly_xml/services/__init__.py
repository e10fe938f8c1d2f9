from recurly_xml.services.account_service import AccountService
from recurly_xml.services.adjustment_service import AdjustmentService
from recurly_xml.services.base import ResourceService, build_path
from recurly_xml.services.invoice_service import InvoiceService
from recurly_xml.services.redemption_service import RedemptionService
from recurly_xml.services.webhook_service import WEBHOOK_NOTIFICATION_TYPES, parse_webhook

__all__ = [
    "WEBHOOK_NOTIFICATION_TYPES",
    "AccountService",
    "AdjustmentService",
    "InvoiceService",
    "RedemptionService",
    "ResourceService",
    "build_path",
    "parse_webhook",
]
