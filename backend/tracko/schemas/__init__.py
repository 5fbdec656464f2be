from tracko.schemas.supplier import SupplierCreate, SupplierUpdate, SupplierResponse
from tracko.schemas.delivery import DeliveryCreate, DeliveryUpdate, DeliveryResponse
from tracko.schemas.document import DocumentCreate, DocumentUpdate, DocumentResponse
from tracko.schemas.whatsapp_message import (
    WhatsappMessageCreate,
    WhatsappMessageUpdate,
    WhatsappMessageResponse,
    WhatsappWebhookPayload,
    WhatsappWebhookAck,
)
from tracko.schemas.stats import ProcessingStatsUpdate, ProcessingStatsResponse

__all__ = [
    "SupplierCreate",
    "SupplierUpdate",
    "SupplierResponse",
    "DeliveryCreate",
    "DeliveryUpdate",
    "DeliveryResponse",
    "DocumentCreate",
    "DocumentUpdate",
    "DocumentResponse",
    "WhatsappMessageCreate",
    "WhatsappMessageUpdate",
    "WhatsappMessageResponse",
    "WhatsappWebhookPayload",
    "WhatsappWebhookAck",
    "ProcessingStatsUpdate",
    "ProcessingStatsResponse",
]
