from tracko.models.supplier import Supplier
from tracko.models.delivery import Delivery
from tracko.models.document import Document
from tracko.models.whatsapp_message import WhatsappMessage
from tracko.models.processing_stats import ProcessingStats

__all__ = ["Supplier", "Delivery", "Document", "WhatsappMessage", "ProcessingStats"]
