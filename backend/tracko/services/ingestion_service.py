"""
Ingestion Service - the three intake channels.

- Manual entry: a delivery typed into the dashboard form.
- WhatsApp: a supplier message, parsed by keyword after a short delay.
- Document upload: a stored file, "OCR'd" after a short delay.

Message and document records are returned right away with processing_status
"processing". The completion job submitted to the worker later moves them to
"completed", or to "error" if anything in the job fails.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from tracko.config import Settings
from tracko.schemas import DeliveryResponse, DocumentResponse, WhatsappMessageResponse
from tracko.services.entity_store import EntityStore, InvalidEntityError
from tracko.services.message_parser import parse_delivery_message
from tracko.services.processing_worker import ProcessingWorker
from tracko.services.storage_service import StorageService
from tracko.services.supplier_matcher import SupplierMatcher

logger = logging.getLogger(__name__)

DOCUMENT_CONFIDENCE = 95
MESSAGE_CONFIDENCE = 90


class IngestionService:

    def __init__(
        self,
        store: EntityStore,
        worker: ProcessingWorker,
        storage: StorageService,
        settings: Settings,
        matcher: Optional[SupplierMatcher] = None,
    ):
        self.store = store
        self.worker = worker
        self.storage = storage
        self.settings = settings
        self.matcher = matcher or SupplierMatcher(settings.supplier_match_threshold)

    # ------------------------------
    # Manual entry
    # ------------------------------

    def record_manual_delivery(self, fields: Mapping[str, Any]) -> DeliveryResponse:
        """Create a delivery from the manual entry form"""
        data = dict(fields)
        data["source"] = "manual"
        data["processing_status"] = "completed"
        delivery = self.store.deliveries.create(data)
        logger.info(f"Manual delivery {delivery.id} recorded for {delivery.supplier_name}")
        return delivery

    # ------------------------------
    # WhatsApp messages
    # ------------------------------

    def receive_message(
        self,
        sender_id: str,
        sender_name: str,
        message: str,
        delivery_id: Optional[int] = None,
        timestamp: Optional[datetime] = None,
    ) -> WhatsappMessageResponse:
        record = self.store.whatsapp_messages.create({
            "sender_id": sender_id,
            "sender_name": sender_name,
            "message": message,
            "timestamp": timestamp,
            "processing_status": "processing",
            "delivery_id": delivery_id,
        })
        self.worker.submit(
            f"message-parse:{record.id}",
            self.complete_message,
            record.id,
            delay=self.settings.message_processing_delay_seconds,
        )
        logger.info(f"WhatsApp message {record.id} from {sender_name} queued for parsing")
        return record

    def complete_message(self, message_id: int) -> None:
        """Simulated message parsing. Marks the message error on any failure."""
        try:
            record = self.store.whatsapp_messages.get(message_id)
            if record is None:
                logger.warning(f"WhatsApp message {message_id} disappeared before parsing")
                return

            extracted = parse_delivery_message(record.message, record.sender_name)
            extracted["supplier_match"] = self.matcher.match(record.sender_name, self.store.suppliers.list())

            self.store.whatsapp_messages.update(message_id, {
                "processing_status": "completed",
                "extracted_data": extracted,
                "confidence": MESSAGE_CONFIDENCE,
            })
            logger.info(f"WhatsApp message {message_id} parsed: {extracted['material']}, {extracted['quantity']}, {extracted['status']}")
        except Exception as e:
            logger.error(f"Parsing failed for WhatsApp message {message_id}: {str(e)}", exc_info=True)
            self.store.whatsapp_messages.update(message_id, {"processing_status": "error"})

    # ------------------------------
    # Document upload
    # ------------------------------

    def upload_document(
        self,
        file_name: str,
        content: bytes,
        content_type: Optional[str],
        document_type: str = "invoice",
        delivery_id: Optional[int] = None,
    ) -> DocumentResponse:
        """
        Store an uploaded file and create its Document record.

        Raises:
            InvalidEntityError: empty file, file over the size limit, or bad fields
        """
        if not content:
            raise InvalidEntityError("file", "No file uploaded")
        if len(content) > self.settings.max_upload_size_bytes:
            raise InvalidEntityError(
                "file",
                f"File exceeds the {self.settings.max_upload_size_bytes} byte limit",
            )

        storage_path = self.storage.upload_file(content, file_name)
        logger.info(f"Document uploaded to storage: {storage_path}")

        try:
            document = self.store.documents.create({
                "file_name": file_name,
                "file_type": content_type or "application/octet-stream",
                "file_size": len(content),
                "file_path": storage_path,
                "document_type": document_type,
                "processing_status": "processing",
                "delivery_id": delivery_id,
            })
        except InvalidEntityError:
            self.storage.delete_file(storage_path)
            raise

        self.worker.submit(
            f"document-ocr:{document.id}",
            self.complete_document,
            document.id,
            delay=self.settings.document_processing_delay_seconds,
        )
        logger.info(f"Document created with ID {document.id}, status: processing")
        return document

    def complete_document(self, document_id: int) -> None:
        """Simulated OCR. Marks the document error on any failure."""
        try:
            document = self.store.documents.get(document_id)
            if document is None:
                logger.warning(f"Document {document_id} disappeared before OCR")
                return

            content = self.storage.download_file(document.file_path)
            extracted_data: Dict[str, Any] = {
                "supplier": "Mock Supplier",
                "amount": "50000.00",
                "date": datetime.now(timezone.utc).isoformat(),
                "items": ["Raw materials", "Processing fee"],
                "document_type": document.document_type,
                "bytes_read": len(content),
            }
            extracted_data["supplier_match"] = self.matcher.match(extracted_data["supplier"], self.store.suppliers.list())

            self.store.documents.update(document_id, {
                "processing_status": "completed",
                "extracted_text": f"Mock extracted text from OCR ({document.file_name})",
                "extracted_data": extracted_data,
                "confidence": DOCUMENT_CONFIDENCE,
            })
            logger.info(f"Document {document_id} OCR processing completed")
        except Exception as e:
            logger.error(f"OCR processing failed for document {document_id}: {str(e)}", exc_info=True)
            self.store.documents.update(document_id, {"processing_status": "error"})
