from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional
from tracko.dependencies import get_store, get_ingestion_service
from tracko.schemas.whatsapp_message import (
    WhatsappMessageCreate,
    WhatsappMessageUpdate,
    WhatsappMessageResponse,
    WhatsappWebhookPayload,
    WhatsappWebhookAck,
)
from tracko.services.entity_store import EntityStore
from tracko.services.ingestion_service import IngestionService

router = APIRouter(prefix="/api", tags=["whatsapp"])


@router.get("/whatsapp-messages", response_model=List[WhatsappMessageResponse])
def list_messages(
    processing_status: Optional[str] = Query(None, description="Filter by processing status"),
    store: EntityStore = Depends(get_store)
):
    return store.whatsapp_messages.list(processing_status=processing_status)


@router.get("/whatsapp-messages/{message_id}", response_model=WhatsappMessageResponse)
def get_message(message_id: int, store: EntityStore = Depends(get_store)):
    message = store.whatsapp_messages.get(message_id)
    if not message:
        raise HTTPException(status_code=404, detail="Message not found")
    return message


@router.post("/whatsapp-messages", response_model=WhatsappMessageResponse, status_code=201)
def create_message(
    message_data: WhatsappMessageCreate,
    ingestion: IngestionService = Depends(get_ingestion_service)
):
    """Receive a message - returned with processing_status 'processing' until parsing finishes"""
    return ingestion.receive_message(
        message_data.sender_id,
        message_data.sender_name,
        message_data.message,
        delivery_id=message_data.delivery_id,
        timestamp=message_data.timestamp,
    )


@router.put("/whatsapp-messages/{message_id}", response_model=WhatsappMessageResponse)
def update_message(message_id: int, message_data: WhatsappMessageUpdate, store: EntityStore = Depends(get_store)):
    message = store.whatsapp_messages.update(message_id, message_data.model_dump(exclude_unset=True))
    if not message:
        raise HTTPException(status_code=404, detail="Message not found")
    return message


@router.post("/webhook/whatsapp", response_model=WhatsappWebhookAck)
def whatsapp_webhook(
    payload: WhatsappWebhookPayload,
    ingestion: IngestionService = Depends(get_ingestion_service)
):
    """Mock WhatsApp webhook"""
    record = ingestion.receive_message(payload.sender.id, payload.sender.name, payload.message.text)
    return WhatsappWebhookAck(success=True, message_id=record.id, record=record)
