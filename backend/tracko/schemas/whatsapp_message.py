from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any, Literal
from datetime import datetime
from decimal import Decimal

MessageProcessingStatus = Literal["processing", "completed", "review", "error"]


class WhatsappMessageCreate(BaseModel):
    sender_id: str = Field(..., min_length=1)
    sender_name: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    timestamp: Optional[datetime] = None  # Defaults to the time of creation
    processing_status: MessageProcessingStatus = "processing"
    extracted_data: Optional[Dict[str, Any]] = None
    confidence: Optional[Decimal] = Field(None, ge=0, le=100)
    delivery_id: Optional[int] = None


class WhatsappMessageUpdate(BaseModel):
    sender_id: Optional[str] = Field(None, min_length=1)
    sender_name: Optional[str] = Field(None, min_length=1)
    message: Optional[str] = Field(None, min_length=1)
    processing_status: Optional[MessageProcessingStatus] = None
    extracted_data: Optional[Dict[str, Any]] = None
    confidence: Optional[Decimal] = Field(None, ge=0, le=100)
    delivery_id: Optional[int] = None


class WhatsappMessageResponse(BaseModel):
    id: int
    sender_id: str
    sender_name: str
    message: str
    timestamp: datetime
    processing_status: Optional[str] = None
    extracted_data: Optional[Dict[str, Any]] = None
    confidence: Optional[Decimal] = None
    delivery_id: Optional[int] = None
    processed_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class WebhookSender(BaseModel):
    id: str
    name: str


class WebhookMessage(BaseModel):
    text: str


class WhatsappWebhookPayload(BaseModel):
    """Shape of the (mock) WhatsApp webhook body"""
    sender: WebhookSender
    message: WebhookMessage


class WhatsappWebhookAck(BaseModel):
    success: bool
    message_id: int
    record: WhatsappMessageResponse
