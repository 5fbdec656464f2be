from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any, Literal
from datetime import datetime
from decimal import Decimal

DeliveryStatus = Literal["pending", "in-transit", "delivered", "delayed", "cancelled"]
DeliverySource = Literal["manual", "whatsapp", "email", "pdf"]
DeliveryProcessingStatus = Literal["processing", "completed", "review", "error"]


class DeliveryCreate(BaseModel):
    supplier_id: Optional[int] = None
    supplier_name: str = Field(..., min_length=1)
    material_type: str = Field(..., min_length=1)
    quantity: str = Field(..., min_length=1)
    unit: str = Field(..., min_length=1)
    expected_date: Optional[datetime] = None
    actual_date: Optional[datetime] = None
    status: DeliveryStatus = "pending"
    invoice_amount: Optional[Decimal] = Field(None, ge=0)
    currency: str = "INR"
    delivery_location: Optional[str] = None
    notes: Optional[str] = None
    source: DeliverySource = "manual"
    processing_status: DeliveryProcessingStatus = "completed"
    extracted_data: Optional[Dict[str, Any]] = None


class DeliveryUpdate(BaseModel):
    """Partial update; omitted fields are left untouched, explicit nulls clear"""
    supplier_id: Optional[int] = None
    supplier_name: Optional[str] = Field(None, min_length=1)
    material_type: Optional[str] = Field(None, min_length=1)
    quantity: Optional[str] = Field(None, min_length=1)
    unit: Optional[str] = Field(None, min_length=1)
    expected_date: Optional[datetime] = None
    actual_date: Optional[datetime] = None
    status: Optional[DeliveryStatus] = None
    invoice_amount: Optional[Decimal] = Field(None, ge=0)
    currency: Optional[str] = None
    delivery_location: Optional[str] = None
    notes: Optional[str] = None
    source: Optional[DeliverySource] = None
    processing_status: Optional[DeliveryProcessingStatus] = None
    extracted_data: Optional[Dict[str, Any]] = None


class DeliveryResponse(BaseModel):
    id: int
    supplier_id: Optional[int] = None
    supplier_name: str
    material_type: str
    quantity: str
    unit: str
    expected_date: Optional[datetime] = None
    actual_date: Optional[datetime] = None
    status: str
    invoice_amount: Optional[Decimal] = None
    currency: Optional[str] = None
    delivery_location: Optional[str] = None
    notes: Optional[str] = None
    source: str
    processing_status: Optional[str] = None
    extracted_data: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
