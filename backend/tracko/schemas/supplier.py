from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal


class SupplierCreate(BaseModel):
    name: str = Field(..., min_length=1)
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    rating: Optional[Decimal] = Field(Decimal("0"), ge=0, le=5)
    on_time_delivery_rate: Optional[Decimal] = Field(Decimal("0"), ge=0, le=100)
    communication_quality: Optional[Decimal] = Field(Decimal("0"), ge=0, le=100)
    document_accuracy: Optional[Decimal] = Field(Decimal("0"), ge=0, le=100)
    cost_competitiveness: Optional[Decimal] = Field(Decimal("0"), ge=0, le=100)
    is_active: bool = True


class SupplierUpdate(BaseModel):
    """Partial update; omitted fields are left untouched, explicit nulls clear"""
    name: Optional[str] = Field(None, min_length=1)
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    rating: Optional[Decimal] = Field(None, ge=0, le=5)
    on_time_delivery_rate: Optional[Decimal] = Field(None, ge=0, le=100)
    communication_quality: Optional[Decimal] = Field(None, ge=0, le=100)
    document_accuracy: Optional[Decimal] = Field(None, ge=0, le=100)
    cost_competitiveness: Optional[Decimal] = Field(None, ge=0, le=100)
    is_active: Optional[bool] = None


class SupplierResponse(BaseModel):
    id: int
    name: str
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    rating: Optional[Decimal] = None
    on_time_delivery_rate: Optional[Decimal] = None
    communication_quality: Optional[Decimal] = None
    document_accuracy: Optional[Decimal] = None
    cost_competitiveness: Optional[Decimal] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
