from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any, Literal
from datetime import datetime
from decimal import Decimal

DocumentProcessingStatus = Literal["processing", "completed", "error"]


class DocumentCreate(BaseModel):
    """Schema for creating a document record (the upload path fills this in)"""
    file_name: str = Field(..., min_length=1)
    file_type: str = Field(..., min_length=1)
    file_size: Optional[int] = Field(None, ge=0)
    file_path: Optional[str] = None
    document_type: str = Field(..., min_length=1)  # invoice, receipt, contract, delivery-note
    processing_status: DocumentProcessingStatus = "processing"
    extracted_text: Optional[str] = None
    extracted_data: Optional[Dict[str, Any]] = None
    confidence: Optional[Decimal] = Field(None, ge=0, le=100)
    delivery_id: Optional[int] = None


class DocumentUpdate(BaseModel):
    file_name: Optional[str] = Field(None, min_length=1)
    file_type: Optional[str] = Field(None, min_length=1)
    file_size: Optional[int] = Field(None, ge=0)
    file_path: Optional[str] = None
    document_type: Optional[str] = Field(None, min_length=1)
    processing_status: Optional[DocumentProcessingStatus] = None
    extracted_text: Optional[str] = None
    extracted_data: Optional[Dict[str, Any]] = None
    confidence: Optional[Decimal] = Field(None, ge=0, le=100)
    delivery_id: Optional[int] = None


class DocumentResponse(BaseModel):
    """Full document response schema"""
    id: int
    file_name: str
    file_type: str
    file_size: Optional[int] = None
    file_path: Optional[str] = None
    document_type: str
    processing_status: Optional[str] = None
    extracted_text: Optional[str] = None
    extracted_data: Optional[Dict[str, Any]] = None
    confidence: Optional[Decimal] = None
    delivery_id: Optional[int] = None
    uploaded_at: datetime
    processed_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
