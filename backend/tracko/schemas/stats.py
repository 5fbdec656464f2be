from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal


class ProcessingStatsUpdate(BaseModel):
    messages_processed: Optional[int] = Field(None, ge=0)
    documents_processed: Optional[int] = Field(None, ge=0)
    on_time_delivery_rate: Optional[Decimal] = Field(None, ge=0, le=100)
    active_suppliers: Optional[int] = Field(None, ge=0)
    time_saved_hours: Optional[Decimal] = Field(None, ge=0)


class ProcessingStatsResponse(BaseModel):
    messages_processed: int
    documents_processed: int
    on_time_delivery_rate: Decimal
    active_suppliers: int
    time_saved_hours: Decimal
    last_updated: datetime

    model_config = ConfigDict(from_attributes=True)
