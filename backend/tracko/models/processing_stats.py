from sqlalchemy import Column, Integer, Numeric
from tracko.database import Base
from tracko.models._base import utcnow, UTCDateTime


class ProcessingStats(Base):
    """Dashboard counters. A single row; written explicitly, never recomputed."""
    __tablename__ = "processing_stats"

    id = Column(Integer, primary_key=True)
    messages_processed = Column(Integer, default=0)
    documents_processed = Column(Integer, default=0)
    on_time_delivery_rate = Column(Numeric(5, 2), default=0)
    active_suppliers = Column(Integer, default=0)
    time_saved_hours = Column(Numeric(7, 2), default=0)
    last_updated = Column(UTCDateTime, default=utcnow)
