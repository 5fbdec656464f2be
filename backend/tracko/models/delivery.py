from sqlalchemy import Column, Integer, String, Numeric, JSON, Text
from tracko.database import Base
from tracko.models._base import utcnow, UTCDateTime


class Delivery(Base):
    __tablename__ = "deliveries"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    supplier_id = Column(Integer, nullable=True, index=True)  # Weak reference, no FK
    supplier_name = Column(String, nullable=False)
    material_type = Column(String, nullable=False)
    quantity = Column(String, nullable=False)  # Free text, e.g. "500" or "1,000"
    unit = Column(String, nullable=False)
    expected_date = Column(UTCDateTime, nullable=True)
    actual_date = Column(UTCDateTime, nullable=True)
    status = Column(String, nullable=False, default="pending", index=True)  # pending, in-transit, delivered, delayed, cancelled
    invoice_amount = Column(Numeric(12, 2), nullable=True)
    currency = Column(String, default="INR")
    delivery_location = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    source = Column(String, nullable=False, default="manual", index=True)  # manual, whatsapp, email, pdf
    processing_status = Column(String, default="completed")  # processing, completed, review, error

    # Provenance from automated ingestion, no fixed schema
    extracted_data = Column(JSON, nullable=True)

    created_at = Column(UTCDateTime, default=utcnow)
    updated_at = Column(UTCDateTime, default=utcnow)
