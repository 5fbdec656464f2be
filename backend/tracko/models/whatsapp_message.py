from sqlalchemy import Column, Integer, String, Numeric, JSON, Text
from tracko.database import Base
from tracko.models._base import utcnow, UTCDateTime


class WhatsappMessage(Base):
    __tablename__ = "whatsapp_messages"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    sender_id = Column(String, nullable=False, index=True)
    sender_name = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    timestamp = Column(UTCDateTime, default=utcnow)
    processing_status = Column(String, default="processing", index=True)  # processing, completed, review, error
    extracted_data = Column(JSON, nullable=True)
    confidence = Column(Numeric(5, 2), nullable=True)  # 0-100
    delivery_id = Column(Integer, nullable=True)  # Weak reference, no FK
    processed_at = Column(UTCDateTime, nullable=True)
