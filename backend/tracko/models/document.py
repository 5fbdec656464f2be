from sqlalchemy import Column, Integer, String, Numeric, JSON, Text
from tracko.database import Base
from tracko.models._base import utcnow, UTCDateTime


class Document(Base):
    """
    Uploaded delivery paperwork (invoice, receipt, contract, delivery-note).
    Text and fields are filled in by the simulated OCR job.
    """
    __tablename__ = "documents"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    file_name = Column(String, nullable=False)
    file_type = Column(String, nullable=False)  # MIME type
    file_size = Column(Integer, nullable=True)
    file_path = Column(String, nullable=True)
    document_type = Column(String, nullable=False, index=True)
    processing_status = Column(String, default="processing", index=True)  # processing, completed, error

    extracted_text = Column(Text, nullable=True)
    extracted_data = Column(JSON, nullable=True)
    confidence = Column(Numeric(5, 2), nullable=True)  # 0-100

    delivery_id = Column(Integer, nullable=True)  # Weak reference, no FK

    # Timestamps
    uploaded_at = Column(UTCDateTime, default=utcnow)
    processed_at = Column(UTCDateTime, nullable=True)
