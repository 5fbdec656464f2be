from sqlalchemy import Column, Integer, String, Numeric, Boolean
from tracko.database import Base
from tracko.models._base import utcnow, UTCDateTime


class Supplier(Base):
    __tablename__ = "suppliers"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    contact_person = Column(String, nullable=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)

    # Performance scores are entered by users, never derived from deliveries
    rating = Column(Numeric(3, 2), default=0)  # 0-5
    on_time_delivery_rate = Column(Numeric(5, 2), default=0)  # 0-100
    communication_quality = Column(Numeric(5, 2), default=0)
    document_accuracy = Column(Numeric(5, 2), default=0)
    cost_competitiveness = Column(Numeric(5, 2), default=0)

    is_active = Column(Boolean, default=True)
    created_at = Column(UTCDateTime, default=utcnow)
    updated_at = Column(UTCDateTime, default=utcnow)
