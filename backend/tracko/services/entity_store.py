"""
Entity Store - data access for suppliers, deliveries, documents, WhatsApp
messages and the processing stats row.

One store is built per application (or per test) and handed to the request
handlers and background jobs. Every collection exposes the same list / get /
create / update shape; suppliers and deliveries can also be deleted.
Records go in and come out as pydantic schemas so callers never hold a live
ORM object.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Type, Union

from pydantic import BaseModel, ValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from tracko.config import Settings
from tracko.database import build_engine, build_session_factory
from tracko.models import Supplier, Delivery, Document, WhatsappMessage, ProcessingStats
from tracko.models._base import utcnow
from tracko.schemas import (
    SupplierCreate,
    SupplierUpdate,
    SupplierResponse,
    DeliveryCreate,
    DeliveryUpdate,
    DeliveryResponse,
    DocumentCreate,
    DocumentUpdate,
    DocumentResponse,
    WhatsappMessageCreate,
    WhatsappMessageUpdate,
    WhatsappMessageResponse,
    ProcessingStatsUpdate,
    ProcessingStatsResponse,
)

logger = logging.getLogger(__name__)

Fields = Union[Mapping[str, Any], BaseModel]


class InvalidEntityError(ValueError):
    """Client input rejected on create/update. Carries the offending field."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "InvalidEntityError":
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error.get("loc", ())) or "__root__"
        return cls(field, error.get("msg", "invalid value"))


def _validate(schema: Type[BaseModel], fields: Fields) -> BaseModel:
    if isinstance(fields, BaseModel):
        fields = fields.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(dict(fields))
    except ValidationError as exc:
        raise InvalidEntityError.from_validation_error(exc) from exc


class _Collection:
    """Shared list/get/create/update for one table"""

    model = None
    create_schema: Type[BaseModel] = None
    update_schema: Type[BaseModel] = None
    response_schema: Type[BaseModel] = None
    label = "entity"
    # Columns that may be omitted from an update but never set to null
    non_nullable: Tuple[str, ...] = ()

    def __init__(self, session_factory: sessionmaker, lock: threading.RLock):
        self._session_factory = session_factory
        self._lock = lock

    @contextmanager
    def _session(self) -> Iterator[Session]:
        # One shared SQLite connection backs the default engine, so writes
        # from request threads and worker threads take turns.
        with self._lock, self._session_factory() as db:
            yield db

    def _to_response(self, obj):
        return self.response_schema.model_validate(obj)

    def list(self, **filters) -> List[BaseModel]:
        """All records in insertion order. None-valued filters are ignored."""
        with self._session() as db:
            query = db.query(self.model)
            for column, value in filters.items():
                if value is None:
                    continue
                query = query.filter(getattr(self.model, column) == value)
            return [self._to_response(obj) for obj in query.order_by(self.model.id).all()]

    def get(self, entity_id: int) -> Optional[BaseModel]:
        with self._session() as db:
            obj = db.get(self.model, entity_id)
            return self._to_response(obj) if obj is not None else None

    def create(self, fields: Fields) -> BaseModel:
        payload = _validate(self.create_schema, fields)
        with self._session() as db:
            obj = self.model(**payload.model_dump())
            self._on_create(obj, utcnow())
            db.add(obj)
            db.commit()
            db.refresh(obj)
            logger.info(f"Created {self.label} {obj.id}")
            return self._to_response(obj)

    def update(self, entity_id: int, fields: Fields) -> Optional[BaseModel]:
        changes = _validate(self.update_schema, fields).model_dump(exclude_unset=True)
        for name in self.non_nullable:
            if name in changes and changes[name] is None:
                raise InvalidEntityError(name, "Field required and cannot be null")

        with self._session() as db:
            obj = db.get(self.model, entity_id)
            if obj is None:
                return None
            self._on_update(obj, changes, utcnow())
            for name, value in changes.items():
                setattr(obj, name, value)
            db.commit()
            db.refresh(obj)
            logger.info(f"Updated {self.label} {entity_id}: {sorted(changes)}")
            return self._to_response(obj)

    def _on_create(self, obj, now) -> None:
        pass

    def _on_update(self, obj, changes: Dict[str, Any], now) -> None:
        pass


class _DeletableCollection(_Collection):

    def delete(self, entity_id: int) -> bool:
        """Remove a record. Records referencing it keep their (now dangling) id."""
        with self._session() as db:
            obj = db.get(self.model, entity_id)
            if obj is None:
                return False
            db.delete(obj)
            db.commit()
            logger.info(f"Deleted {self.label} {entity_id}")
            return True


class _TimestampedMixin:
    """created_at / updated_at bookkeeping; every update refreshes updated_at"""

    def _on_create(self, obj, now) -> None:
        obj.created_at = now
        obj.updated_at = now

    def _on_update(self, obj, changes, now) -> None:
        obj.updated_at = now


class _ProcessedMixin:
    """processed_at is stamped only when processing_status moves to completed"""

    def _on_update(self, obj, changes, now) -> None:
        if changes.get("processing_status") == "completed" and obj.processing_status != "completed":
            obj.processed_at = now


class SupplierCollection(_TimestampedMixin, _DeletableCollection):
    model = Supplier
    create_schema = SupplierCreate
    update_schema = SupplierUpdate
    response_schema = SupplierResponse
    label = "supplier"
    non_nullable = ("name", "is_active")


class DeliveryCollection(_TimestampedMixin, _DeletableCollection):
    model = Delivery
    create_schema = DeliveryCreate
    update_schema = DeliveryUpdate
    response_schema = DeliveryResponse
    label = "delivery"
    non_nullable = ("supplier_name", "material_type", "quantity", "unit", "status", "source", "processing_status")


class DocumentCollection(_ProcessedMixin, _Collection):
    model = Document
    create_schema = DocumentCreate
    update_schema = DocumentUpdate
    response_schema = DocumentResponse
    label = "document"
    non_nullable = ("file_name", "file_type", "document_type", "processing_status")

    def _on_create(self, obj, now) -> None:
        obj.uploaded_at = now
        obj.processed_at = None


class WhatsappMessageCollection(_ProcessedMixin, _Collection):
    model = WhatsappMessage
    create_schema = WhatsappMessageCreate
    update_schema = WhatsappMessageUpdate
    response_schema = WhatsappMessageResponse
    label = "whatsapp message"
    non_nullable = ("sender_id", "sender_name", "message", "processing_status")

    def _on_create(self, obj, now) -> None:
        if obj.timestamp is None:
            obj.timestamp = now
        obj.processed_at = None


class ProcessingStatsRecord:
    """The single dashboard stats row. Only changes when written explicitly."""

    ROW_ID = 1

    def __init__(self, session_factory: sessionmaker, lock: threading.RLock):
        self._session_factory = session_factory
        self._lock = lock

    def get(self) -> Optional[ProcessingStatsResponse]:
        with self._lock, self._session_factory() as db:
            stats = db.get(ProcessingStats, self.ROW_ID)
            return ProcessingStatsResponse.model_validate(stats) if stats is not None else None

    def update(self, fields: Fields) -> ProcessingStatsResponse:
        changes = _validate(ProcessingStatsUpdate, fields).model_dump(exclude_unset=True)
        for name, value in changes.items():
            if value is None:
                raise InvalidEntityError(name, "Field cannot be null")

        with self._lock, self._session_factory() as db:
            stats = db.get(ProcessingStats, self.ROW_ID)
            if stats is None:
                stats = ProcessingStats(id=self.ROW_ID)
                db.add(stats)
            for name, value in changes.items():
                setattr(stats, name, value)
            stats.last_updated = utcnow()
            db.commit()
            db.refresh(stats)
            logger.info(f"Processing stats updated: {sorted(changes)}")
            return ProcessingStatsResponse.model_validate(stats)


class EntityStore:
    """All collections behind one handle, sharing a session factory and write lock"""

    def __init__(self, session_factory: sessionmaker, engine: Optional[Engine] = None):
        self._engine = engine
        self._lock = threading.RLock()
        self.suppliers = SupplierCollection(session_factory, self._lock)
        self.deliveries = DeliveryCollection(session_factory, self._lock)
        self.documents = DocumentCollection(session_factory, self._lock)
        self.whatsapp_messages = WhatsappMessageCollection(session_factory, self._lock)
        self.stats = ProcessingStatsRecord(session_factory, self._lock)

    @classmethod
    def from_settings(cls, settings: Settings) -> "EntityStore":
        engine = build_engine(settings.database_url, echo=settings.database_echo)
        logger.info(f"Entity store initialized ({engine.url.get_backend_name()})")
        return cls(build_session_factory(engine), engine=engine)

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
