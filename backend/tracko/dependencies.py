from fastapi import Request

from tracko.services.entity_store import EntityStore
from tracko.services.ingestion_service import IngestionService
from tracko.services.storage_service import StorageService


def get_store(request: Request) -> EntityStore:
    return request.app.state.store


def get_ingestion_service(request: Request) -> IngestionService:
    return request.app.state.ingestion


def get_storage(request: Request) -> StorageService:
    return request.app.state.storage
