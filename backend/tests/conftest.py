import os
import tempfile

# Keep the module-level app in tracko.main from writing into the repo
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="tracko-uploads-"))
os.environ.setdefault("SEED_DEMO_DATA", "false")

import pytest
from fastapi.testclient import TestClient

from tracko.config import Settings
from tracko.main import create_app
from tracko.services.entity_store import EntityStore
from tracko.services.ingestion_service import IngestionService
from tracko.services.processing_worker import ProcessingWorker
from tracko.services.storage_service import StorageService


@pytest.fixture
def settings(tmp_path):
    """Settings for an isolated in-memory store; completion jobs wait for run_pending()"""
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        seed_demo_data=False,
        upload_dir=str(tmp_path / "uploads"),
        document_processing_delay_seconds=60,
        message_processing_delay_seconds=60,
        max_upload_size_bytes=1024,
    )


@pytest.fixture
def store(settings):
    store = EntityStore.from_settings(settings)
    yield store
    store.close()


@pytest.fixture
def worker():
    worker = ProcessingWorker()
    yield worker
    worker.shutdown()


@pytest.fixture
def storage(settings):
    return StorageService(settings)


@pytest.fixture
def ingestion(store, worker, storage, settings):
    return IngestionService(store, worker, storage, settings)


@pytest.fixture
def client(settings, store, worker, storage):
    app = create_app(settings, store=store, worker=worker, storage=storage)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def supplier_data():
    return {
        "name": "ABC Trading Co.",
        "contact_person": "John Smith",
        "email": "john@abctrading.com",
        "phone": "+91-9876543210",
        "address": "123 Industrial Area, Mumbai",
        "rating": "4.5",
        "on_time_delivery_rate": "87.30",
    }


@pytest.fixture
def delivery_data():
    return {
        "supplier_name": "ABC Trading Co.",
        "material_type": "Raw Steel",
        "quantity": "500",
        "unit": "tons",
    }
