from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from tracko.routers import suppliers, deliveries, documents, whatsapp, stats
from tracko.config import Settings, settings as default_settings
from tracko.seed import seed_demo_data
from tracko.services.entity_store import EntityStore, InvalidEntityError
from tracko.services.ingestion_service import IngestionService
from tracko.services.processing_worker import ProcessingWorker
from tracko.services.storage_service import StorageService
import logging
import sys

# Configure logging
logging.basicConfig(
    level=default_settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)


def parse_cors_origins(origins_str: str) -> list:
    """Parse CORS origins string into a list"""
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[EntityStore] = None,
    worker: Optional[ProcessingWorker] = None,
    storage: Optional[StorageService] = None,
) -> FastAPI:
    """
    Build the API with its own store, worker and file storage.

    Anything not passed in is built from settings, so tests can hand in a
    fresh store or an inline worker.
    """
    settings = settings or default_settings

    logger.info("=" * 60)
    logger.info(f"Starting {settings.app_name}")
    logger.info("=" * 60)
    logger.info(f"Database: {settings.database_url}")
    logger.info(f"Processing delays: documents {settings.document_processing_delay_seconds}s, messages {settings.message_processing_delay_seconds}s")
    logger.info(f"S3 storage configured: {bool(settings.storage_access_key_id and settings.storage_secret_access_key)}")
    logger.info("=" * 60)

    store = store or EntityStore.from_settings(settings)
    worker = worker or ProcessingWorker(run_inline=settings.processing_inline)
    storage = storage or StorageService(settings)

    if settings.seed_demo_data:
        seed_demo_data(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        worker.shutdown()
        logger.info("Processing worker stopped")

    app = FastAPI(
        title=settings.app_name,
        description="API for tracking supplier deliveries from manual, WhatsApp and document intake",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = store
    app.state.worker = worker
    app.state.storage = storage
    app.state.ingestion = IngestionService(store, worker, storage, settings)

    allowed_origins = parse_cors_origins(settings.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(stats.router)
    app.include_router(suppliers.router)
    app.include_router(deliveries.router)
    app.include_router(documents.router)
    app.include_router(whatsapp.router)  # Messages + mock webhook

    @app.get("/")
    def root():
        return {"message": settings.app_name, "version": "1.0.0"}

    @app.get("/health")
    def health_check():
        return {"status": "healthy", "pending_jobs": len(worker.pending())}

    @app.exception_handler(InvalidEntityError)
    async def invalid_entity_handler(request: Request, exc: InvalidEntityError):
        logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "field": exc.field},
        )

    # Exception handler to ensure CORS headers are always sent
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)

        origin = request.headers.get("origin", "")
        headers = {}
        if origin in allowed_origins:
            headers = {
                "Access-Control-Allow-Origin": origin,
                "Access-Control-Allow-Credentials": "true",
            }

        return JSONResponse(
            status_code=500,
            content={"detail": f"Internal server error: {str(exc)}"},
            headers=headers,
        )

    return app


app = create_app()
