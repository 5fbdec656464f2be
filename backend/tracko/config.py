from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    app_name: str = "Tracko Delivery Tracking API"
    log_level: str = "INFO"

    # Database (in-memory SQLite by default; data lives as long as the process)
    database_url: str = "sqlite://"
    database_echo: bool = False

    # Load the demo suppliers, deliveries and stats on startup
    seed_demo_data: bool = True

    # Simulated processing (mock OCR / message parsing)
    document_processing_delay_seconds: float = 2.0
    message_processing_delay_seconds: float = 1.0
    processing_inline: bool = False  # Run completion jobs synchronously on submit

    # Uploads
    max_upload_size_bytes: int = 10 * 1024 * 1024  # 10MB
    upload_dir: str = "local_storage/uploads"

    # Supplier matching
    supplier_match_threshold: float = 0.6

    # Storage Configuration (S3-compatible, optional)
    storage_endpoint_url: Optional[str] = None
    storage_access_key_id: Optional[str] = None
    storage_secret_access_key: Optional[str] = None
    storage_bucket_name: str = "tracko-documents"
    storage_region: str = "us-east-1"

    # CORS Configuration
    cors_origins: str = "http://localhost:3000,http://localhost:5000,http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields in .env file
    )


settings = Settings()
