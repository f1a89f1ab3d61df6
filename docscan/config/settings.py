from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    region: str = "europe-west3"
    max_instances: int = 5
    scratch_dir: str | None = None

    blob_store: str = "gcs"
    local_storage_root: str = "/app/storage"
    storage_url_host: str = "firebasestorage.googleapis.com"

    ocr_provider: str = "vision"
    example_ocr_text: str = ""

    pdf_engine: str = "pymupdf"
    page_width: float = 595.28
    page_height: float = 841.89

    max_image_width: int = 1000
    jpeg_quality: int = 80
    ocr_metadata_max_chars: int = 1000

    record_store: str = "firestore"
    firestore_project: str | None = None

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "docscan"
    db_username: str = "docscan"
    db_password: str = "secret"
    db_pool_timeout: float = 10.0
