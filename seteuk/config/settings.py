from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    record_category: str = "subject"
    history_max_items: int = 50

    generation_provider: str = "gemini"
    generation_temperature: float = 0.7
    generation_gemini_model_name: str = "gemini-2.5-flash"
    generation_openai_model_name: str = "gpt-4o-mini"
    generation_openrouter_model_name: str = "google/gemini-2.5-flash"
    generation_openai_compatible_model_name: str = ""
    generation_openai_compatible_base_url: str = ""

    document_store: str = "http"
    document_base_url: str = "http://localhost:5173"
    documents_root: Path = Path("public")

    storage_backend: str = "file"
    storage_file_path: Path = Path(".seteuk/storage.json")

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "seteuk"
    db_username: str = "seteuk"
    db_password: str = "secret"
    db_pool_max_size: int = 4
    db_connect_timeout_seconds: int = 10
