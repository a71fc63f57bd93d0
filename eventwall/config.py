from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./data/db.sqlite3"
    api_key: str = ""  # empty = no admin check (local dev)
    upload_dir: str = "./data/uploads"
    max_upload_size_bytes: int = 10 * 1024 * 1024  # 10MB
    max_files_per_upload: int = 5
    default_event_slug: str = "default"
    default_event_name: str = "Event"
    public_base_url: str = ""  # empty = derived from the request host
    cors_origins: list[str] = ["http://localhost:8000", "http://localhost:5173"]
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
