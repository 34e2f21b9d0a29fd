import os
from pathlib import Path
from pydantic import BaseModel, Field

# Data directory: use GLANCE_DATA_DIR if set (e.g. /data in Docker),
# otherwise fall back to ~/.config/glance for local dev
DEFAULT_DATA_DIR = Path.home() / ".config" / "glance"
DEFAULT_STORE_FILE = "glance.db"

# Vite dev server
DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]


class Settings(BaseModel):
    """Runtime settings for the API server."""
    data_dir: Path = DEFAULT_DATA_DIR
    store_file: str = DEFAULT_STORE_FILE
    cors_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "info"

    @property
    def store_path(self) -> Path:
        """Full path of the SQLite file backing the key-value store."""
        return self.data_dir / self.store_file


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def load_settings(**overrides) -> Settings:
    """
    Build settings from GLANCE_* environment variables.

    Keyword overrides (e.g. from command-line flags) win over the environment.
    """
    values: dict = {}

    data_dir = os.environ.get("GLANCE_DATA_DIR")
    if data_dir:
        values["data_dir"] = Path(data_dir).expanduser()

    store_file = os.environ.get("GLANCE_STORE_FILE")
    if store_file:
        values["store_file"] = store_file

    origins = os.environ.get("GLANCE_CORS_ORIGINS")
    if origins:
        values["cors_origins"] = _split_origins(origins)

    log_level = os.environ.get("GLANCE_LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level.lower()

    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**values)


def ensure_data_dir(settings: Settings) -> None:
    """Ensure the data directory exists."""
    settings.data_dir.mkdir(parents=True, exist_ok=True)
