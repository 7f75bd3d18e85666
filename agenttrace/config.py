"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass, field
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
LOGS_DIR = PROJECT_ROOT / "logs"
DEFAULT_LOG_PATH = LOGS_DIR / "agenttrace.log"

DEFAULT_CORS_ORIGINS = ["http://localhost:4200", "http://localhost:5173"]


@dataclass
class Settings:
    """Runtime settings for the debug API server."""

    api_host: str = "localhost"
    api_port: int = 8000
    log_level: str = "INFO"
    log_file: str = str(DEFAULT_LOG_PATH)
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    trace_console_export: bool = False


def _env_flag(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    """Build Settings from environment variables."""
    origins = os.getenv("CORS_ORIGINS")
    return Settings(
        api_host=os.getenv("API_HOST", "localhost"),
        api_port=int(os.getenv("API_PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=os.getenv("LOG_FILE", str(DEFAULT_LOG_PATH)),
        cors_origins=(
            [o.strip() for o in origins.split(",") if o.strip()]
            if origins
            else list(DEFAULT_CORS_ORIGINS)
        ),
        trace_console_export=_env_flag(os.getenv("TRACE_CONSOLE_EXPORT")),
    )
