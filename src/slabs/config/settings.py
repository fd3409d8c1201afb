import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# src/slabs/config/settings.py -> repository root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
ENV_PATH = PROJECT_ROOT / ".env"

# Otherwise python-dotenv searches parent directories for one
load_dotenv(ENV_PATH if ENV_PATH.exists() else None)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Process-wide defaults, read once at import time."""

    # Environment
    ENV: str = Field(default="development", description="Environment: development, production, testing")
    LOG_LEVEL: str = Field(default="INFO", description="Log level")

    # Chunking defaults
    CHUNK_SIZE: int = Field(default=500, gt=0, description="Default chunk size in bytes")
    CHUNK_OVERLAP: int = Field(default=50, ge=0, description="Default chunk overlap in bytes")
    SEMANTIC_THRESHOLD: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Default semantic split threshold"
    )

    # Observability
    TRACING_ENABLED: bool = Field(default=False, description="Initialize OpenTelemetry tracing")

    model_config = {
        "frozen": True,
    }


def load_settings() -> Settings:
    """Build Settings from the environment; the SLABS_ prefix keeps chunking
    knobs apart from the host application's variables."""
    return Settings(
        ENV=os.getenv("ENV", "development"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        CHUNK_SIZE=int(os.getenv("SLABS_CHUNK_SIZE", "500")),
        CHUNK_OVERLAP=int(os.getenv("SLABS_CHUNK_OVERLAP", "50")),
        SEMANTIC_THRESHOLD=float(os.getenv("SLABS_SEMANTIC_THRESHOLD", "0.5")),
        TRACING_ENABLED=_env_bool("SLABS_TRACING_ENABLED", False),
    )


settings = load_settings()
