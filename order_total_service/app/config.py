import os
from typing import Mapping, Optional

from fastapi import Request
from pydantic import BaseModel, ConfigDict

DEFAULT_RATE_SERVICE_URL = "http://localhost:8001/find_rate"
DEFAULT_RATE_TIMEOUT = 5.0


class Settings(BaseModel):
    """Process-wide configuration, resolved once at startup and never mutated."""
    model_config = ConfigDict(frozen=True)

    rate_service_url: str = DEFAULT_RATE_SERVICE_URL
    rate_timeout: float = DEFAULT_RATE_TIMEOUT
    host: str = "0.0.0.0"
    port: int = 8002
    log_level: str = "INFO"


def _get_float(env: Mapping[str, str], key: str, default: float) -> float:
    try:
        value = float(env.get(key, default))
    except ValueError:
        return default
    return value if 0 < value < float("inf") else default


def _get_int(env: Mapping[str, str], key: str, default: int) -> int:
    try:
        return int(env.get(key, default))
    except ValueError:
        return default


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from environment variables (or the given mapping)."""
    env = os.environ if environ is None else environ
    return Settings(
        # Rate lookup endpoint; the only variable the service strictly needs.
        rate_service_url=env.get("SALES_TAX_RATE_SERVICE", DEFAULT_RATE_SERVICE_URL),
        rate_timeout=_get_float(env, "SALES_TAX_RATE_TIMEOUT", DEFAULT_RATE_TIMEOUT),
        host=env.get("HOST", "0.0.0.0"),
        port=_get_int(env, "PORT", 8002),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
    )


def get_settings(request: Request) -> Settings:
    """FastAPI dependency to get the settings the app was created with."""
    return request.app.state.settings
