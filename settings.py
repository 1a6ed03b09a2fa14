from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    try:
        return float(raw) if raw is not None else default
    except ValueError:
        return default


def _env_str(name: str) -> str:
    return (os.getenv(name) or "").strip()


@dataclass(frozen=True)
class Settings:
    # HTTP key-value service (Upstash / Vercel KV REST API)
    kv_rest_api_url: str
    kv_rest_api_token: str

    # Redis over TCP
    redis_url: str

    # Local file fallback
    data_file: Path

    # Key the document lives under in remote stores
    storage_key: str
    remote_timeout_seconds: float

    # Admin
    admin_password: str
    token_secret: str

    # Debug
    debug_log_requests: bool

    # Dev server
    host: str
    port: int


def get_settings() -> Settings:
    root = Path(__file__).resolve().parent
    data_file = _env_str("DATA_FILE")

    try:
        port = int(os.getenv("PORT", "8000"))
    except ValueError:
        port = 8000

    return Settings(
        kv_rest_api_url=_env_str("KV_REST_API_URL").rstrip("/"),
        kv_rest_api_token=_env_str("KV_REST_API_TOKEN"),
        redis_url=_env_str("REDIS_URL"),
        data_file=Path(data_file) if data_file else root / "data" / "portfolio.json",
        storage_key=_env_str("STORAGE_KEY") or "portfolio:data",
        remote_timeout_seconds=_env_float("REMOTE_TIMEOUT_SECONDS", 10.0),
        # NOTE: plaintext default; set ADMIN_PASSWORD before deploying
        admin_password=os.getenv("ADMIN_PASSWORD", "admin123"),
        token_secret=os.getenv("TOKEN_SECRET", "dev-only-portfolio-secret"),
        debug_log_requests=_env_bool("DEBUG_LOG_REQUESTS", False),
        host=os.getenv("HOST", "127.0.0.1"),
        port=port,
    )
