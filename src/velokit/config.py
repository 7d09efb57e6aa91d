from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[2]

load_dotenv(ROOT / ".env")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


BIKES_PATH = Path(os.getenv("VELOKIT_BIKES_PATH", str(ROOT / "data" / "bikes.json")))
LOG_LEVEL = os.getenv("VELOKIT_LOG_LEVEL", "INFO").strip().upper()
LOG_FILE = os.getenv("VELOKIT_LOG_FILE", "").strip()
DEFAULT_LEAD_DAYS = _env_int("VELOKIT_DEFAULT_LEAD_DAYS", 0)
CORS_ENABLED = _env_bool("VELOKIT_CORS", True)
HOST = os.getenv("VELOKIT_HOST", "127.0.0.1").strip()
PORT = _env_int("VELOKIT_PORT", 8000)
