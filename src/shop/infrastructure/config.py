"""Runtime settings, read from the environment (and ``.env`` if present)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[3]  # .../shop-api

STORAGE_KINDS = ("file", "mongo")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int) -> int:
    v = _get_env(*keys)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        raise RuntimeError(f"{keys[0]} must be an integer, got {v!r}") from None


@dataclass(frozen=True)
class Settings:
    storage: str
    data_dir: Path
    mongodb_uri: str
    mongodb_database: str | None
    host: str
    port: int
    log_level: str


def load_settings() -> Settings:
    load_dotenv(dotenv_path=ROOT_DIR / ".env")

    settings = Settings(
        storage=(_get_env("SHOP_STORAGE", default="file") or "file").lower(),
        data_dir=Path(_get_env("SHOP_DATA_DIR", default=str(ROOT_DIR / "data")) or "data"),
        mongodb_uri=_get_env("MONGODB_URI", default="mongodb://127.0.0.1:27017/tienda") or "",
        mongodb_database=_get_env("MONGODB_DB"),
        host=_get_env("HOST", default="0.0.0.0") or "0.0.0.0",
        port=_get_int("PORT", default=8080),
        log_level=_get_env("LOG_LEVEL", default="INFO") or "INFO",
    )

    if settings.storage not in STORAGE_KINDS:
        raise RuntimeError(
            f"SHOP_STORAGE must be one of {', '.join(STORAGE_KINDS)}, got {settings.storage!r}"
        )
    return settings
