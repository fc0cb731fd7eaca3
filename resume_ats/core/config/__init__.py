from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

EMBEDDING_BACKENDS = ("sentence-transformers", "hashing", "none")


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    embedding_backend: str
    embedding_model: str
    spacy_model: str
    scoring_config_path: str | None


settings = Settings(
    api_key=_get_env("API_KEY"),
    rate_limit=_get_env("RATE_LIMIT", "60/minute") or "60/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    embedding_backend=(_get_env("EMBEDDING_BACKEND", "sentence-transformers") or "sentence-transformers").strip().lower(),
    embedding_model=_get_env("EMBEDDING_MODEL", "all-MiniLM-L6-v2") or "all-MiniLM-L6-v2",
    spacy_model=_get_env("SPACY_MODEL", "en_core_web_sm") or "en_core_web_sm",
    scoring_config_path=_get_env("SCORING_CONFIG_PATH"),
)

if settings.embedding_backend not in EMBEDDING_BACKENDS:
    raise RuntimeError(
        f"EMBEDDING_BACKEND must be one of {', '.join(EMBEDDING_BACKENDS)}; got '{settings.embedding_backend}'."
    )

__all__ = ["EMBEDDING_BACKENDS", "Settings", "settings"]
