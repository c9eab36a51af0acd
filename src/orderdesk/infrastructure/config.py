"""Runtime configuration, read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from orderdesk.domain.exceptions import ValidationError

# src/orderdesk/infrastructure/config.py -> <repo>/data
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

BACKENDS = ("json", "api")


@dataclass(frozen=True)
class Settings:
    backend: str = "json"
    backend_url: str | None = None
    token: str | None = None
    data_dir: Path = DEFAULT_DATA_DIR
    timeout: float = 10.0
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """Build :class:`Settings` from ``ORDERDESK_*`` variables.

    Values already present in the environment win over the ``.env`` file.
    """
    load_dotenv()

    backend = os.getenv("ORDERDESK_BACKEND", "json").strip().lower()
    if backend not in BACKENDS:
        raise ValidationError(
            f"ORDERDESK_BACKEND must be one of {', '.join(BACKENDS)}, got '{backend}'"
        )

    backend_url = os.getenv("ORDERDESK_BACKEND_URL") or None
    if backend == "api" and not backend_url:
        raise ValidationError("ORDERDESK_BACKEND_URL is required for the api backend")

    timeout_str = os.getenv("ORDERDESK_TIMEOUT", "10")
    try:
        timeout = float(timeout_str)
    except ValueError:
        raise ValidationError(f"ORDERDESK_TIMEOUT must be a number, got '{timeout_str}'")

    data_dir = os.getenv("ORDERDESK_DATA_DIR")

    return Settings(
        backend=backend,
        backend_url=backend_url,
        token=os.getenv("ORDERDESK_TOKEN") or None,
        data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
        timeout=timeout,
        log_level=os.getenv("ORDERDESK_LOG_LEVEL", "WARNING").upper(),
    )
