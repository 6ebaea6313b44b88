from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.ekispert.jp"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


@dataclass(frozen=True, slots=True)
class EkispertConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = 10.0

    @staticmethod
    def from_env() -> "EkispertConfig":
        base_url = (os.getenv("EKISPERT_BASE_URL") or "").strip() or DEFAULT_BASE_URL
        return EkispertConfig(
            api_key=(os.getenv("EKISPERT_API_KEY") or "").strip(),
            base_url=base_url.rstrip("/"),
            timeout_s=_env_float("EKISPERT_TIMEOUT_S", 10.0),
        )
