from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_API_URL = "http://localhost:4000"

ENV_KEYS = [
    "CHEAP_BANANAS_API_URL",
    "CHEAP_BANANAS_TIMEOUT_S",
    "LOG_LEVEL",
]


@dataclass(frozen=True)
class Config:
    api_url: str = DEFAULT_API_URL
    timeout_s: float = 30.0
    log_level: str = "INFO"

    @staticmethod
    def load_from_env(env: Mapping[str, str] | None = None) -> "Config":
        env = os.environ if env is None else env

        api_url = (env.get("CHEAP_BANANAS_API_URL") or DEFAULT_API_URL).strip()
        if not api_url.startswith(("http://", "https://")):
            raise RuntimeError(f"CHEAP_BANANAS_API_URL must be an http(s) URL, got {api_url!r}")

        raw_timeout = env.get("CHEAP_BANANAS_TIMEOUT_S") or "30"
        try:
            timeout_s = float(raw_timeout)
        except ValueError:
            raise RuntimeError(f"CHEAP_BANANAS_TIMEOUT_S is not a number: {raw_timeout!r}")
        if timeout_s <= 0:
            raise RuntimeError(f"CHEAP_BANANAS_TIMEOUT_S must be positive, got {raw_timeout!r}")

        return Config(
            api_url=api_url.rstrip("/"),
            timeout_s=timeout_s,
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )
