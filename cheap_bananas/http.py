from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpClient:
    base_url: str
    timeout_s: float = 30.0

    def _url(self, path: str) -> str:
        return self.base_url.rstrip("/") + "/" + path.lstrip("/")

    def get(self, path: str, *, params: dict | None = None) -> requests.Response:
        logger.debug("GET %s params=%s", path, params)
        return requests.get(
            self._url(path),
            params=params,
            headers={"Accept": "application/json"},
            timeout=self.timeout_s,
        )

    def post(self, path: str, *, json: Any = None) -> requests.Response:
        logger.debug("POST %s body=%s", path, json)
        return requests.post(
            self._url(path),
            json=json,
            headers={"Accept": "application/json"},
            timeout=self.timeout_s,
        )

    def delete(self, path: str) -> requests.Response:
        logger.debug("DELETE %s", path)
        return requests.delete(
            self._url(path),
            headers={"Accept": "application/json"},
            timeout=self.timeout_s,
        )
