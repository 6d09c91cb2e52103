from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


class BackendError(RuntimeError):
    pass


class BuilderBackendClient:
    """
    Posts generated mobile components to the app builder backend.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_token: Optional[str] = None,
        save_path: str = "/api/templates/save",
        timeout_sec: float = 30.0,
        max_retries: int = 1,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_token = api_token
        self.save_path = "/" + save_path.lstrip("/")
        self.timeout = httpx.Timeout(
            connect=10.0,
            read=timeout_sec,
            write=timeout_sec,
            pool=timeout_sec,
        )
        self.max_retries = max_retries
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        return headers

    def save_theme(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._post(self.save_path, payload)

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"

        last_err: Optional[Exception] = None
        for attempt in range(self.max_retries + 1):
            try:
                with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                    r = client.post(url, headers=self._headers(), json=payload)
            except httpx.TransportError as e:
                last_err = e
                logger.warning("POST %s failed (attempt %d/%d): %s", url, attempt + 1, self.max_retries + 1, e)
                continue

            if r.status_code >= 400:
                raise BackendError(f"Backend HTTP {r.status_code}: {r.text[:2000]}")
            try:
                return r.json()
            except ValueError as e:
                raise BackendError(f"Backend returned non-JSON response: {r.text[:200]}") from e

        raise BackendError(f"Backend request failed: {type(last_err).__name__}: {last_err}")
