from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_API_TIMEOUT
from ..core.exceptions import ApiError

logger = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    base_url: str
    timeout: float = DEFAULT_API_TIMEOUT


class ApiClient:
    """Singleton-like HTTP client for the attendance backend.

    Note: One ``requests.Session`` is shared so connections are pooled; the
    bearer token is passed per call because it belongs to the caller.
    A different ``ApiConfig`` replaces the shared instance.
    """

    _instance: Optional["ApiClient"] = None

    def __init__(self, config: ApiConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    @classmethod
    def get_instance(cls, config: ApiConfig) -> "ApiClient":
        if cls._instance is None or cls._instance._config != config:
            cls._instance = ApiClient(config)
        return cls._instance

    def _url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def request(self, method: str, path: str, *, token: str, json: Any = None) -> Any:
        url = self._url(path)
        headers = {"Authorization": f"Bearer {token}"}
        logger.debug("%s %s", method, url)

        try:
            response = self._session.request(method, url, headers=headers, json=json, timeout=self._config.timeout)
        except requests.exceptions.RequestException as e:
            raise ApiError(f"{method} {path} failed: {e}") from e

        body = None
        if response.content:
            try:
                body = response.json()
            except ValueError:
                body = None

        if not response.ok:
            backend_message = body.get("message") if isinstance(body, dict) else None
            raise ApiError(
                f"{method} {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
                backend_message=backend_message or None,
            )
        return body

    def get(self, path: str, *, token: str) -> Any:
        return self.request("GET", path, token=token)

    def post(self, path: str, *, token: str, json: Any = None) -> Any:
        return self.request("POST", path, token=token, json=json if json is not None else {})
