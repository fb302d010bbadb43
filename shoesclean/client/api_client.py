# This file implements the HTTP client for the service catalog API.
# It exists so scripts and other services can call the API without repeating request and envelope handling.
# The client unwraps the `{success, ...}` envelope and converts failures into two clear exception types.
# The base URL comes from ClientConfig, never from runtime host detection.

from __future__ import annotations

import logging
from typing import Any

import requests

from shoesclean.client.client_config import ClientConfig

logger = logging.getLogger(__name__)


class ApiUnavailableError(RuntimeError):
    """Raised when the API cannot be reached or responds with server errors."""


class ApiRequestError(ValueError):
    """Raised when the API rejects a request (4xx or `success: false`)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ServicesApiClient:
    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int = 8,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    @classmethod
    def from_config(
        cls, config: ClientConfig, *, session: requests.Session | None = None
    ) -> ServicesApiClient:
        return cls(base_url=config.base_url, timeout_seconds=config.timeout_seconds, session=session)

    def get_services(
        self,
        *,
        page: int = 1,
        limit: int = 10,
        search: str = "",
        sort_by: str = "id",
        sort_order: str = "asc",
    ) -> dict[str, Any]:
        params: dict[str, Any] = {
            "page": page,
            "limit": limit,
            "sortBy": sort_by,
            "sortOrder": sort_order,
        }
        if search.strip():
            params["search"] = search.strip()
        return self._request_json("GET", "/api/services", params=params)

    def get_service(self, service_id: int) -> dict[str, Any]:
        payload = self._request_json("GET", f"/api/services/{service_id}")
        return dict(payload["service"])

    def create_service(self, service_data: dict[str, Any]) -> dict[str, Any]:
        payload = self._request_json("POST", "/api/services", json_body=service_data)
        return dict(payload["service"])

    def update_service(self, service_id: int, service_data: dict[str, Any]) -> dict[str, Any]:
        payload = self._request_json("PUT", f"/api/services/{service_id}", json_body=service_data)
        return dict(payload["service"])

    def delete_service(self, service_id: int) -> dict[str, Any]:
        payload = self._request_json("DELETE", f"/api/services/{service_id}")
        return dict(payload["deletedService"])

    def get_stats(self) -> dict[str, Any]:
        payload = self._request_json("GET", "/api/services/stats")
        return dict(payload["stats"])

    def test_connection(self) -> bool:
        try:
            response = self.session.request(
                "GET", f"{self.base_url}/health", timeout=self.timeout_seconds
            )
        except requests.RequestException:
            return False
        return 200 <= response.status_code < 300

    def health_check(self) -> dict[str, Any]:
        return self._request_json("GET", "/health")

    def _request_json(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json_body,
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.error("API request error for %s %s: %s", method, url, exc)
            raise ApiUnavailableError(f"API request failed for {url}: {exc}") from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.status_code >= 500:
            raise ApiUnavailableError(
                f"API request failed with status {response.status_code} for {url}"
            )
        if response.status_code >= 400:
            message = payload.get("error") if isinstance(payload, dict) else None
            raise ApiRequestError(
                str(message or f"API request was rejected with status {response.status_code} for {url}"),
                status_code=response.status_code,
            )
        if not isinstance(payload, dict):
            raise ApiUnavailableError(f"API did not return a JSON object for {url}")
        if payload.get("success") is False:
            raise ApiRequestError(
                str(payload.get("error") or "API request failed"),
                status_code=response.status_code,
            )
        return payload
