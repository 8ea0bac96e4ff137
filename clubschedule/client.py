"""HTTP client for the schedule API, shared by the view-models."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import httpx

from .errors import ApiError, NetworkError


class ScheduleApiClient:
    """Thin wrapper over an ``httpx.Client`` pointed at the API.

    The client keeps its own cookie jar, so the admin session cookie set
    by :meth:`authenticate` rides along on later admin calls.
    """

    def __init__(self, http: httpx.Client) -> None:
        self.http = http

    @classmethod
    def from_url(cls, base_url: str, timeout: float = 20) -> "ScheduleApiClient":
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "ScheduleApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self.http.request(method, path, **kwargs)
        except httpx.TransportError as exc:
            raise NetworkError(str(exc) or exc.__class__.__name__) from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if response.is_error:
            message = payload.get("error") if isinstance(payload, dict) else None
            raise ApiError(response.status_code, message)
        return payload

    def list_public(self, event_type: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"event_type": event_type} if event_type else None
        return self._request("GET", "/schedule", params=params) or []

    def list_admin(self) -> List[Dict[str, Any]]:
        payload = self._request("GET", "/admin/schedule")
        return payload.get("data") or []

    def create(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        payload = self._request("POST", "/admin/schedule", json=dict(fields))
        return payload["data"][0]

    def update(self, event_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
        payload = self._request(
            "PUT", "/admin/schedule", params={"id": event_id}, json=dict(fields)
        )
        return payload["data"][0]

    def delete(self, event_id: str) -> str:
        payload = self._request("DELETE", "/admin/schedule", params={"id": event_id})
        return payload.get("message", "")

    def authenticate(self, password: str) -> bool:
        payload = self._request("POST", "/admin/auth", json={"password": password})
        return bool(payload.get("success"))

    def logout(self) -> None:
        self._request("POST", "/admin/logout")


__all__ = ["ScheduleApiClient"]
