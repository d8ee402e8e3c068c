"""
HTTP client for the compliance knowledge-base API.

Every domain API wraps an ``ApiClient``. The client owns the
``requests.Session``, the base URL and the bearer token, and turns any
unexpected status or transport failure into ``ApiRequestError``.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from .config import get_settings

logger = logging.getLogger(__name__)

NETWORK_ERROR = "Network Error"
INVALID_BODY = "Invalid response body"


class ApiRequestError(Exception):
    """A request that did not come back with the expected status.

    Attributes:
        status_code: HTTP status, or None when no response was received
        server_message: ``message`` field of the JSON error body
        client_message: transport-level description ("Network Error" when
            the server could not be reached)
        details: ``errors`` object of the JSON error body
    """

    def __init__(
        self,
        client_message: str,
        status_code: int | None = None,
        server_message: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(server_message or client_message)
        self.client_message = client_message
        self.status_code = status_code
        self.server_message = server_message
        self.details = details or {}

    @classmethod
    def from_response(cls, response: requests.Response) -> "ApiRequestError":
        """Build the error from a response with an unexpected status."""
        server_message = None
        details: dict[str, Any] = {}
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            if isinstance(body.get("message"), str):
                server_message = body["message"]
            if isinstance(body.get("errors"), dict):
                details = body["errors"]
        return cls(
            client_message=f"Request failed with status code {response.status_code}",
            status_code=response.status_code,
            server_message=server_message,
            details=details,
        )


class ApiClient:
    """Authenticated client for the knowledge-base REST API."""

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Base URL of the API server (defaults to settings)
            token: Bearer token sent with every request
            timeout: Request timeout in seconds (defaults to settings)
            session: Optional pre-built session, shared between clients
        """
        settings = get_settings()
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.token = token
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.session = session or requests.Session()

    def with_token(self, token: str | None) -> "ApiClient":
        """Return a client for another credential over the same session."""
        return ApiClient(
            base_url=self.base_url,
            token=token,
            timeout=self.timeout,
            session=self.session,
        )

    def _headers(self) -> dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def _request(
        self,
        method: str,
        endpoint: str,
        expected_status: int,
        **kwargs: Any,
    ) -> requests.Response:
        url = f"{self.base_url}{endpoint}"
        try:
            response = self.session.request(
                method,
                url,
                headers=self._headers(),
                timeout=self.timeout,
                **kwargs,
            )
        except (requests.ConnectionError, requests.Timeout) as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise ApiRequestError(NETWORK_ERROR) from exc
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise ApiRequestError(str(exc)) from exc

        if response.status_code != expected_status:
            error = ApiRequestError.from_response(response)
            logger.warning(
                "%s %s returned %s: %s",
                method,
                url,
                response.status_code,
                error.server_message or error.client_message,
            )
            raise error
        return response

    def get(self, endpoint: str, params: dict | None = None) -> dict:
        """Make a GET request."""
        response = self._request("GET", endpoint, 200, params=_clean_params(params))
        return _json_body(response)

    def post(
        self,
        endpoint: str,
        json: dict | None = None,
        data: dict | None = None,
        files: dict | None = None,
        expected_status: int = 201,
    ) -> dict:
        """Make a POST request with a JSON or multipart body."""
        response = self._request(
            "POST", endpoint, expected_status, json=json, data=data, files=files
        )
        return _json_body(response)

    def patch(
        self,
        endpoint: str,
        json: dict | None = None,
        data: dict | None = None,
        files: dict | None = None,
    ) -> dict:
        """Make a PATCH request with a JSON or multipart body."""
        response = self._request("PATCH", endpoint, 200, json=json, data=data, files=files)
        return _json_body(response)

    def delete(self, endpoint: str, json: dict | None = None) -> None:
        """Make a DELETE request; the API answers 204 with no body."""
        self._request("DELETE", endpoint, 204, json=json)


def _json_body(response: requests.Response) -> dict:
    """Decode a success body; every endpoint answers a JSON object."""
    try:
        body = response.json()
    except ValueError as exc:
        logger.error("%s returned an undecodable body: %s", response.url, exc)
        raise ApiRequestError(INVALID_BODY, status_code=response.status_code) from exc
    if not isinstance(body, dict):
        logger.error("%s returned %s instead of an object", response.url, type(body).__name__)
        raise ApiRequestError(INVALID_BODY, status_code=response.status_code)
    return body


def _clean_params(params: dict | None) -> dict | None:
    """Drop unset query parameters; lists are sent as repeated keys."""
    if params is None:
        return None
    return {key: value for key, value in params.items() if value is not None}


def multipart_fields(fields: dict[str, Any], **files: Any) -> dict[str, Any]:
    """Build a ``files=`` mapping that requests sends as multipart/form-data.

    Plain fields become ``(None, text)`` parts, booleans as "true"/"false";
    unset (None) fields are skipped. ``files`` are passed through unchanged,
    so each may be anything requests accepts for an upload (file object or
    ``(name, fileobj, type)``).
    """
    parts: dict[str, Any] = {
        name: (None, _form_value(value)) for name, value in fields.items() if value is not None
    }
    parts.update({name: upload for name, upload in files.items() if upload is not None})
    return parts


def json_ids(ids: list[Any]) -> str:
    """Encode an id list the way the API expects inside form and JSON bodies."""
    return json.dumps([int(value) for value in ids])


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
