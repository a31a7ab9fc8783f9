"""
Shared HTTP plumbing for Watson service clients.

Every service client wraps one httpx.AsyncClient configured with the
service URL and Basic auth credentials. Each public operation issues
exactly one request and either returns the decoded JSON or raises
ServiceError carrying the remote HTTP status.
"""

from typing import Any, Optional

import httpx

from core.logging import get_logger


class ServiceError(Exception):
    """
    Remote service returned a non-2xx status.

    Attributes:
        code: HTTP status code reported by the service
        message: Error description extracted from the response body
    """

    def __init__(self, code: int, message: str):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


def _error_message(response: httpx.Response) -> str:
    """Pull a human-readable message out of an error response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase

    message = _message_from(body)
    return message or response.text or response.reason_phrase


def _message_from(body: Any) -> Optional[str]:
    """
    Find the error text in a decoded body.

    Solr nests its error one level down:
    {"responseHeader": {...}, "error": {"msg": "...", "code": 400}}
    """
    if not isinstance(body, dict):
        return None
    for key in ("error", "msg", "description", "message"):
        value = body.get(key)
        if not value:
            continue
        if isinstance(value, dict):
            nested = _message_from(value)
            if nested:
                return nested
            continue
        return value if isinstance(value, str) else str(value)
    return None


class WatsonService:
    """
    Base class for clients of a single Watson REST service.

    Usage:
        async with RetrieveAndRank(username, password) as service:
            clusters = await service.get_solr_clusters()
    """

    service_name = "watson"

    def __init__(
        self,
        username: str,
        password: str,
        service_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the service client.

        Args:
            username: Service credential username
            password: Service credential password
            service_url: Base URL of the service API
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests inject MockTransport)
        """
        if not username or not password:
            raise ValueError(f"{self.service_name} requires a username and password")

        self.service_url = service_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.service_url,
            auth=httpx.BasicAuth(username, password),
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )
        self._logger = get_logger(__name__, service=self.service_name)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the underlying HTTP connections."""
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any]] = None,
        json: Optional[Any] = None,
        content: Optional[bytes] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Send one request and raise ServiceError on a non-2xx status.

        Transport failures (timeouts, refused connections) propagate
        as httpx exceptions.
        """
        self._logger.debug("Sending request", method=method, path=path)
        response = await self._client.request(
            method,
            path,
            params=params,
            json=json,
            content=content,
            headers=headers,
        )

        if response.is_success:
            self._logger.info(
                "Request succeeded",
                method=method,
                path=path,
                status=response.status_code,
            )
            return response

        message = _error_message(response)
        self._logger.warning(
            "Request failed",
            method=method,
            path=path,
            status=response.status_code,
            error=message,
        )
        raise ServiceError(response.status_code, message)

    async def _request_json(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request and decode the JSON body of the response."""
        response = await self._request(method, path, **kwargs)
        if not response.content:
            return {}
        return response.json()
