"""HTTP transport shared by every PayMongo resource client."""

import base64
from typing import Any, Literal, Mapping

import httpx
import structlog

from .config import ResolvedConfig
from .exceptions import PayMongoAPIError, PayMongoNetworkError
from .version import __version__

logger = structlog.get_logger(__name__)

HttpMethod = Literal["GET", "POST", "PATCH", "DELETE"]

QueryParams = Mapping[str, str | int | float | bool | None]

# Methods that carry a JSON payload
_BODY_METHODS = frozenset({"POST", "PATCH"})


def build_query_params(params: QueryParams | None) -> dict[str, str | int | float | bool]:
    """
    Drop absent values from a query parameter mapping.

    ``None`` values are omitted entirely rather than sent as empty strings.
    """
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None}


def basic_auth_header(api_key: str) -> str:
    """Basic auth value with the API key as username and an empty password."""
    encoded = base64.b64encode(f"{api_key}:".encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


class HttpClient:
    """
    Async HTTP client for the PayMongo API.

    One instance is shared by all resource clients of a ``PayMongo`` handle.
    The underlying ``httpx.AsyncClient`` is created on first use and released
    by ``close()``.
    """

    def __init__(self, config: ResolvedConfig) -> None:
        self.config = config
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "HttpClient":
        """Async context manager entry."""
        self._get_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client and cleanup resources."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _get_headers(self) -> dict[str, str]:
        """
        Get request headers.

        Returns:
            Headers dictionary with Basic auth for the configured key
        """
        return {
            "Authorization": basic_auth_header(self.config.api_key),
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": f"paymongo-python/{__version__}",
        }

    def _build_url(self, path: str, params: QueryParams | None = None) -> httpx.URL:
        """Join ``path`` onto the base URL and append the defined query params."""
        query = build_query_params(params)
        url = httpx.URL(f"{self.config.base_url}{path}")
        if query:
            url = url.copy_merge_params(query)
        return url

    @staticmethod
    def _parse_body(response: httpx.Response) -> tuple[Any, bool]:
        """
        Parse a response body as JSON.

        Returns:
            ``(body, parsed)``: ``body`` is None for an empty or non-JSON body,
            ``parsed`` is False only when a non-empty body was not valid JSON.
        """
        if not response.content:
            return None, True
        try:
            return response.json(), True
        except ValueError:
            return None, False

    async def request(
        self,
        method: HttpMethod,
        path: str,
        body: Any = None,
        params: QueryParams | None = None,
    ) -> Any:
        """
        Make an HTTP request to the PayMongo API.

        Args:
            method: HTTP method
            path: Path relative to the base URL, e.g. ``/payment_intents``
            body: JSON payload (sent for POST and PATCH only)
            params: Query parameters; ``None`` values are omitted

        Returns:
            The parsed JSON body, or None when the body is empty or not JSON

        Raises:
            PayMongoNetworkError: If the request could not be completed
            PayMongoAPIError: If the response status is not 2xx
        """
        url = self._build_url(path, params)
        request_kwargs: dict[str, Any] = {"headers": self._get_headers()}
        if body is not None and method in _BODY_METHODS:
            request_kwargs["json"] = body

        client = self._get_client()
        try:
            response = await client.request(method, url, **request_kwargs)
        except httpx.RequestError as e:
            logger.error(
                "PayMongo request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise PayMongoNetworkError(
                "Network error while communicating with PayMongo API", e
            ) from e

        response_body, parsed = self._parse_body(response)

        if not 200 <= response.status_code < 300:
            error = PayMongoAPIError.from_response(
                response.status_code,
                response_body if parsed else response.text,
            )
            logger.warning(
                "PayMongo API error",
                method=method,
                path=path,
                status=error.status,
                code=error.code,
            )
            raise error

        if not parsed:
            logger.warning(
                "PayMongo response body is not valid JSON",
                method=method,
                path=path,
                status=response.status_code,
            )

        logger.debug(
            "PayMongo request completed",
            method=method,
            path=path,
            status=response.status_code,
        )
        return response_body

    async def get(self, path: str, params: QueryParams | None = None) -> Any:
        """GET request."""
        return await self.request("GET", path, params=params)

    async def post(self, path: str, body: Any = None) -> Any:
        """POST request."""
        return await self.request("POST", path, body=body)

    async def patch(self, path: str, body: Any = None) -> Any:
        """PATCH request."""
        return await self.request("PATCH", path, body=body)

    async def delete(self, path: str) -> Any:
        """DELETE request."""
        return await self.request("DELETE", path)
