"""Tests for the HTTP transport."""

import base64
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from helpers import mock_response, mock_text_response, sent_request
from paymongo import (
    AuthenticationError,
    HttpClient,
    InvalidRequestError,
    PayMongoAPIError,
    PayMongoNetworkError,
    ResolvedConfig,
    ResourceNotFoundError,
    __version__,
)
from paymongo.http import basic_auth_header, build_query_params


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def config():
    """Create a resolved test configuration."""
    return ResolvedConfig(
        api_key="sk_test_abc",
        base_url="https://api.paymongo.com/v1",
        is_public_key=False,
    )


@pytest.fixture
def http(config):
    """Create a test transport."""
    return HttpClient(config)


@pytest.fixture
def mock_http_client(http):
    """Mock the underlying httpx client."""
    with patch.object(http, "_get_client") as mock_get_client:
        mock_http_client = AsyncMock()
        mock_get_client.return_value = mock_http_client
        yield mock_http_client


# =============================================================================
# Helper Tests
# =============================================================================


class TestHelpers:
    """Tests for query and auth helpers."""

    def test_build_query_params_drops_none(self):
        """Test that absent values are omitted."""
        assert build_query_params({"limit": 10, "after": None, "email": "a@b.c"}) == {
            "limit": 10,
            "email": "a@b.c",
        }

    def test_cursor_without_limit(self):
        """Test a cursor query with an unset page size."""
        assert build_query_params({"after": "cus_1", "limit": None}) == {"after": "cus_1"}

    def test_build_query_params_empty(self):
        """Test empty and missing mappings."""
        assert build_query_params(None) == {}
        assert build_query_params({}) == {}

    def test_basic_auth_header(self):
        """Test that the key is the username with an empty password."""
        header = basic_auth_header("sk_test_abc")
        assert header.startswith("Basic ")
        assert base64.b64decode(header[len("Basic "):]).decode() == "sk_test_abc:"


# =============================================================================
# Initialization Tests
# =============================================================================


class TestHttpClientInit:
    """Tests for HttpClient initialization."""

    def test_client_created_lazily(self, http):
        """Test that no connection pool exists before first use."""
        assert http._client is None

    def test_get_headers(self, http):
        """Test request headers."""
        headers = http._get_headers()
        assert headers["Authorization"] == basic_auth_header("sk_test_abc")
        assert headers["Content-Type"] == "application/json"
        assert headers["Accept"] == "application/json"
        assert headers["User-Agent"] == f"paymongo-python/{__version__}"

    def test_build_url_keeps_base_path(self, http):
        """Test that the /v1 segment of the base URL is preserved."""
        url = http._build_url("/payment_intents/pi_1")
        assert str(url) == "https://api.paymongo.com/v1/payment_intents/pi_1"

    def test_build_url_with_query(self, http):
        """Test query params are appended and None values skipped."""
        url = http._build_url("/customers", {"limit": 10, "after": None})
        assert url.path == "/v1/customers"
        assert url.params["limit"] == "10"
        assert "after" not in url.params

    @pytest.mark.asyncio
    async def test_close(self, http):
        """Test that close releases the pool and allows re-creation."""
        client = http._get_client()
        assert http._client is client
        await http.close()
        assert http._client is None

    @pytest.mark.asyncio
    async def test_context_manager(self, config):
        """Test async context manager opens and closes the pool."""
        async with HttpClient(config) as http:
            assert http._client is not None
        assert http._client is None


# =============================================================================
# Request Tests
# =============================================================================


class TestRequest:
    """Tests for HttpClient.request."""

    @pytest.mark.asyncio
    async def test_post_sends_json(self, http, mock_http_client):
        """Test that POST bodies are sent as JSON."""
        mock_http_client.request.return_value = mock_response(200, {"data": {"id": "x"}})

        result = await http.post("/customers", {"data": {"attributes": {"email": "a@b.c"}}})

        assert result == {"data": {"id": "x"}}
        method, url, body = sent_request(mock_http_client)
        assert method == "POST"
        assert str(url) == "https://api.paymongo.com/v1/customers"
        assert body == {"data": {"attributes": {"email": "a@b.c"}}}
        headers = mock_http_client.request.call_args.kwargs["headers"]
        assert headers["Authorization"] == basic_auth_header("sk_test_abc")

    @pytest.mark.asyncio
    async def test_get_sends_no_body(self, http, mock_http_client):
        """Test that GET never carries a JSON payload."""
        mock_http_client.request.return_value = mock_response(200, {"data": []})

        await http.request("GET", "/payments", body={"ignored": True})

        assert "json" not in mock_http_client.request.call_args.kwargs

    @pytest.mark.asyncio
    async def test_delete_sends_no_body(self, http, mock_http_client):
        """Test DELETE requests."""
        mock_http_client.request.return_value = mock_response(200, {"data": {"id": "cus_1"}})

        await http.delete("/customers/cus_1")

        method, url, body = sent_request(mock_http_client)
        assert method == "DELETE"
        assert url.path == "/v1/customers/cus_1"
        assert body is None

    @pytest.mark.asyncio
    async def test_empty_success_body_returns_none(self, http, mock_http_client):
        """Test that an empty 2xx body yields None."""
        mock_http_client.request.return_value = mock_response(204)

        assert await http.delete("/customers/cus_1") is None

    @pytest.mark.asyncio
    async def test_non_json_success_body_returns_none(self, http, mock_http_client):
        """Test that a non-JSON 2xx body yields None instead of raising."""
        mock_http_client.request.return_value = mock_text_response(200, "<html>ok</html>")

        assert await http.get("/payments/pay_1") is None

    @pytest.mark.asyncio
    async def test_network_error(self, http, mock_http_client):
        """Test that transport failures become PayMongoNetworkError."""
        cause = httpx.ConnectError("connection refused")
        mock_http_client.request.side_effect = cause

        with pytest.raises(PayMongoNetworkError) as exc_info:
            await http.get("/payments")

        assert exc_info.value.original_error is cause
        assert exc_info.value.message == "Network error while communicating with PayMongo API"

    @pytest.mark.asyncio
    async def test_timeout_is_network_error(self, http, mock_http_client):
        """Test that a timeout is reported as a network error."""
        mock_http_client.request.side_effect = httpx.ReadTimeout("timed out")

        with pytest.raises(PayMongoNetworkError):
            await http.get("/payments")


# =============================================================================
# Error Handling Tests
# =============================================================================


class TestErrorHandling:
    """Tests for non-2xx responses."""

    @pytest.mark.asyncio
    async def test_400_parameter_invalid(self, http, mock_http_client):
        """Test 400 Bad Request mapping."""
        body = {
            "errors": [
                {
                    "code": "parameter_invalid",
                    "detail": "amount must be at least 2000",
                    "source": {"pointer": "amount", "attribute": "amount"},
                }
            ]
        }
        mock_http_client.request.return_value = mock_response(400, body)

        with pytest.raises(InvalidRequestError) as exc_info:
            await http.post("/payment_intents", {"data": {"attributes": {"amount": 1}}})

        error = exc_info.value
        assert error.status == 400
        assert error.code == "parameter_invalid"
        assert error.message == "amount must be at least 2000"
        assert error.raw_response == body

    @pytest.mark.asyncio
    async def test_400_with_malformed_error_entry(self, http, mock_http_client):
        """Test that an error entry with an unexpected shape still raises an API error."""
        mock_http_client.request.return_value = mock_response(
            400, {"errors": [{"code": "parameter_invalid", "detail": "bad", "source": "amount"}]}
        )

        with pytest.raises(PayMongoAPIError) as exc_info:
            await http.post("/payment_intents", {"data": {"attributes": {}}})

        assert exc_info.value.code == "parameter_invalid"
        assert exc_info.value.message == "bad"

    @pytest.mark.asyncio
    async def test_401(self, http, mock_http_client):
        """Test 401 Unauthorized mapping."""
        mock_http_client.request.return_value = mock_response(
            401, {"errors": [{"code": "api_key_invalid", "detail": "API key is invalid"}]}
        )

        with pytest.raises(AuthenticationError) as exc_info:
            await http.get("/payments")
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_404(self, http, mock_http_client):
        """Test 404 Not Found mapping."""
        mock_http_client.request.return_value = mock_response(
            404, {"errors": [{"code": "resource_not_found", "detail": "No such payment"}]}
        )

        with pytest.raises(ResourceNotFoundError) as exc_info:
            await http.get("/payments/pay_missing")
        assert exc_info.value.code == "resource_not_found"

    @pytest.mark.asyncio
    async def test_error_without_json_body(self, http, mock_http_client):
        """Test that a non-JSON error body is kept as text."""
        mock_http_client.request.return_value = mock_text_response(503, "Service Unavailable")

        with pytest.raises(PayMongoAPIError) as exc_info:
            await http.get("/payments")

        error = exc_info.value
        assert error.status == 503
        assert error.code == "unknown_error"
        assert error.message == "PayMongo API error (status 503)"
        assert error.raw_response == "Service Unavailable"
