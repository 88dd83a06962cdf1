"""Pytest configuration for PayMongo SDK tests."""

from unittest.mock import AsyncMock, patch

import pytest

from paymongo import PayMongo

SECRET_KEY = "sk_test_abc"
PUBLIC_KEY = "pk_test_abc"


@pytest.fixture(autouse=True)
def configure_structlog():
    """Configure structlog for testing."""
    import structlog

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@pytest.fixture(autouse=True)
def reset_shared_instance():
    """Make sure no test sees another test's shared client."""
    PayMongo.reset_instance()
    yield
    PayMongo.reset_instance()


@pytest.fixture
def paymongo():
    """A server-side client."""
    return PayMongo(secret_key=SECRET_KEY)


@pytest.fixture
def public_paymongo():
    """A client-side client."""
    return PayMongo(public_key=PUBLIC_KEY)


@pytest.fixture
def mock_http(paymongo):
    """The mocked ``httpx.AsyncClient`` behind ``paymongo``; set ``request.return_value``."""
    with patch.object(paymongo.http, "_get_client") as mock_get_client:
        mock_http_client = AsyncMock()
        mock_get_client.return_value = mock_http_client
        yield mock_http_client

