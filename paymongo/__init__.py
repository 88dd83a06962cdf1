"""
paymongo - Async Python SDK for the PayMongo payments API.

Example usage:
    from paymongo import PayMongo, CreatePaymentIntentParams

    async with PayMongo(secret_key="sk_test_...") as paymongo:
        # Create a payment intent for PHP 100.00
        intent = await paymongo.payment_intents.create(
            CreatePaymentIntentParams(
                amount=10000,
                payment_method_allowed=["card", "gcash"],
            )
        )

        # Page through customers
        page = await paymongo.customers.list({"limit": 10})
        if page.has_more:
            page = await paymongo.customers.list({"after": page.next_cursor})
"""

from .client import PayMongo
from .config import DEFAULT_BASE_URL, PayMongoConfig, ResolvedConfig
from .exceptions import (
    AuthenticationError,
    ErrorDetail,
    ErrorSource,
    InvalidRequestError,
    PayMongoAPIError,
    PayMongoConfigError,
    PayMongoError,
    PayMongoNetworkError,
    PermissionDeniedError,
    RateLimitError,
    ResourceNotFoundError,
)
from .http import HttpClient
from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all
from .resources import (
    BaseResource,
    CheckoutSessions,
    Customers,
    PaymentIntents,
    PaymentMethods,
    Payments,
    Refunds,
    Webhooks,
)
from .version import __version__

__all__ = [
    # Client
    "PayMongo",
    "HttpClient",
    # Config
    "DEFAULT_BASE_URL",
    "PayMongoConfig",
    "ResolvedConfig",
    # Resources
    "BaseResource",
    "CheckoutSessions",
    "Customers",
    "PaymentIntents",
    "PaymentMethods",
    "Payments",
    "Refunds",
    "Webhooks",
    # Exceptions
    "PayMongoError",
    "PayMongoAPIError",
    "PayMongoConfigError",
    "PayMongoNetworkError",
    "AuthenticationError",
    "InvalidRequestError",
    "PermissionDeniedError",
    "RateLimitError",
    "ResourceNotFoundError",
    "ErrorDetail",
    "ErrorSource",
    # Version
    "__version__",
    # Models
    *_models_all,
]
