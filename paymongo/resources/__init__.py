"""Resource clients, one per PayMongo API resource."""

from .base import BaseResource, snake_case_key, to_snake_case
from .checkout_sessions import CheckoutSessions
from .customers import Customers
from .payment_intents import PaymentIntents
from .payment_methods import PaymentMethods
from .payments import Payments
from .refunds import Refunds
from .webhooks import Webhooks

__all__ = [
    "BaseResource",
    "CheckoutSessions",
    "Customers",
    "PaymentIntents",
    "PaymentMethods",
    "Payments",
    "Refunds",
    "Webhooks",
    "snake_case_key",
    "to_snake_case",
]
