"""Data models for the PayMongo SDK."""

from .checkout_session import (
    CheckoutSession,
    CheckoutSessionAttributes,
    CheckoutSessionStatus,
    CreateCheckoutSessionParams,
    LineItem,
    LineItemInput,
)
from .common import (
    DEFAULT_CURRENCY,
    Address,
    BaseAttributes,
    BillingDetails,
    Currency,
    ListResult,
    Metadata,
    PaginationParams,
    PayMongoModel,
    PayMongoParams,
    ResourceReference,
)
from .customer import (
    CreateCustomerParams,
    Customer,
    CustomerAttributes,
    ListCustomersParams,
    UpdateCustomerParams,
)
from .payment import (
    ListPaymentsParams,
    Payment,
    PaymentAttributes,
    PaymentReference,
    PaymentSource,
    PaymentStatus,
)
from .payment_intent import (
    AttachPaymentIntentParams,
    CaptureType,
    CardPaymentOptions,
    CreatePaymentIntentParams,
    NextAction,
    NextActionRedirect,
    PaymentError,
    PaymentIntent,
    PaymentIntentAttributes,
    PaymentIntentStatus,
    PaymentMethodOptions,
    SetupFutureUsage,
)
from .payment_method import (
    CardDetails,
    CardInput,
    CreatePaymentMethodParams,
    PaymentMethod,
    PaymentMethodAttributes,
    PaymentMethodType,
    UpdatePaymentMethodParams,
)
from .refund import (
    CreateRefundParams,
    ListRefundsParams,
    Refund,
    RefundAttributes,
    RefundReason,
    RefundStatus,
)
from .webhook import (
    CreateWebhookParams,
    UpdateWebhookParams,
    Webhook,
    WebhookAttributes,
    WebhookEvent,
    WebhookEventAttributes,
    WebhookEventType,
    WebhookStatus,
)

__all__ = [
    # Common
    "DEFAULT_CURRENCY",
    "Address",
    "BaseAttributes",
    "BillingDetails",
    "Currency",
    "ListResult",
    "Metadata",
    "PaginationParams",
    "PayMongoModel",
    "PayMongoParams",
    "ResourceReference",
    # Payment intents
    "AttachPaymentIntentParams",
    "CaptureType",
    "CardPaymentOptions",
    "CreatePaymentIntentParams",
    "NextAction",
    "NextActionRedirect",
    "PaymentError",
    "PaymentIntent",
    "PaymentIntentAttributes",
    "PaymentIntentStatus",
    "PaymentMethodOptions",
    "SetupFutureUsage",
    # Payment methods
    "CardDetails",
    "CardInput",
    "CreatePaymentMethodParams",
    "PaymentMethod",
    "PaymentMethodAttributes",
    "PaymentMethodType",
    "UpdatePaymentMethodParams",
    # Payments
    "ListPaymentsParams",
    "Payment",
    "PaymentAttributes",
    "PaymentReference",
    "PaymentSource",
    "PaymentStatus",
    # Refunds
    "CreateRefundParams",
    "ListRefundsParams",
    "Refund",
    "RefundAttributes",
    "RefundReason",
    "RefundStatus",
    # Customers
    "CreateCustomerParams",
    "Customer",
    "CustomerAttributes",
    "ListCustomersParams",
    "UpdateCustomerParams",
    # Webhooks
    "CreateWebhookParams",
    "UpdateWebhookParams",
    "Webhook",
    "WebhookAttributes",
    "WebhookEvent",
    "WebhookEventAttributes",
    "WebhookEventType",
    "WebhookStatus",
    # Checkout sessions
    "CheckoutSession",
    "CheckoutSessionAttributes",
    "CheckoutSessionStatus",
    "CreateCheckoutSessionParams",
    "LineItem",
    "LineItemInput",
]
