"""Payment intent models."""

from enum import Enum
from typing import Any, Literal

from pydantic import Field

from .common import (
    BaseAttributes,
    Currency,
    Metadata,
    PayMongoModel,
    PayMongoParams,
    ResponseCurrency,
    open_enum,
)
from .payment import Payment
from .payment_method import PaymentMethodType, ResponsePaymentMethodType


class PaymentIntentStatus(str, Enum):
    """
    Payment intent statuses.

    Transitions happen on PayMongo's side; the client only reports them.
    """

    AWAITING_PAYMENT_METHOD = "awaiting_payment_method"
    AWAITING_NEXT_ACTION = "awaiting_next_action"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    AWAITING_CAPTURE = "awaiting_capture"
    CANCELLED = "cancelled"


class CaptureType(str, Enum):
    """When an authorized payment is captured."""

    AUTOMATIC = "automatic"
    MANUAL = "manual"


class SetupFutureUsage(str, Enum):
    """Whether the payment method is saved for later."""

    ON_SESSION = "on_session"
    OFF_SESSION = "off_session"


class NextActionRedirect(PayMongoModel):
    """Where to send the customer to complete the payment."""

    url: str
    return_url: str | None = None


class NextAction(PayMongoModel):
    """Action the customer must take, e.g. 3-D Secure or e-wallet authorization."""

    type: str = "redirect"
    redirect: NextActionRedirect


class PaymentError(PayMongoModel):
    """Last error recorded while attempting a payment."""

    code: str | None = None
    detail: str | None = None
    source: dict[str, Any] | None = None


class CardPaymentOptions(PayMongoModel):
    """Card-specific payment options."""

    request_three_d_secure: str | None = Field(None, description="any or automatic")


class PaymentMethodOptions(PayMongoModel):
    """Per-method payment options."""

    card: CardPaymentOptions | None = None


class PaymentIntentAttributes(BaseAttributes):
    """
    Attributes of a payment intent.

    ``client_key`` lets a public-key client retrieve the intent and attach a
    payment method to it without the secret key.
    """

    amount: int = Field(..., description="Amount in minor currency units")
    currency: ResponseCurrency
    status: open_enum(PaymentIntentStatus)
    client_key: str | None = None
    capture_type: open_enum(CaptureType) | None = None
    description: str | None = None
    statement_descriptor: str | None = None
    last_payment_error: PaymentError | None = None
    metadata: Metadata | None = None
    next_action: NextAction | None = None
    payment_method_allowed: list[ResponsePaymentMethodType] = Field(default_factory=list)
    payment_method_options: PaymentMethodOptions | None = None
    payments: list[Payment] = Field(default_factory=list)
    setup_future_usage: open_enum(SetupFutureUsage) | None = None


class PaymentIntent(PayMongoModel):
    """Payment intent resource."""

    id: str
    type: Literal["payment_intent"]
    attributes: PaymentIntentAttributes


class CreatePaymentIntentParams(PayMongoParams):
    """Parameters for ``PaymentIntents.create``. ``currency`` defaults to PHP."""

    amount: int = Field(..., description="Amount in minor currency units")
    payment_method_allowed: list[PaymentMethodType]
    currency: Currency | None = None
    description: str | None = None
    statement_descriptor: str | None = None
    metadata: Metadata | None = None
    capture_type: CaptureType | None = None
    setup_future_usage: SetupFutureUsage | None = None
    payment_method_options: PaymentMethodOptions | dict[str, Any] | None = None


class AttachPaymentIntentParams(PayMongoParams):
    """Parameters for ``PaymentIntents.attach``."""

    payment_method: str = Field(..., description="Payment method id")
    client_key: str | None = Field(None, description="Required when using a public key")
    return_url: str | None = Field(None, description="Where to return after a redirect")
