"""Checkout session models."""

from enum import Enum
from typing import Literal

from pydantic import Field

from .common import (
    BaseAttributes,
    BillingDetails,
    Currency,
    Metadata,
    PayMongoModel,
    PayMongoParams,
    ResourceReference,
    ResponseCurrency,
    open_enum,
)
from .payment_intent import PaymentIntent
from .payment_method import PaymentMethodType, ResponsePaymentMethodType


class CheckoutSessionStatus(str, Enum):
    """Checkout session statuses."""

    ACTIVE = "active"
    EXPIRED = "expired"
    PAID = "paid"


class LineItem(PayMongoModel):
    """A line item as returned on a checkout session."""

    name: str
    amount: int = Field(..., description="Unit amount in minor currency units")
    currency: ResponseCurrency
    quantity: int
    description: str | None = None
    images: list[str] | None = None


class CheckoutSessionAttributes(BaseAttributes):
    """Attributes of a checkout session."""

    checkout_url: str
    status: open_enum(CheckoutSessionStatus)
    line_items: list[LineItem] = Field(default_factory=list)
    payment_method_types: list[ResponsePaymentMethodType] = Field(default_factory=list)
    success_url: str | None = None
    cancel_url: str | None = None
    client_key: str | None = None
    description: str | None = None
    billing: BillingDetails | None = None
    billing_information_fields_editable: str | None = None
    merchant: str | None = None
    metadata: Metadata | None = None
    payment_intent: PaymentIntent | None = None
    payments: list[ResourceReference] = Field(default_factory=list)
    reference_number: str | None = None
    send_email_receipt: bool | None = None
    show_description: bool | None = None
    show_line_items: bool | None = None


class CheckoutSession(PayMongoModel):
    """Checkout session resource: a PayMongo-hosted payment page."""

    id: str
    type: Literal["checkout_session"]
    attributes: CheckoutSessionAttributes


class LineItemInput(PayMongoParams):
    """A line item to sell in a checkout session. ``currency`` defaults to PHP."""

    name: str
    amount: int = Field(..., description="Unit amount in minor currency units")
    quantity: int
    currency: Currency | None = None
    description: str | None = None
    images: list[str] | None = None


class CreateCheckoutSessionParams(PayMongoParams):
    """Parameters for ``CheckoutSessions.create``."""

    line_items: list[LineItemInput]
    payment_method_types: list[PaymentMethodType]
    success_url: str
    cancel_url: str | None = None
    description: str | None = None
    billing: BillingDetails | None = None
    billing_information_fields_editable: Literal["enabled", "disabled"] | None = None
    send_email_receipt: bool | None = None
    show_description: bool | None = None
    show_line_items: bool | None = None
    reference_number: str | None = None
    metadata: Metadata | None = None
