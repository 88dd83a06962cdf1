"""Payment models."""

from enum import Enum
from typing import Any, Literal

from pydantic import Field

from .common import (
    BaseAttributes,
    BillingDetails,
    Metadata,
    PaginationParams,
    PayMongoModel,
    ResponseCurrency,
    open_enum,
)
from .refund import Refund


class PaymentStatus(str, Enum):
    """Payment statuses."""

    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    EXPIRED = "expired"


class PaymentSource(PayMongoModel):
    """What the payment was created from."""

    id: str
    type: str = Field(..., description="payment_intent or source")


class PaymentAttributes(BaseAttributes):
    """
    Attributes of a payment.

    ``amount``, ``fee`` and ``net_amount`` are minor currency units.
    """

    amount: int
    currency: ResponseCurrency
    status: open_enum(PaymentStatus)
    fee: int = 0
    net_amount: int = 0
    source: PaymentSource | None = None
    disputed: bool = False
    description: str | None = None
    statement_descriptor: str | None = None
    billing: BillingDetails | None = None
    access_url: str | None = None
    balance_transaction_id: str | None = None
    external_reference_number: str | None = None
    origin: str | None = None
    payout: str | None = None
    tax_amount: int | None = None
    metadata: Metadata | None = None
    refunds: list[Refund] = Field(default_factory=list)
    taxes: list[Any] = Field(default_factory=list)
    paid_at: int | None = None


class Payment(PayMongoModel):
    """Payment resource. Created by PayMongo when a payment intent is paid or fails."""

    id: str
    type: Literal["payment"]
    attributes: PaymentAttributes


# Payments embedded in a payment intent use the same envelope
PaymentReference = Payment


class ListPaymentsParams(PaginationParams):
    """Parameters for ``Payments.list``."""

    pass
