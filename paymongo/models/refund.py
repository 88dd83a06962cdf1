"""Refund models."""

from enum import Enum
from typing import Literal

from pydantic import Field

from .common import (
    BaseAttributes,
    Metadata,
    PaginationParams,
    PayMongoModel,
    PayMongoParams,
    ResponseCurrency,
    open_enum,
)


class RefundStatus(str, Enum):
    """Refund statuses."""

    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class RefundReason(str, Enum):
    """Reasons PayMongo accepts for a refund."""

    DUPLICATE = "duplicate"
    FRAUDULENT = "fraudulent"
    REQUESTED_BY_CUSTOMER = "requested_by_customer"
    OTHERS = "others"


class RefundAttributes(BaseAttributes):
    """Attributes of a refund."""

    amount: int = Field(..., description="Amount in minor currency units")
    currency: ResponseCurrency | None = None
    payment_id: str
    reason: open_enum(RefundReason)
    status: open_enum(RefundStatus)
    notes: str | None = None
    metadata: Metadata | None = None
    balance_transaction_id: str | None = None
    payout: str | None = None


class Refund(PayMongoModel):
    """Refund resource."""

    id: str
    type: Literal["refund"]
    attributes: RefundAttributes


class CreateRefundParams(PayMongoParams):
    """Parameters for ``Refunds.create``."""

    amount: int = Field(..., description="Amount to refund in minor currency units")
    payment_id: str
    reason: RefundReason
    notes: str | None = None
    metadata: Metadata | None = None


class ListRefundsParams(PaginationParams):
    """Parameters for ``Refunds.list``."""

    payment_id: str | None = Field(None, description="Only refunds of this payment")
