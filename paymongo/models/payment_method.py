"""Payment method models."""

from enum import Enum
from typing import Any, Literal

from pydantic import Field

from .common import (
    BaseAttributes,
    BillingDetails,
    Metadata,
    PayMongoModel,
    PayMongoParams,
    open_enum,
)


class PaymentMethodType(str, Enum):
    """Payment method kinds supported by PayMongo."""

    CARD = "card"
    GCASH = "gcash"
    GRAB_PAY = "grab_pay"
    PAYMAYA = "paymaya"
    DOB = "dob"
    DOB_UBP = "dob_ubp"
    BRANKAS_BDO = "brankas_bdo"
    BRANKAS_LANDBANK = "brankas_landbank"
    BRANKAS_METROBANK = "brankas_metrobank"
    BILLEASE = "billease"
    QRPH = "qrph"


ResponsePaymentMethodType = open_enum(PaymentMethodType)


class CardDetails(PayMongoModel):
    """
    Card details echoed back by the API.

    Only brand, last4 and expiry come back; the card number and CVC are never
    returned. Non-card methods may return other detail fields, which are kept
    as extra attributes.
    """

    brand: str | None = Field(None, description="e.g. visa, mastercard, jcb, amex")
    country: str | None = None
    exp_month: int | None = None
    exp_year: int | None = None
    last4: str | None = None
    issuer: str | None = None
    cvc_check: str | None = Field(None, description="pass, fail, unavailable or unchecked")
    three_d_secure_status: str | None = Field(
        None, description="authenticated, not_authenticated, not_enrolled or error"
    )


class PaymentMethodAttributes(BaseAttributes):
    """Attributes of a payment method."""

    type: ResponsePaymentMethodType
    billing: BillingDetails | None = None
    details: CardDetails | None = None
    metadata: Metadata | None = None


class PaymentMethod(PayMongoModel):
    """Payment method resource."""

    id: str
    type: Literal["payment_method"]
    attributes: PaymentMethodAttributes


class CardInput(PayMongoParams):
    """Raw card details. Write-only: sent on creation, never returned."""

    card_number: str
    exp_month: int
    exp_year: int
    cvc: str


class CreatePaymentMethodParams(PayMongoParams):
    """Parameters for ``PaymentMethods.create``."""

    type: PaymentMethodType
    details: CardInput | None = Field(None, description="Required when type is card")
    billing: BillingDetails | dict[str, Any] | None = None
    metadata: Metadata | None = None


class UpdatePaymentMethodParams(PayMongoParams):
    """Parameters for ``PaymentMethods.update``."""

    billing: BillingDetails | dict[str, Any] | None = None
    metadata: Metadata | None = None
