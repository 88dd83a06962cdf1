"""Webhook models."""

from enum import Enum
from typing import Any, Literal

from .common import BaseAttributes, PayMongoModel, PayMongoParams, open_enum


class WebhookEventType(str, Enum):
    """Events a webhook can subscribe to."""

    PAYMENT_PAID = "payment.paid"
    PAYMENT_FAILED = "payment.failed"
    PAYMENT_REFUNDED = "payment.refunded"
    PAYMENT_REFUND_UPDATED = "payment.refund.updated"
    SOURCE_CHARGEABLE = "source.chargeable"
    CHECKOUT_SESSION_PAYMENT_PAID = "checkout_session.payment.paid"
    SUBSCRIPTION_PAYMENT_PAID = "subscription.payment.paid"
    SUBSCRIPTION_PAYMENT_FAILED = "subscription.payment.failed"


class WebhookStatus(str, Enum):
    """Webhook statuses."""

    ENABLED = "enabled"
    DISABLED = "disabled"


ResponseWebhookEventType = open_enum(WebhookEventType)


class WebhookAttributes(BaseAttributes):
    """
    Attributes of a webhook.

    ``secret_key`` is what the receiving backend uses to verify delivery
    signatures. This library never verifies deliveries.
    """

    url: str
    events: list[ResponseWebhookEventType]
    status: open_enum(WebhookStatus)
    secret_key: str | None = None


class Webhook(PayMongoModel):
    """Webhook resource."""

    id: str
    type: Literal["webhook"]
    attributes: WebhookAttributes


class WebhookEventAttributes(BaseAttributes):
    """Attributes of a delivered event."""

    type: ResponseWebhookEventType
    data: dict[str, Any]
    previous_data: dict[str, Any] | None = None


class WebhookEvent(PayMongoModel):
    """
    Event payload delivered to a webhook URL.

    Parse-only: use it to read a delivery after your own signature check.
    """

    id: str
    type: Literal["event"]
    attributes: WebhookEventAttributes


class CreateWebhookParams(PayMongoParams):
    """Parameters for ``Webhooks.create``."""

    url: str
    events: list[WebhookEventType]


class UpdateWebhookParams(PayMongoParams):
    """Parameters for ``Webhooks.update``."""

    url: str | None = None
    events: list[WebhookEventType] | None = None
