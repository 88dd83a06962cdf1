"""Payment Intents resource."""

from collections.abc import Mapping
from typing import Any

from ..http import HttpClient
from ..models.common import DEFAULT_CURRENCY
from ..models.payment_intent import (
    AttachPaymentIntentParams,
    CreatePaymentIntentParams,
    PaymentIntent,
)
from .base import BaseResource


class PaymentIntents(BaseResource):
    """
    Payment intents track a payment from creation to completion.

    Creating an intent needs the secret key. A client holding only the public
    key can still retrieve an intent and attach a payment method to it by
    passing the intent's ``client_key``.

    Example:
        ```python
        intent = await paymongo.payment_intents.create(
            CreatePaymentIntentParams(
                amount=10000,  # PHP 100.00
                payment_method_allowed=["card", "gcash"],
            )
        )
        ```
    """

    def __init__(self, http: HttpClient) -> None:
        super().__init__(http, "/payment_intents")

    async def create(
        self, params: CreatePaymentIntentParams | Mapping[str, Any]
    ) -> PaymentIntent:
        """
        Create a payment intent.

        Args:
            params: Amount, allowed payment methods and options. ``currency``
                defaults to PHP.

        Returns:
            The created PaymentIntent
        """
        params = self._coerce_params(CreatePaymentIntentParams, params)
        attributes = params.model_dump(mode="json", exclude_none=True)
        attributes["currency"] = attributes.get("currency") or DEFAULT_CURRENCY.value

        body = await self.http.post(self._build_path(), self._wrap_body(attributes))
        return self._unwrap(PaymentIntent, body)

    async def retrieve(self, id: str, client_key: str | None = None) -> PaymentIntent:
        """
        Retrieve a payment intent.

        Args:
            id: Payment intent id
            client_key: The intent's client key, needed with a public key

        Returns:
            The PaymentIntent
        """
        params = {"client_key": client_key} if client_key else None
        body = await self.http.get(self._build_path(id), params)
        return self._unwrap(PaymentIntent, body)

    async def attach(
        self, id: str, params: AttachPaymentIntentParams | Mapping[str, Any]
    ) -> PaymentIntent:
        """
        Attach a payment method to a payment intent.

        When the returned intent's status is ``awaiting_next_action``, send the
        customer to ``attributes.next_action.redirect.url``.

        Args:
            id: Payment intent id
            params: Payment method id, plus client key and return URL as needed

        Returns:
            The updated PaymentIntent
        """
        params = self._coerce_params(AttachPaymentIntentParams, params)
        body = await self.http.post(self._build_path(id, "attach"), self._wrap_body(params))
        return self._unwrap(PaymentIntent, body)
