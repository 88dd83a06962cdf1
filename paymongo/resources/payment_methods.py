"""Payment Methods resource."""

from collections.abc import Mapping
from typing import Any

from ..http import HttpClient
from ..models.payment_method import (
    CardInput,
    CreatePaymentMethodParams,
    PaymentMethod,
    PaymentMethodType,
    UpdatePaymentMethodParams,
)
from .base import BaseResource

# CardInput attribute -> API field name
CARD_DETAIL_FIELDS: dict[str, str] = {
    "card_number": "card_number",
    "exp_month": "exp_month",
    "exp_year": "exp_year",
    "cvc": "cvc",
}


def card_details_payload(card: CardInput) -> dict[str, Any]:
    """Map card input onto the API's ``details`` fields."""
    return {api_field: getattr(card, attr) for attr, api_field in CARD_DETAIL_FIELDS.items()}


class PaymentMethods(BaseResource):
    """Payment methods: cards, e-wallets, online banking and QR Ph."""

    def __init__(self, http: HttpClient) -> None:
        super().__init__(http, "/payment_methods")

    async def create(
        self, params: CreatePaymentMethodParams | Mapping[str, Any]
    ) -> PaymentMethod:
        """
        Create a payment method.

        Card details are only sent for ``type == "card"``; they are write-only
        and never returned by the API.

        Args:
            params: Method type, card details, billing and metadata

        Returns:
            The created PaymentMethod
        """
        params = self._coerce_params(CreatePaymentMethodParams, params)
        attributes = params.model_dump(
            mode="json", exclude_none=True, include={"type", "billing", "metadata"}
        )
        if params.details is not None and params.type == PaymentMethodType.CARD:
            attributes["details"] = card_details_payload(params.details)

        body = await self.http.post(self._build_path(), {"data": {"attributes": attributes}})
        return self._unwrap(PaymentMethod, body)

    async def retrieve(self, id: str) -> PaymentMethod:
        """Retrieve a payment method by id."""
        body = await self.http.get(self._build_path(id))
        return self._unwrap(PaymentMethod, body)

    async def update(
        self, id: str, params: UpdatePaymentMethodParams | Mapping[str, Any]
    ) -> PaymentMethod:
        """
        Update a payment method's billing details or metadata.

        Args:
            id: Payment method id
            params: Fields to update

        Returns:
            The updated PaymentMethod
        """
        params = self._coerce_params(UpdatePaymentMethodParams, params)
        body = await self.http.patch(self._build_path(id), self._wrap_body(params))
        return self._unwrap(PaymentMethod, body)
