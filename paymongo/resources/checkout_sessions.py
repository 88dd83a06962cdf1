"""Checkout Sessions resource."""

from collections.abc import Mapping
from typing import Any

from ..http import HttpClient
from ..models.checkout_session import (
    CheckoutSession,
    CreateCheckoutSessionParams,
    LineItemInput,
)
from ..models.common import DEFAULT_CURRENCY
from .base import BaseResource


def line_item_payload(item: LineItemInput) -> dict[str, Any]:
    """Shape one line item for the API. Currency defaults to PHP."""
    payload = {
        "amount": item.amount,
        "currency": item.currency.value if item.currency else DEFAULT_CURRENCY.value,
        "description": item.description,
        "images": item.images,
        "name": item.name,
        "quantity": item.quantity,
    }
    return {key: value for key, value in payload.items() if value is not None}


class CheckoutSessions(BaseResource):
    """
    PayMongo-hosted checkout pages.

    Send the customer to ``attributes.checkout_url`` of the created session.
    """

    def __init__(self, http: HttpClient) -> None:
        super().__init__(http, "/checkout_sessions")

    async def create(
        self, params: CreateCheckoutSessionParams | Mapping[str, Any]
    ) -> CheckoutSession:
        """
        Create a checkout session.

        Args:
            params: Line items, allowed payment methods, redirect URLs and
                display options

        Returns:
            The created CheckoutSession
        """
        params = self._coerce_params(CreateCheckoutSessionParams, params)
        # field names are already snake_case; metadata keys go out as given
        attributes = params.model_dump(mode="json", exclude_none=True, exclude={"line_items"})
        attributes["line_items"] = [line_item_payload(item) for item in params.line_items]
        body = {"data": {"attributes": attributes}}

        response = await self.http.post(self._build_path(), body)
        return self._unwrap(CheckoutSession, response)

    async def retrieve(self, id: str) -> CheckoutSession:
        """Retrieve a checkout session by id."""
        body = await self.http.get(self._build_path(id))
        return self._unwrap(CheckoutSession, body)

    async def expire(self, id: str) -> CheckoutSession:
        """Expire an active checkout session so it can no longer be paid."""
        body = await self.http.post(self._build_path(id, "expire"))
        return self._unwrap(CheckoutSession, body)
