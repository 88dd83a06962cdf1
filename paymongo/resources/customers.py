"""Customers resource."""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from typing import Any

import structlog

from ..http import HttpClient
from ..models.common import ListResult
from ..models.customer import (
    CreateCustomerParams,
    Customer,
    ListCustomersParams,
    UpdateCustomerParams,
)
from ..models.payment_method import PaymentMethod
from .base import BaseResource

logger = structlog.get_logger(__name__)


class Customers(BaseResource):
    """Customer records and their saved payment methods."""

    def __init__(self, http: HttpClient) -> None:
        super().__init__(http, "/customers")

    async def create(self, params: CreateCustomerParams | Mapping[str, Any]) -> Customer:
        """
        Create a customer.

        Args:
            params: Contact details, default payment method and metadata

        Returns:
            The created Customer
        """
        params = self._coerce_params(CreateCustomerParams, params)
        body = await self.http.post(self._build_path(), self._wrap_body(params))
        return self._unwrap(Customer, body)

    async def retrieve(self, id: str) -> Customer:
        """Retrieve a customer by id."""
        body = await self.http.get(self._build_path(id))
        return self._unwrap(Customer, body)

    async def list(
        self, params: ListCustomersParams | Mapping[str, Any] | None = None
    ) -> ListResult[Customer]:
        """
        List customers.

        Args:
            params: Cursor pagination plus ``email`` / ``phone`` filters

        Returns:
            ListResult with ``items`` and ``has_more``
        """
        return await self._list(Customer, self._coerce_params(ListCustomersParams, params))

    def list_all(
        self, params: ListCustomersParams | Mapping[str, Any] | None = None
    ) -> AsyncIterator[Customer]:
        """Iterate over every customer matching ``params``, fetching pages as needed."""
        return self._auto_paginate(Customer, self._coerce_params(ListCustomersParams, params))

    async def update(
        self, id: str, params: UpdateCustomerParams | Mapping[str, Any]
    ) -> Customer:
        """
        Update a customer.

        Args:
            id: Customer id
            params: Fields to update

        Returns:
            The updated Customer
        """
        params = self._coerce_params(UpdateCustomerParams, params)
        body = await self.http.patch(self._build_path(id), self._wrap_body(params))
        return self._unwrap(Customer, body)

    async def delete(self, id: str) -> Customer:
        """
        Delete a customer.

        Returns:
            The last snapshot of the deleted Customer
        """
        body = await self.http.delete(self._build_path(id))
        logger.info("Customer deleted", customer_id=id)
        return self._unwrap(Customer, body)

    async def get_payment_methods(self, customer_id: str) -> list[PaymentMethod]:
        """
        List the payment methods saved to a customer.

        Returns:
            PaymentMethod list (this endpoint is not paginated)
        """
        body = await self.http.get(self._build_path(customer_id, "payment_methods"))
        if not isinstance(body, Mapping):
            return []
        return [PaymentMethod.model_validate(item) for item in body.get("data") or []]

    async def delete_payment_method(
        self, customer_id: str, payment_method_id: str
    ) -> PaymentMethod:
        """
        Detach a saved payment method from a customer.

        Returns:
            The last snapshot of the removed PaymentMethod
        """
        body = await self.http.delete(
            self._build_path(customer_id, f"payment_methods/{payment_method_id}")
        )
        logger.info(
            "Customer payment method deleted",
            customer_id=customer_id,
            payment_method_id=payment_method_id,
        )
        return self._unwrap(PaymentMethod, body)
