"""Payments resource."""

from collections.abc import AsyncIterator, Mapping
from typing import Any

from ..http import HttpClient
from ..models.common import ListResult
from ..models.payment import ListPaymentsParams, Payment
from .base import BaseResource


class Payments(BaseResource):
    """
    Payments are read-only records PayMongo creates when a payment intent
    succeeds or fails.
    """

    def __init__(self, http: HttpClient) -> None:
        super().__init__(http, "/payments")

    async def retrieve(self, id: str) -> Payment:
        """Retrieve a payment by id."""
        body = await self.http.get(self._build_path(id))
        return self._unwrap(Payment, body)

    async def list(
        self, params: ListPaymentsParams | Mapping[str, Any] | None = None
    ) -> ListResult[Payment]:
        """
        List payments, newest first.

        Args:
            params: Cursor pagination (``after``, ``before``, ``limit``)

        Returns:
            ListResult with ``items`` and ``has_more``
        """
        return await self._list(Payment, self._coerce_params(ListPaymentsParams, params))

    def list_all(
        self, params: ListPaymentsParams | Mapping[str, Any] | None = None
    ) -> AsyncIterator[Payment]:
        """
        Iterate over every payment, fetching pages as needed.

        Example:
            ```python
            async for payment in paymongo.payments.list_all({"limit": 100}):
                ...
            ```
        """
        return self._auto_paginate(Payment, self._coerce_params(ListPaymentsParams, params))
