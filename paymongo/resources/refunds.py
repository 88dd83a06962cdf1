"""Refunds resource."""

from collections.abc import AsyncIterator, Mapping
from typing import Any

from ..http import HttpClient
from ..models.common import ListResult
from ..models.refund import CreateRefundParams, ListRefundsParams, Refund
from .base import BaseResource


class Refunds(BaseResource):
    """Full or partial refunds of paid payments."""

    def __init__(self, http: HttpClient) -> None:
        super().__init__(http, "/refunds")

    async def create(self, params: CreateRefundParams | Mapping[str, Any]) -> Refund:
        """
        Refund a payment.

        Args:
            params: Amount (minor units), payment id, reason, notes, metadata

        Returns:
            The created Refund
        """
        params = self._coerce_params(CreateRefundParams, params)
        body = await self.http.post(self._build_path(), self._wrap_body(params))
        return self._unwrap(Refund, body)

    async def retrieve(self, id: str) -> Refund:
        """Retrieve a refund by id."""
        body = await self.http.get(self._build_path(id))
        return self._unwrap(Refund, body)

    async def list(
        self, params: ListRefundsParams | Mapping[str, Any] | None = None
    ) -> ListResult[Refund]:
        """
        List refunds.

        Args:
            params: Cursor pagination plus a ``payment_id`` filter

        Returns:
            ListResult with ``items`` and ``has_more``
        """
        return await self._list(Refund, self._coerce_params(ListRefundsParams, params))

    def list_all(
        self, params: ListRefundsParams | Mapping[str, Any] | None = None
    ) -> AsyncIterator[Refund]:
        """Iterate over every refund matching ``params``, fetching pages as needed."""
        return self._auto_paginate(Refund, self._coerce_params(ListRefundsParams, params))
