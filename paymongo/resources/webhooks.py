"""Webhooks resource."""

from collections.abc import Mapping
from typing import Any

from ..http import HttpClient
from ..models.common import ListResult
from ..models.webhook import CreateWebhookParams, UpdateWebhookParams, Webhook
from .base import BaseResource


class Webhooks(BaseResource):
    """
    Webhook endpoint registration.

    This only manages subscriptions. Receiving deliveries and verifying their
    signatures with the webhook's ``secret_key`` is up to the receiving backend.
    """

    def __init__(self, http: HttpClient) -> None:
        super().__init__(http, "/webhooks")

    async def create(self, params: CreateWebhookParams | Mapping[str, Any]) -> Webhook:
        """
        Register a webhook endpoint.

        The returned ``attributes.secret_key`` is only issued here; store it.

        Args:
            params: Target URL and subscribed event types

        Returns:
            The created Webhook
        """
        params = self._coerce_params(CreateWebhookParams, params)
        body = await self.http.post(self._build_path(), self._wrap_body(params))
        return self._unwrap(Webhook, body)

    async def retrieve(self, id: str) -> Webhook:
        """Retrieve a webhook by id."""
        body = await self.http.get(self._build_path(id))
        return self._unwrap(Webhook, body)

    async def list(self) -> ListResult[Webhook]:
        """List all webhooks."""
        return await self._list(Webhook)

    async def update(self, id: str, params: UpdateWebhookParams | Mapping[str, Any]) -> Webhook:
        """
        Change a webhook's URL or events.

        Args:
            id: Webhook id
            params: Fields to update

        Returns:
            The updated Webhook
        """
        params = self._coerce_params(UpdateWebhookParams, params)
        body = await self.http.patch(self._build_path(id), self._wrap_body(params))
        return self._unwrap(Webhook, body)

    async def enable(self, id: str) -> Webhook:
        """Enable a webhook."""
        body = await self.http.post(self._build_path(id, "enable"))
        return self._unwrap(Webhook, body)

    async def disable(self, id: str) -> Webhook:
        """Disable a webhook."""
        body = await self.http.post(self._build_path(id, "disable"))
        return self._unwrap(Webhook, body)
