"""
Base class for PayMongo API resources.

Request bodies go out as ``{"data": {"attributes": {...}}}`` with snake_case
keys; responses come back as ``{"data": {...}}`` or
``{"data": [...], "has_more": bool}`` and are unwrapped here.
"""

import re
from collections.abc import AsyncIterator, Mapping
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel

from ..http import HttpClient
from ..models.common import ListResult, PayMongoParams

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
ParamsT = TypeVar("ParamsT", bound=PayMongoParams)

_UPPER = re.compile(r"(?<=[^_])([A-Z])")


def snake_case_key(key: str) -> str:
    """
    Convert a camelCase key to snake_case.

    Keys that are already snake_case come back unchanged. A leading capital is
    lowercased without an underscore prefix (``"Foo"`` becomes ``"foo"``).
    """
    return _UPPER.sub(r"_\1", key).lower()


def to_snake_case(obj: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    """
    Recursively convert mapping keys to snake_case.

    Nested mappings (and pydantic models) are converted too. Sequences are
    left alone: their elements keep their keys. ``None`` values are dropped,
    so the result never contains an explicit null.
    """
    if isinstance(obj, BaseModel):
        obj = obj.model_dump(mode="json", exclude_none=True)

    result: dict[str, Any] = {}
    for key, value in obj.items():
        if value is None:
            continue
        if isinstance(value, (Mapping, BaseModel)):
            value = to_snake_case(value)
        elif isinstance(value, (list, tuple)):
            value = [
                item.model_dump(mode="json", exclude_none=True)
                if isinstance(item, BaseModel)
                else item
                for item in value
            ]
        result[snake_case_key(key)] = value
    return result


class BaseResource:
    """
    Common plumbing for resource clients.

    Subclasses bind a fixed ``base_path`` (e.g. ``/payment_intents``) and call
    the shared ``HttpClient``.
    """

    def __init__(self, http: HttpClient, base_path: str) -> None:
        self.http = http
        self.base_path = base_path

    def _build_path(self, id: str | None = None, suffix: str | None = None) -> str:
        """Build ``{base_path}[/{id}][/{suffix}]``."""
        path = self.base_path
        if id:
            path = f"{path}/{id}"
        if suffix:
            path = f"{path}/{suffix}"
        return path

    @staticmethod
    def _coerce_params(
        params_cls: type[ParamsT], params: ParamsT | Mapping[str, Any] | None
    ) -> ParamsT:
        """Accept a params model or a plain mapping (snake_case or camelCase keys)."""
        if params is None:
            return params_cls()
        if isinstance(params, params_cls):
            return params
        if isinstance(params, BaseModel):
            params = params.model_dump(exclude_none=True)
        return params_cls.model_validate(params)

    @staticmethod
    def _query(params: PayMongoParams) -> dict[str, Any]:
        """Dump list parameters for the query string."""
        return params.model_dump(mode="json", exclude_none=True)

    def _wrap_body(self, attributes: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
        """Wrap request attributes in the standard PayMongo envelope."""
        return {"data": {"attributes": to_snake_case(attributes)}}

    @staticmethod
    def _unwrap(model: type[ModelT], body: Any) -> ModelT:
        """
        Parse a single-resource envelope and return the inner resource.

        A success response without a JSON body, or without ``data``, yields None.
        """
        if not isinstance(body, Mapping) or body.get("data") is None:
            return None  # type: ignore[return-value]
        return model.model_validate(body["data"])

    @staticmethod
    def _unwrap_list(model: type[ModelT], body: Any) -> ListResult[ModelT]:
        """Parse a list envelope into a ``ListResult``."""
        if not isinstance(body, Mapping):
            return None  # type: ignore[return-value]
        return ListResult[model](
            items=[model.model_validate(item) for item in body.get("data") or []],
            has_more=bool(body.get("has_more", False)),
        )

    async def _list(
        self, model: type[ModelT], params: PayMongoParams | None = None
    ) -> ListResult[ModelT]:
        """Fetch one page of the collection at ``base_path``."""
        query = self._query(params) if params is not None else None
        body = await self.http.get(self._build_path(), query)
        return self._unwrap_list(model, body)

    async def _auto_paginate(
        self, model: type[ModelT], params: PayMongoParams | None = None
    ) -> AsyncIterator[ModelT]:
        """
        Yield every item of the collection, page by page.

        Each following page is requested with the last item's id as the
        ``after`` cursor; ``before`` is only honoured for the first page.
        """
        query = self._query(params) if params is not None else {}
        while True:
            body = await self.http.get(self._build_path(), query)
            page = self._unwrap_list(model, body)
            if page is None:
                return
            for item in page.items:
                yield item
            cursor = page.next_cursor
            if cursor is None:
                return
            logger.debug("Fetching next page", path=self.base_path, after=cursor)
            query = {**query, "after": cursor}
            query.pop("before", None)
