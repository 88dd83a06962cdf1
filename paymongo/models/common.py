"""Shared models: envelopes, billing details, pagination."""

from enum import Enum
from typing import Annotated, Any, Generic, TypeVar, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

# Metadata values PayMongo accepts
Metadata = dict[str, str | int | float | bool | None]


class Currency(str, Enum):
    """Supported currencies."""

    PHP = "PHP"
    USD = "USD"


DEFAULT_CURRENCY = Currency.PHP


def open_enum(enum_cls: type[E]) -> Any:
    """
    Response field type for ``enum_cls`` that also accepts values it does not list.

    Known values parse to enum members. Values PayMongo adds later come
    through as plain strings instead of failing the whole response.
    """

    def coerce(value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, enum_cls):
            try:
                return enum_cls(value)
            except ValueError:
                return value
        return value

    return Annotated[Union[enum_cls, str], BeforeValidator(coerce)]


ResponseCurrency = open_enum(Currency)


class PayMongoModel(BaseModel):
    """
    Base for every object returned by the API.

    Snapshots are frozen: the client never mutates what PayMongo sent back.
    Unknown fields are kept so new API fields do not break parsing.
    """

    model_config = ConfigDict(
        extra="allow",
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class PayMongoParams(BaseModel):
    """
    Base for request parameter objects.

    Fields are snake_case; camelCase aliases are accepted too, so
    ``CreateCustomerParams(firstName="Juan")`` and
    ``CreateCustomerParams(first_name="Juan")`` are equivalent.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class ResourceReference(PayMongoModel):
    """A bare ``{id, type}`` pointer to another resource."""

    id: str
    type: str


class BaseAttributes(PayMongoModel):
    """Timestamps and mode flag present on every resource."""

    created_at: int | None = Field(None, description="Unix timestamp")
    updated_at: int | None = Field(None, description="Unix timestamp")
    livemode: bool = False


class Address(PayMongoModel):
    """Postal address."""

    line1: str | None = None
    line2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = Field(None, description="ISO 3166-1 alpha-2 country code")


class BillingDetails(PayMongoModel):
    """Billing information attached to payment methods, payments and sessions."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: Address | None = None


class PaginationParams(PayMongoParams):
    """Cursor pagination parameters shared by list operations."""

    after: str | None = Field(None, description="Return items after this resource id")
    before: str | None = Field(None, description="Return items before this resource id")
    limit: int | None = Field(None, description="Maximum number of items per page")


class ListResult(BaseModel, Generic[T]):
    """One page of a list operation."""

    model_config = ConfigDict(frozen=True)

    items: list[T] = Field(default_factory=list)
    has_more: bool = False

    @property
    def next_cursor(self) -> str | None:
        """Id to pass as ``after`` for the next page, if there is one."""
        if not self.has_more or not self.items:
            return None
        return getattr(self.items[-1], "id", None)
