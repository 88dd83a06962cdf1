"""Customer models."""

from typing import Literal

from pydantic import Field

from .common import BaseAttributes, Metadata, PaginationParams, PayMongoModel, PayMongoParams


class CustomerAttributes(BaseAttributes):
    """Attributes of a customer."""

    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    default_device: str | None = None
    default_payment_method_id: str | None = None
    metadata: Metadata | None = None


class Customer(PayMongoModel):
    """Customer resource."""

    id: str
    type: Literal["customer"]
    attributes: CustomerAttributes


class CreateCustomerParams(PayMongoParams):
    """Parameters for ``Customers.create``."""

    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    default_payment_method_id: str | None = None
    metadata: Metadata | None = None


class UpdateCustomerParams(CreateCustomerParams):
    """Parameters for ``Customers.update``."""

    default_device: str | None = Field(None, description="e.g. phone or email")


class ListCustomersParams(PaginationParams):
    """Parameters for ``Customers.list``."""

    email: str | None = None
    phone: str | None = None
