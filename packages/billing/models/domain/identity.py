"""
Domain models for billing identity.

A billing subject is the entity (individual user or organization) that
billing operations apply to.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CustomerData(BaseModel):
    """Display data sent alongside the customer id. Extra fields are forwarded as given."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    email: Optional[str] = None
    name: Optional[str] = None


class BillingSubject(BaseModel):
    """
    Resolved billing subject.

    Accepts both ``customer_id`` and ``customerId`` so custom identity
    functions can return either convention.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    customer_id: str
    customer_data: CustomerData = CustomerData()
