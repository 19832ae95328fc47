"""Billing clients - calls into the external billing backend."""

from packages.billing.providers.billing_client.interface import (
    BillingClientInterface,
    BillingResponse,
)
from packages.billing.providers.billing_client.factory import get_billing_client

__all__ = [
    "BillingClientInterface",
    "BillingResponse",
    "get_billing_client",
]
