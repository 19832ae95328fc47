"""Billing providers - abstracted external platform integrations."""

from packages.billing.providers.billing_client.factory import get_billing_client

__all__ = [
    "get_billing_client",
]
