"""
Factory for getting a billing client instance.
"""

from packages.billing.providers.billing_client.autumn_client import AutumnClient
from packages.billing.providers.billing_client.interface import BillingClientInterface


def get_billing_client(base_url: str, secret_key: str) -> BillingClientInterface:
    """
    Get a billing client scoped to one request.

    Callers own the returned client and must close it, normally with
    ``async with``.
    """
    return AutumnClient(base_url=base_url, secret_key=secret_key)
