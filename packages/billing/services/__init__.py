"""Billing services."""

from packages.billing.services.request_dispatcher import RequestDispatcher

__all__ = [
    "RequestDispatcher",
]
