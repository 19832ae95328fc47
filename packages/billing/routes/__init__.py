"""Billing API routes."""

from packages.billing.routes import autumn

__all__ = ["autumn"]
