"""
Interface for billing clients.

Abstracts the billing backend's HTTP API away from the request dispatcher.
Every operation returns the backend's status code and JSON body untouched;
interpreting them is left to the handlers.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from pydantic import BaseModel


class BillingResponse(BaseModel):
    """Raw status and body returned by the billing backend."""

    status_code: int
    body: Any = None


class BillingClientInterface(ABC):
    """Abstract interface for billing clients."""

    async def __aenter__(self) -> "BillingClientInterface":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Release any transport resources held by the client."""
        pass

    @abstractmethod
    async def create_customer(
        self, body: Dict[str, Any], expand: Optional[list] = None
    ) -> BillingResponse:
        """
        Get or create a customer.

        Args:
            body: Customer payload (id, email, name, ...)
            expand: Optional list of related objects to expand
        """
        pass

    @abstractmethod
    async def list_products(
        self, params: Optional[Dict[str, str]] = None
    ) -> BillingResponse:
        """List catalog products."""
        pass

    @abstractmethod
    async def checkout(self, body: Dict[str, Any]) -> BillingResponse:
        """Create a checkout (payment link or confirmation preview)."""
        pass

    @abstractmethod
    async def attach(self, body: Dict[str, Any]) -> BillingResponse:
        """Attach a product to a customer."""
        pass

    @abstractmethod
    async def check(self, body: Dict[str, Any]) -> BillingResponse:
        """Check feature access or product status."""
        pass

    @abstractmethod
    async def track(self, body: Dict[str, Any]) -> BillingResponse:
        """Record a usage event."""
        pass

    @abstractmethod
    async def cancel(self, body: Dict[str, Any]) -> BillingResponse:
        """Cancel a customer's product."""
        pass

    @abstractmethod
    async def create_referral_code(self, body: Dict[str, Any]) -> BillingResponse:
        """Create (or fetch) a referral code for a program."""
        pass

    @abstractmethod
    async def redeem_referral_code(self, body: Dict[str, Any]) -> BillingResponse:
        """Redeem a referral code."""
        pass

    @abstractmethod
    async def billing_portal(
        self, customer_id: str, body: Dict[str, Any]
    ) -> BillingResponse:
        """Open a billing portal session for the customer."""
        pass

    @abstractmethod
    async def create_entity(
        self, customer_id: str, body: Any
    ) -> BillingResponse:
        """Create one or more entities (seats, workspaces, ...) for a customer."""
        pass

    @abstractmethod
    async def get_entity(
        self,
        customer_id: str,
        entity_id: str,
        params: Optional[Dict[str, str]] = None,
    ) -> BillingResponse:
        """Fetch a customer's entity."""
        pass

    @abstractmethod
    async def delete_entity(self, customer_id: str, entity_id: str) -> BillingResponse:
        """Delete a customer's entity."""
        pass
