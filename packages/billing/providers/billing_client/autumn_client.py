"""
Autumn implementation of the billing client.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from common.core.config import settings
from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.billing.providers.billing_client.interface import (
    BillingClientInterface,
    BillingResponse,
)

logger = get_logger(__name__)


class AutumnClient(BillingClientInterface):
    """Billing client for the Autumn REST API, backed by httpx."""

    def __init__(
        self,
        base_url: str,
        secret_key: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the HTTP client with API credentials."""
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {secret_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout or settings.autumn_request_timeout_seconds,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: Optional[Dict[str, str]] = None,
    ) -> BillingResponse:
        try:
            response = await self._client.request(
                method, path, json=json, params=params or None
            )
        except httpx.HTTPError as e:
            logger.error(
                f"Autumn request failed: {e}",
                extra={"method": method, "path": path},
            )
            return BillingResponse(
                status_code=500,
                body={
                    "message": f"Failed to reach billing backend: {e}",
                    "code": "internal_error",
                },
            )

        logger.debug(
            "Autumn request completed",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
            },
        )
        return BillingResponse(
            status_code=response.status_code, body=self._parse_body(response)
        )

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            if response.is_error:
                return {"message": response.text, "code": "invalid_response"}
            return response.text

    @staticmethod
    def _customer_path(customer_id: str) -> str:
        return f"/customers/{quote(customer_id, safe='')}"

    @trace_span
    async def create_customer(
        self, body: Dict[str, Any], expand: Optional[list] = None
    ) -> BillingResponse:
        params = {"expand": ",".join(expand)} if expand else None
        return await self._request("POST", "/customers", json=body, params=params)

    @trace_span
    async def list_products(
        self, params: Optional[Dict[str, str]] = None
    ) -> BillingResponse:
        return await self._request("GET", "/products", params=params)

    @trace_span
    async def checkout(self, body: Dict[str, Any]) -> BillingResponse:
        return await self._request("POST", "/checkout", json=body)

    @trace_span
    async def attach(self, body: Dict[str, Any]) -> BillingResponse:
        return await self._request("POST", "/attach", json=body)

    @trace_span
    async def check(self, body: Dict[str, Any]) -> BillingResponse:
        return await self._request("POST", "/check", json=body)

    @trace_span
    async def track(self, body: Dict[str, Any]) -> BillingResponse:
        return await self._request("POST", "/track", json=body)

    @trace_span
    async def cancel(self, body: Dict[str, Any]) -> BillingResponse:
        return await self._request("POST", "/cancel", json=body)

    @trace_span
    async def create_referral_code(self, body: Dict[str, Any]) -> BillingResponse:
        return await self._request("POST", "/referrals/code", json=body)

    @trace_span
    async def redeem_referral_code(self, body: Dict[str, Any]) -> BillingResponse:
        return await self._request("POST", "/referrals/redeem", json=body)

    @trace_span
    async def billing_portal(
        self, customer_id: str, body: Dict[str, Any]
    ) -> BillingResponse:
        return await self._request(
            "POST", f"{self._customer_path(customer_id)}/billing_portal", json=body
        )

    @trace_span
    async def create_entity(self, customer_id: str, body: Any) -> BillingResponse:
        return await self._request(
            "POST", f"{self._customer_path(customer_id)}/entities", json=body
        )

    @trace_span
    async def get_entity(
        self,
        customer_id: str,
        entity_id: str,
        params: Optional[Dict[str, str]] = None,
    ) -> BillingResponse:
        return await self._request(
            "GET",
            f"{self._customer_path(customer_id)}/entities/{quote(entity_id, safe='')}",
            params=params,
        )

    @trace_span
    async def delete_entity(self, customer_id: str, entity_id: str) -> BillingResponse:
        return await self._request(
            "DELETE",
            f"{self._customer_path(customer_id)}/entities/{quote(entity_id, safe='')}",
        )
