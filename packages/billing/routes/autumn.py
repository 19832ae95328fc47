"""
Autumn plugin endpoints.

Static declarations of every externally reachable billing operation. Each
endpoint validates its body shape and hands the request to the dispatcher.
"""

import json
from typing import Any, Dict, Optional, Tuple, Type

from fastapi import APIRouter, Request, Response
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from common.core.otel_axiom_exporter import get_logger
from packages.auth.providers.interface import (
    OrganizationProviderInterface,
    SessionProviderInterface,
)
from packages.billing.models.domain.plugin_config import PluginConfig
from packages.billing.models.domain.request import RequestContext
from packages.billing.models.schemas.billing import (
    AttachParams,
    CancelParams,
    CheckoutParams,
    CheckParams,
    CreateCustomerParams,
    CreateEntityBody,
    CreateReferralCodeParams,
    OpenBillingPortalParams,
    RedeemReferralCodeParams,
    TrackParams,
)
from packages.billing.services.request_dispatcher import RequestDispatcher

logger = get_logger(__name__)


class EndpointConfig(BaseModel):
    """Declaration of one plugin endpoint."""

    model_config = ConfigDict(frozen=True)

    key: str
    path: str
    method: str
    body: Optional[Type[BaseModel]] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    use_auth: bool = True


ENDPOINTS: Tuple[EndpointConfig, ...] = (
    EndpointConfig(
        key="createCustomer",
        path="/autumn/customers",
        method="POST",
        body=CreateCustomerParams,
        metadata={"isAction": False},
        use_auth=False,
    ),
    EndpointConfig(
        key="listProducts",
        path="/autumn/products",
        method="GET",
        use_auth=False,
    ),
    EndpointConfig(
        key="checkout", path="/autumn/checkout", method="POST", body=CheckoutParams
    ),
    EndpointConfig(key="attach", path="/autumn/attach", method="POST", body=AttachParams),
    EndpointConfig(key="check", path="/autumn/check", method="POST", body=CheckParams),
    EndpointConfig(key="track", path="/autumn/track", method="POST", body=TrackParams),
    EndpointConfig(key="cancel", path="/autumn/cancel", method="POST", body=CancelParams),
    EndpointConfig(
        key="createReferralCode",
        path="/autumn/referrals/code",
        method="POST",
        body=CreateReferralCodeParams,
    ),
    EndpointConfig(
        key="redeemReferralCode",
        path="/autumn/referrals/redeem",
        method="POST",
        body=RedeemReferralCodeParams,
    ),
    EndpointConfig(
        key="billingPortal",
        path="/autumn/billing_portal",
        method="POST",
        body=OpenBillingPortalParams,
        metadata={"isAction": False},
    ),
    EndpointConfig(
        key="createEntity",
        path="/autumn/entities",
        method="POST",
        body=CreateEntityBody,
    ),
    EndpointConfig(key="getEntity", path="/autumn/entities/{entityId}", method="GET"),
    EndpointConfig(
        key="deleteEntity", path="/autumn/entities/{entityId}", method="DELETE"
    ),
)


async def _read_body(request: Request, endpoint: EndpointConfig) -> Any:
    raw = await request.body()
    if not raw:
        body: Any = {} if endpoint.body is not None else None
    else:
        try:
            body = json.loads(raw)
        except ValueError as e:
            raise RequestValidationError(
                [
                    {
                        "type": "json_invalid",
                        "loc": ("body",),
                        "msg": f"JSON decode error: {e}",
                        "input": {},
                    }
                ]
            )

    if endpoint.body is not None:
        try:
            endpoint.body.model_validate(body)
        except ValidationError as e:
            raise RequestValidationError(e.errors(include_url=False), body=body)

    return body


def _build_context(request: Request, body: Any) -> RequestContext:
    return RequestContext(
        path=request.url.path,
        method=request.method,
        url=str(request.url),
        body=body,
        path_params={key: str(value) for key, value in request.path_params.items()},
        headers={key.lower(): value for key, value in request.headers.items()},
    )


def _make_endpoint(
    endpoint: EndpointConfig, dispatcher: RequestDispatcher, require_session: bool
):
    async def handle(request: Request) -> Response:
        body = await _read_body(request, endpoint)
        return await dispatcher.handle(
            _build_context(request, body),
            endpoint.method,
            require_session=require_session,
        )

    handle.__name__ = endpoint.key
    return handle


def create_autumn_router(
    config: PluginConfig,
    session_provider: SessionProviderInterface,
    organization_provider: OrganizationProviderInterface,
    dispatcher: Optional[RequestDispatcher] = None,
) -> APIRouter:
    """
    Build the router exposing every plugin endpoint.

    Whether a session is mandatory comes from the endpoint declaration unless
    ``config.session_required`` overrides it for that endpoint key.
    """
    dispatcher = dispatcher or RequestDispatcher(
        config, session_provider, organization_provider
    )
    router = APIRouter()

    for endpoint in ENDPOINTS:
        require_session = config.session_required.get(endpoint.key, endpoint.use_auth)
        router.add_api_route(
            endpoint.path,
            _make_endpoint(endpoint, dispatcher, require_session),
            methods=[endpoint.method],
            name=endpoint.key,
            openapi_extra={"x-autumn-metadata": endpoint.metadata}
            if endpoint.metadata
            else None,
        )
        logger.debug(
            "Registered billing endpoint",
            extra={
                "key": endpoint.key,
                "method": endpoint.method,
                "path": endpoint.path,
                "require_session": require_session,
            },
        )

    return router
