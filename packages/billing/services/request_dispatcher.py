"""
Per-request orchestration of plugin calls into the billing backend.

Flow: credential check -> query extraction -> path rewrite -> route lookup ->
session/organization context -> subject provider -> body normalization ->
handler call -> response translation. Nothing is shared between requests
except the immutable plugin config and the route table.
"""

from typing import Dict, Optional
from urllib.parse import parse_qsl, urlsplit

from fastapi import Response, status
from fastapi.responses import JSONResponse

from common.core.config import settings
from common.core.exceptions import BillingAPIError, ConfigurationError
from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.auth.providers.interface import (
    OrganizationProviderInterface,
    SessionProviderInterface,
)
from packages.billing.models.domain.plugin_config import PluginConfig
from packages.billing.models.domain.request import RequestContext
from packages.billing.providers.billing_client.factory import get_billing_client
from packages.billing.services import identity_resolver
from packages.billing.services.billing_handlers import HandlerArgs, create_internal_router
from packages.billing.services.route_table import InternalRouter, public_suffix, resolve_path
from packages.billing.utils.key_normalizer import to_snake_case
from packages.billing.utils.secret_key_check import check_secret_key

logger = get_logger(__name__)

# Forwarded with their value untouched
EXCLUDE_KEYS = frozenset({"errorOnNotFound"})
# Shapes owned by the payment provider or free-form property bags
EXCLUDE_CHILDREN_OF = frozenset({"checkoutSessionParams", "properties"})

NOT_FOUND_BODY = {"error": "Not found"}


def parse_search_params(url: str) -> Dict[str, str]:
    """Flat query mapping for ``url``; any parse failure yields an empty mapping."""
    try:
        return dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))
    except ValueError as e:
        logger.debug(f"Ignoring unparseable query string: {e}", extra={"url": url})
        return {}


class RequestDispatcher:
    """Stateless dispatcher; one instance serves every request of a plugin."""

    def __init__(
        self,
        config: PluginConfig,
        session_provider: SessionProviderInterface,
        organization_provider: OrganizationProviderInterface,
        router: Optional[InternalRouter] = None,
    ):
        self.config = config
        self.session_provider = session_provider
        self.organization_provider = organization_provider
        self.router = router or create_internal_router()

    def _require_secret_key(self) -> str:
        if self.config.secret_key:
            return self.config.secret_key
        result = check_secret_key()
        if result.found and result.secret_key:
            return result.secret_key

        error = result.error
        logger.warning("No billing secret key configured")
        raise ConfigurationError(
            status_code=error.status_code if error else 400,
            message=error.message if error else None,
            code=error.code if error else None,
        )

    @trace_span
    async def handle(
        self,
        request: RequestContext,
        method: str,
        require_session: bool = False,
    ) -> Response:
        secret_key = self._require_secret_key()
        base_url = self.config.url or settings.autumn_url

        search_params = parse_search_params(request.url)
        pathname = resolve_path(public_suffix(request.path))

        match = self.router.match(method, pathname)
        if match is None:
            logger.info(
                "No billing route matched",
                extra={"method": method, "path": request.path, "internal_path": pathname},
            )
            return JSONResponse(content=NOT_FOUND_BODY, status_code=404)

        # Always resolved: some operations need the organization without a user identity
        session = await self.session_provider.get_session(request)
        org_context = await self.organization_provider.get_organization_context(
            request, self.config, session=session
        )
        if require_session and session is None:
            raise BillingAPIError(
                status_code=401, message="Unauthorized", code="unauthorized"
            )

        get_customer = await identity_resolver.resolve(session, org_context, self.config)

        body = to_snake_case(
            request.body,
            exclude_keys=EXCLUDE_KEYS,
            exclude_children_of=EXCLUDE_CHILDREN_OF,
        )

        async with get_billing_client(base_url, secret_key) as billing_client:
            result = await match.handler(
                HandlerArgs(
                    billing_client=billing_client,
                    body=body,
                    path=pathname,
                    get_customer=get_customer,
                    path_params={**request.path_params, **match.params},
                    search_params=search_params,
                )
            )

        if result.is_error:
            logger.warning(
                "Billing handler returned an error",
                extra={
                    "internal_path": pathname,
                    "status_code": result.status_code,
                    "code": result.error_field("code"),
                },
            )
            raise BillingAPIError(
                status_code=result.status_code,
                message=result.error_field("message"),
                code=result.error_field("code"),
            )

        if result.status_code == status.HTTP_204_NO_CONTENT:
            return Response(status_code=result.status_code)
        return JSONResponse(content=result.body, status_code=result.status_code)
