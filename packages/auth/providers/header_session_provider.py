from typing import Optional

from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.auth.models.domain.session import SessionContext
from packages.auth.providers.interface import SessionProviderInterface
from packages.billing.models.domain.request import RequestContext

logger = get_logger(__name__)

USER_ID_HEADER = "x-user-id"
USER_EMAIL_HEADER = "x-user-email"
USER_NAME_HEADER = "x-user-name"
ACTIVE_ORGANIZATION_HEADER = "x-active-organization-id"


class HeaderSessionProvider(SessionProviderInterface):
    """
    Session provider that trusts identity headers set by an upstream gateway.

    Only safe behind a proxy that authenticates the caller and strips these
    headers from untrusted traffic.
    """

    @trace_span
    async def get_session(self, request: RequestContext) -> Optional[SessionContext]:
        user_id = request.header(USER_ID_HEADER)
        if not user_id:
            return None

        return SessionContext(
            user_id=user_id,
            user_email=request.header(USER_EMAIL_HEADER),
            user_name=request.header(USER_NAME_HEADER),
            active_organization_id=request.header(ACTIVE_ORGANIZATION_HEADER),
        )
