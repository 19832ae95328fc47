"""
Organization context providers.
"""

from typing import Any, Dict, Optional

from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.auth.models.domain.session import (
    Organization,
    OrganizationContext,
    SessionContext,
)
from packages.auth.providers.interface import (
    OrganizationDirectoryInterface,
    OrganizationProviderInterface,
    SessionProviderInterface,
)
from packages.billing.models.domain.plugin_config import PluginConfig
from packages.billing.models.domain.request import RequestContext

logger = get_logger(__name__)

_NOT_PASSED = object()


class NullOrganizationProvider(OrganizationProviderInterface):
    """Provider for deployments without organizations."""

    async def get_organization_context(
        self,
        request: RequestContext,
        config: PluginConfig,
        session: Optional[SessionContext] = None,
    ) -> OrganizationContext:
        return OrganizationContext()


class SessionOrganizationProvider(OrganizationProviderInterface):
    """
    Resolves the active organization recorded on the caller's session.

    The owner's email is looked up through the directory so the organization
    is billed under a stable contact regardless of which member is signed in.
    A session passed in by the caller (including an explicit ``None``) is
    trusted; the session provider is only asked when none was passed.
    """

    def __init__(
        self,
        session_provider: SessionProviderInterface,
        directory: OrganizationDirectoryInterface,
    ):
        self.session_provider = session_provider
        self.directory = directory

    @trace_span
    async def get_organization_context(
        self,
        request: RequestContext,
        config: PluginConfig,
        session: Any = _NOT_PASSED,
    ) -> OrganizationContext:
        if session is _NOT_PASSED:
            session = await self.session_provider.get_session(request)
        if session is None or not session.active_organization_id:
            return OrganizationContext()

        organization_id = session.active_organization_id
        organization = await self.directory.get_organization(organization_id)
        if organization is None:
            logger.warning(
                "Active organization not found",
                extra={"organization_id": organization_id},
            )
            return OrganizationContext()

        owner_email = await self.directory.get_owner_email(organization_id)
        return OrganizationContext(
            active_organization=organization,
            active_organization_email=owner_email,
        )


class InMemoryOrganizationDirectory(OrganizationDirectoryInterface):
    """Directory backed by dictionaries, for local development and tests."""

    def __init__(
        self,
        organizations: Optional[Dict[str, Organization]] = None,
        owner_emails: Optional[Dict[str, str]] = None,
    ):
        self.organizations = organizations or {}
        self.owner_emails = owner_emails or {}

    async def get_organization(self, organization_id: str) -> Optional[Organization]:
        return self.organizations.get(organization_id)

    async def get_owner_email(self, organization_id: str) -> Optional[str]:
        return self.owner_emails.get(organization_id)
