from abc import ABC, abstractmethod
from typing import Optional

from packages.auth.models.domain.session import Organization, OrganizationContext, SessionContext
from packages.billing.models.domain.plugin_config import PluginConfig
from packages.billing.models.domain.request import RequestContext


class SessionProviderInterface(ABC):
    """Interface for the host's session/authentication layer"""

    @abstractmethod
    async def get_session(self, request: RequestContext) -> Optional[SessionContext]:
        """Return the authenticated principal, or None when there is no session"""
        pass


class OrganizationProviderInterface(ABC):
    """Interface for resolving the caller's active organization"""

    @abstractmethod
    async def get_organization_context(
        self,
        request: RequestContext,
        config: PluginConfig,
        session: Optional[SessionContext] = None,
    ) -> OrganizationContext:
        """
        Return the active organization context (may be empty).

        ``session`` is the session the caller already resolved for this request;
        implementations should use it rather than fetching the session again.
        """
        pass


class OrganizationDirectoryInterface(ABC):
    """Interface for organization membership storage"""

    @abstractmethod
    async def get_organization(self, organization_id: str) -> Optional[Organization]:
        """Look up an organization by id"""
        pass

    @abstractmethod
    async def get_owner_email(self, organization_id: str) -> Optional[str]:
        """Email of the member holding the owner role"""
        pass
