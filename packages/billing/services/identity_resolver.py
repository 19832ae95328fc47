"""
Resolution of the billing subject for a request.

Handlers receive a ``SubjectProvider`` and call ``resolve()`` only when their
operation needs a customer, so catalog-style requests never pay for it.
"""

import inspect
from abc import ABC, abstractmethod
from typing import Any, Optional

from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.auth.models.domain.session import OrganizationContext, SessionContext
from packages.billing.models.domain.identity import BillingSubject, CustomerData
from packages.billing.models.domain.plugin_config import PluginConfig

logger = get_logger(__name__)


class SubjectProvider(ABC):
    """Deferred billing subject."""

    @abstractmethod
    def resolve(self) -> Optional[BillingSubject]:
        pass


class ResolvedSubject(SubjectProvider):
    """Subject computed up front (custom identity functions)."""

    def __init__(self, subject: Optional[BillingSubject]):
        self.subject = subject

    def resolve(self) -> Optional[BillingSubject]:
        return self.subject


class DerivedSubject(SubjectProvider):
    """Subject derived from the session and organization on first use."""

    _UNRESOLVED = object()

    def __init__(
        self,
        session: Optional[SessionContext],
        org_context: OrganizationContext,
        enable_organizations: bool,
    ):
        self.session = session
        self.org_context = org_context
        self.enable_organizations = enable_organizations
        self._subject: Any = self._UNRESOLVED

    def resolve(self) -> Optional[BillingSubject]:
        if self._subject is self._UNRESOLVED:
            self._subject = derive_subject(
                self.session, self.org_context, self.enable_organizations
            )
        return self._subject


def derive_subject(
    session: Optional[SessionContext],
    org_context: OrganizationContext,
    enable_organizations: bool,
) -> Optional[BillingSubject]:
    """User-scoped subject unless organization billing applies."""
    if session is None:
        return None

    organization = org_context.active_organization
    if not enable_organizations or organization is None or not organization.id:
        return BillingSubject(
            customer_id=session.user_id,
            customer_data=CustomerData(
                email=session.user_email, name=session.user_name
            ),
        )

    return BillingSubject(
        customer_id=organization.id,
        customer_data=CustomerData(
            email=org_context.active_organization_email,
            name=organization.name or "",
        ),
    )


def _coerce_subject(result: Any) -> Optional[BillingSubject]:
    if result is None or isinstance(result, BillingSubject):
        return result
    return BillingSubject.model_validate(result)


@trace_span
async def get_identity_context(
    org_context: OrganizationContext,
    config: PluginConfig,
    session: Optional[SessionContext],
) -> Optional[BillingSubject]:
    """Invoke the deployment's custom identity function."""
    result = config.identify(org_context, config, session)
    if inspect.isawaitable(result):
        result = await result
    return _coerce_subject(result)


async def resolve(
    session: Optional[SessionContext],
    org_context: OrganizationContext,
    config: PluginConfig,
) -> SubjectProvider:
    """
    Build the subject provider for one request.

    A configured custom identity function takes total precedence and runs
    even without a session; otherwise the subject is derived lazily.
    """
    if config.identify is not None:
        subject = await get_identity_context(org_context, config, session)
        logger.debug(
            "Custom identity resolved",
            extra={"customer_id": subject.customer_id if subject else None},
        )
        return ResolvedSubject(subject)

    return DerivedSubject(session, org_context, config.enable_organizations)
