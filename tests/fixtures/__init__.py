# Test data and fixtures
from packages.auth.models.domain.session import OrganizationContext
from packages.auth.providers.interface import (
    OrganizationProviderInterface,
    SessionProviderInterface,
)
from packages.billing.models.domain.request import RequestContext

TEST_SECRET_KEY = "am_sk_test_123"

BILLING_OPERATIONS = [
    "create_customer",
    "list_products",
    "checkout",
    "attach",
    "check",
    "track",
    "cancel",
    "create_referral_code",
    "redeem_referral_code",
    "billing_portal",
    "create_entity",
    "get_entity",
    "delete_entity",
]


class StaticSessionProvider(SessionProviderInterface):
    """Session provider returning a fixed session (or None)."""

    def __init__(self, session=None):
        self.session = session
        self.calls = 0

    async def get_session(self, request):
        self.calls += 1
        return self.session


class StaticOrganizationProvider(OrganizationProviderInterface):
    """Organization provider returning a fixed context."""

    def __init__(self, org_context=None):
        self.org_context = org_context or OrganizationContext()
        self.calls = 0
        self.sessions = []

    async def get_organization_context(self, request, config, session=None):
        self.calls += 1
        self.sessions.append(session)
        return self.org_context


def make_request_context(
    path="/api/auth/autumn/checkout",
    method="POST",
    body=None,
    query="",
    path_params=None,
    headers=None,
    url=None,
) -> RequestContext:
    if url is None:
        url = f"http://test{path}" + (f"?{query}" if query else "")
    return RequestContext(
        path=path,
        method=method,
        url=url,
        body=body,
        path_params=path_params or {},
        headers=headers or {},
    )
