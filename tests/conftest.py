# Shared pytest configuration and fixtures for all test types
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from unittest.mock import AsyncMock, patch

from common.core.config import settings
from api.main import create_app
from packages.auth.models.domain.session import Organization, OrganizationContext, SessionContext
from packages.billing.models.domain.plugin_config import PluginConfig
from packages.billing.providers.billing_client.interface import (
    BillingClientInterface,
    BillingResponse,
)
from tests.fixtures import (
    BILLING_OPERATIONS,
    TEST_SECRET_KEY,
    StaticOrganizationProvider,
    StaticSessionProvider,
)


@pytest.fixture
def session():
    """Authenticated user without an active organization."""
    return SessionContext(user_id="u1", user_email="a@x.com", user_name="Ann")


@pytest.fixture
def org_context():
    """Active organization with a resolved owner email."""
    return OrganizationContext(
        active_organization=Organization(id="org1", name="Acme"),
        active_organization_email="owner@acme.com",
    )


@pytest.fixture
def plugin_config():
    """Plugin config with an explicit secret key and organizations disabled."""
    return PluginConfig(url="https://billing.test/v1", secret_key=TEST_SECRET_KEY)


@pytest.fixture
def no_env_secret_key(monkeypatch):
    """Ensure no secret key is available from the environment."""
    monkeypatch.setattr(settings, "autumn_secret_key", None)
    monkeypatch.setattr(settings, "autumn_prod_secret_key", None)


@pytest.fixture
def mock_billing_client():
    """Mock billing client usable as an async context manager."""
    client = AsyncMock(spec=BillingClientInterface)
    client.__aenter__.return_value = client
    client.__aexit__.return_value = False
    for operation in BILLING_OPERATIONS:
        getattr(client, operation).return_value = BillingResponse(
            status_code=200, body={"operation": operation}
        )
    return client


@pytest.fixture
def mock_get_billing_client(mock_billing_client):
    """Patch the dispatcher's billing client factory."""
    with patch(
        "packages.billing.services.request_dispatcher.get_billing_client",
        return_value=mock_billing_client,
    ) as factory:
        yield factory


@pytest_asyncio.fixture(scope="function")
async def make_client(mock_get_billing_client):
    """Factory for test clients bound to a specific plugin setup."""
    clients = []

    async def _make(config, session=None, org_context=None):
        app = create_app(
            plugin_config=config,
            session_provider=StaticSessionProvider(session),
            organization_provider=StaticOrganizationProvider(org_context),
        )
        ac = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(ac)
        return ac

    try:
        yield _make
    finally:
        for ac in clients:
            await ac.aclose()


@pytest_asyncio.fixture(scope="function")
async def client(make_client, plugin_config, session):
    """Test client with a signed-in user."""
    return await make_client(plugin_config, session=session)
