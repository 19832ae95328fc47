"""
Unit tests for the shipped session and organization providers.
"""

from packages.auth.models.domain.session import Organization, SessionContext
from packages.auth.providers.header_session_provider import HeaderSessionProvider
from packages.auth.providers.organization_provider import (
    InMemoryOrganizationDirectory,
    NullOrganizationProvider,
    SessionOrganizationProvider,
)
from packages.billing.models.domain.plugin_config import PluginConfig
from tests.fixtures import StaticSessionProvider, make_request_context


class TestHeaderSessionProvider:
    """Tests for gateway header sessions."""

    async def test_session_from_headers(self):
        """Test identity headers become a session."""
        request = make_request_context(
            headers={
                "x-user-id": "u1",
                "x-user-email": "a@x.com",
                "x-user-name": "Ann",
                "x-active-organization-id": "org1",
            }
        )

        session = await HeaderSessionProvider().get_session(request)

        assert session == SessionContext(
            user_id="u1",
            user_email="a@x.com",
            user_name="Ann",
            active_organization_id="org1",
        )

    async def test_no_user_header_no_session(self):
        """Test requests without a user id are anonymous."""
        request = make_request_context(headers={"x-user-email": "a@x.com"})

        assert await HeaderSessionProvider().get_session(request) is None


class TestOrganizationProviders:
    """Tests for organization context resolution."""

    async def test_null_provider(self):
        """Test the null provider never reports an organization."""
        context = await NullOrganizationProvider().get_organization_context(
            make_request_context(), PluginConfig()
        )

        assert context.active_organization is None
        assert context.active_organization_id is None

    async def test_session_organization_resolved(self):
        """Test the active organization and owner email are looked up."""
        directory = InMemoryOrganizationDirectory(
            organizations={"org1": Organization(id="org1", name="Acme")},
            owner_emails={"org1": "owner@acme.com"},
        )
        provider = SessionOrganizationProvider(
            StaticSessionProvider(
                SessionContext(user_id="u1", active_organization_id="org1")
            ),
            directory,
        )

        context = await provider.get_organization_context(
            make_request_context(), PluginConfig()
        )

        assert context.active_organization_id == "org1"
        assert context.active_organization.name == "Acme"
        assert context.active_organization_email == "owner@acme.com"

    async def test_unknown_organization(self):
        """Test a dangling organization id yields an empty context."""
        provider = SessionOrganizationProvider(
            StaticSessionProvider(
                SessionContext(user_id="u1", active_organization_id="gone")
            ),
            InMemoryOrganizationDirectory(),
        )

        context = await provider.get_organization_context(
            make_request_context(), PluginConfig()
        )

        assert context.active_organization is None

    async def test_no_session(self):
        """Test anonymous requests have no organization."""
        provider = SessionOrganizationProvider(
            StaticSessionProvider(None), InMemoryOrganizationDirectory()
        )

        context = await provider.get_organization_context(
            make_request_context(), PluginConfig()
        )

        assert context.active_organization is None

    async def test_passed_session_skips_session_lookup(self):
        """Test a session handed in by the dispatcher is used as is."""
        session_provider = StaticSessionProvider(None)
        provider = SessionOrganizationProvider(
            session_provider,
            InMemoryOrganizationDirectory(
                organizations={"org1": Organization(id="org1", name="Acme")},
                owner_emails={"org1": "owner@acme.com"},
            ),
        )

        context = await provider.get_organization_context(
            make_request_context(),
            PluginConfig(),
            session=SessionContext(user_id="u1", active_organization_id="org1"),
        )
        anonymous = await provider.get_organization_context(
            make_request_context(), PluginConfig(), session=None
        )

        assert context.active_organization_id == "org1"
        assert anonymous.active_organization is None
        assert session_provider.calls == 0
