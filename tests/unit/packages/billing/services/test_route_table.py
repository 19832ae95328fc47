"""
Unit tests for public-to-internal path rewriting and route matching.
"""

import pytest

from packages.billing.services.billing_handlers import (
    create_internal_router,
    get_entity,
    delete_entity,
    list_products,
)
from packages.billing.services.route_table import (
    PUBLIC_PATH_MAP,
    InternalRouter,
    public_suffix,
    resolve_path,
)


class TestResolvePath:
    """Tests for public path rewriting."""

    @pytest.mark.parametrize(
        "suffix,expected",
        [
            ("referrals/redeem-code", "/api/autumn/referrals/redeem"),
            ("referrals/create-code", "/api/autumn/referrals/code"),
            ("open-billing-portal", "/api/autumn/billing_portal"),
            ("checkout", "/api/autumn/checkout"),
        ],
    )
    def test_mapped_suffixes(self, suffix, expected):
        """Test suffixes present in the table are replaced."""
        assert resolve_path(suffix) == expected

    @pytest.mark.parametrize(
        "suffix", ["customers", "products", "entities/ent_1", "unknown/thing"]
    )
    def test_unmapped_suffixes_pass_through(self, suffix):
        """Test suffixes missing from the table are used verbatim."""
        assert resolve_path(suffix) == f"/api/autumn/{suffix}"

    def test_public_suffix_strips_prefix(self):
        """Test everything up to the first /autumn/ is removed."""
        assert public_suffix("/api/auth/autumn/entities/e1") == "entities/e1"
        assert public_suffix("/no-match") == ""

    def test_table_is_read_only(self):
        """Test the path table cannot be modified at runtime."""
        with pytest.raises(TypeError):
            PUBLIC_PATH_MAP["checkout"] = "attach"


class TestInternalRouter:
    """Tests for method + path matching."""

    @pytest.fixture
    def router(self):
        return create_internal_router()

    def test_exact_match(self, router):
        """Test a static route matches with no params."""
        match = router.match("GET", "/api/autumn/products")

        assert match is not None
        assert match.handler is list_products
        assert match.params == {}

    def test_param_segment_captured(self, router):
        """Test :entityId captures the path segment."""
        match = router.match("GET", "/api/autumn/entities/ent_42")

        assert match.handler is get_entity
        assert match.params == {"entityId": "ent_42"}

    def test_method_distinguishes_routes(self, router):
        """Test GET and DELETE on the same pattern resolve to different handlers."""
        assert router.match("DELETE", "/api/autumn/entities/e1").handler is delete_entity
        assert router.match("delete", "/api/autumn/entities/e1").handler is delete_entity

    @pytest.mark.parametrize(
        "method,path",
        [
            ("GET", "/api/autumn/checkout"),
            ("POST", "/api/autumn/unknown"),
            ("GET", "/api/autumn/entities"),
            ("GET", "/api/autumn/entities/e1/extra"),
            ("POST", "/api/autumn/"),
        ],
    )
    def test_no_match_returns_none(self, router, method, path):
        """Test misses are reported as None, never raised."""
        assert router.match(method, path) is None

    def test_first_structural_match_wins(self):
        """Test declaration order decides between overlapping patterns."""

        async def first(args):
            pass

        async def second(args):
            pass

        router = InternalRouter()
        router.add("GET", "/items/:id", first)
        router.add("GET", "/items/special", second)

        assert router.match("GET", "/items/special").handler is first
