from packages.auth.models.domain.session import (
    Organization,
    OrganizationContext,
    SessionContext,
)

__all__ = [
    "Organization",
    "OrganizationContext",
    "SessionContext",
]
