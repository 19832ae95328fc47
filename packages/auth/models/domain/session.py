from typing import Optional
from pydantic import BaseModel, ConfigDict


class SessionContext(BaseModel):
    """Authenticated principal for the current request."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    user_id: str
    user_email: Optional[str] = None
    user_name: Optional[str] = None
    active_organization_id: Optional[str] = None


class Organization(BaseModel):
    """Organization the caller has switched into."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str
    name: Optional[str] = None


class OrganizationContext(BaseModel):
    """Active organization plus the resolved email of its billing owner."""

    model_config = ConfigDict(frozen=True)

    active_organization: Optional[Organization] = None
    active_organization_email: Optional[str] = None

    @property
    def active_organization_id(self) -> Optional[str]:
        if self.active_organization is None:
            return None
        return self.active_organization.id
