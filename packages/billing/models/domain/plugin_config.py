"""
Plugin-wide configuration.

Built once when the plugin router is created and read-only afterwards.
"""

from typing import Any, Callable, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field

from common.core.config import Settings

# (org_context, config, session) -> BillingSubject | mapping | None, sync or async
IdentifyFunction = Callable[..., Any]


class PluginConfig(BaseModel):
    """Immutable configuration shared by every request."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    identify: Optional[IdentifyFunction] = None
    enable_organizations: bool = False
    url: Optional[str] = None
    # Explicit override; when unset the key comes from the credential source
    secret_key: Optional[str] = None
    # Endpoint key -> whether an active session is mandatory
    session_required: Dict[str, bool] = Field(default_factory=dict)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        identify: Optional[IdentifyFunction] = None,
        session_required: Optional[Dict[str, bool]] = None,
    ) -> "PluginConfig":
        return cls(
            identify=identify,
            enable_organizations=settings.autumn_enable_organizations,
            url=settings.autumn_url,
            session_required=session_required or {},
        )
