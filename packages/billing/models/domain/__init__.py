"""Domain models for billing."""

from packages.billing.models.domain.identity import BillingSubject, CustomerData
from packages.billing.models.domain.plugin_config import PluginConfig
from packages.billing.models.domain.request import HandlerResult, RequestContext

__all__ = [
    # Identity
    "BillingSubject",
    "CustomerData",
    # Config
    "PluginConfig",
    # Request
    "HandlerResult",
    "RequestContext",
]
