"""
API schemas for billing plugin endpoints.

Request bodies arrive in the client's camelCase. These models only gate the
shape of a body; the raw JSON is what gets normalized and forwarded, so
unknown fields are allowed through.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, RootModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )


class CustomerExpand(str, Enum):
    """Related objects that can be expanded on a customer."""

    INVOICES = "invoices"
    REWARDS = "rewards"
    TRIALS_USED = "trials_used"
    ENTITIES = "entities"
    REFERRALS = "referrals"
    PAYMENT_METHOD = "payment_method"


# ============================================================================
# Customers
# ============================================================================


class CreateCustomerParams(CamelModel):
    error_on_not_found: Optional[bool] = None
    expand: Optional[List[CustomerExpand]] = None


# ============================================================================
# Checkout & Attach
# ============================================================================


class FeatureOption(CamelModel):
    feature_id: str
    quantity: float


class CheckoutParams(CamelModel):
    product_id: Optional[str] = None
    product_ids: Optional[List[str]] = None
    entity_id: Optional[str] = None
    options: Optional[List[FeatureOption]] = None
    success_url: Optional[str] = None
    force_checkout: Optional[bool] = None
    reward: Optional[str] = None
    checkout_session_params: Optional[Dict[str, Any]] = None


class AttachParams(CheckoutParams):
    pass


# ============================================================================
# Check, Track & Cancel
# ============================================================================


class CheckParams(CamelModel):
    feature_id: Optional[str] = None
    product_id: Optional[str] = None
    entity_id: Optional[str] = None
    required_balance: Optional[float] = None
    send_event: Optional[bool] = None
    with_preview: Optional[bool] = None
    properties: Optional[Dict[str, Any]] = None


class TrackParams(CamelModel):
    feature_id: Optional[str] = None
    event_name: Optional[str] = None
    entity_id: Optional[str] = None
    value: Optional[float] = None
    idempotency_key: Optional[str] = None
    properties: Optional[Dict[str, Any]] = None


class CancelParams(CamelModel):
    product_id: str
    entity_id: Optional[str] = None
    cancel_immediately: Optional[bool] = None


# ============================================================================
# Referrals
# ============================================================================


class CreateReferralCodeParams(CamelModel):
    program_id: str


class RedeemReferralCodeParams(CamelModel):
    code: str


# ============================================================================
# Billing Portal
# ============================================================================


class OpenBillingPortalParams(CamelModel):
    return_url: Optional[str] = None


# ============================================================================
# Entities
# ============================================================================


class CreateEntityParams(CamelModel):
    id: str
    name: Optional[str] = None
    feature_id: str = Field(..., description="Feature the entity consumes")


class CreateEntityBody(RootModel[Union[CreateEntityParams, List[CreateEntityParams]]]):
    """One entity or a batch of entities."""

    pass
