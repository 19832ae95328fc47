"""
Handlers bound to the internal ``/api/autumn`` routes.

Each handler turns normalized request data into one billing client call and
returns the backend's status and body as a ``HandlerResult``.
"""

import functools
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict

from common.core.constants import AUTUMN_INTERNAL_PREFIX
from common.core.otel_axiom_exporter import get_logger
from packages.billing.models.domain.identity import BillingSubject
from packages.billing.models.domain.request import HandlerResult
from packages.billing.providers.billing_client.interface import (
    BillingClientInterface,
    BillingResponse,
)
from packages.billing.services.identity_resolver import SubjectProvider
from packages.billing.services.route_table import InternalRouter

logger = get_logger(__name__)


@dataclass(frozen=True)
class HandlerArgs:
    """Everything a billing handler may need for one request."""

    billing_client: BillingClientInterface
    path: str
    get_customer: SubjectProvider
    body: Any = None
    path_params: Dict[str, str] = field(default_factory=dict)
    search_params: Dict[str, str] = field(default_factory=dict)

    @property
    def body_dict(self) -> Dict[str, Any]:
        return dict(self.body) if isinstance(self.body, dict) else {}


Handler = Callable[[HandlerArgs], Awaitable[HandlerResult]]


def _to_result(response: BillingResponse) -> HandlerResult:
    return HandlerResult(status_code=response.status_code, body=response.body)


def _no_customer() -> HandlerResult:
    return HandlerResult(
        status_code=401,
        body={
            "message": "No customer identified for this request",
            "code": "no_customer_id",
        },
    )


def _with_customer(body: Dict[str, Any], subject: BillingSubject) -> Dict[str, Any]:
    # Identity fields always come from the resolved subject, never the caller
    return {
        **body,
        "customer_id": subject.customer_id,
        "customer_data": subject.customer_data.model_dump(exclude_none=True),
    }


def customer_scoped(
    func: Callable[[HandlerArgs, BillingSubject], Awaitable[HandlerResult]],
) -> Handler:
    """Resolve the billing subject first; 401 without calling the backend if absent."""

    @functools.wraps(func)
    async def wrapper(args: HandlerArgs) -> HandlerResult:
        subject = args.get_customer.resolve()
        if subject is None:
            logger.info("No billing subject for request", extra={"path": args.path})
            return _no_customer()
        return await func(args, subject)

    return wrapper


async def create_customer(args: HandlerArgs) -> HandlerResult:
    subject = args.get_customer.resolve()
    if subject is None:
        # Anonymous visitors simply have no customer yet
        return HandlerResult(status_code=200, body=None)

    body = args.body_dict
    expand = body.pop("expand", None)
    payload = {
        **body,
        "id": subject.customer_id,
        "email": subject.customer_data.email,
        "name": subject.customer_data.name,
    }
    return _to_result(await args.billing_client.create_customer(payload, expand=expand))


async def list_products(args: HandlerArgs) -> HandlerResult:
    return _to_result(await args.billing_client.list_products(args.search_params))


@customer_scoped
async def checkout(args: HandlerArgs, subject: BillingSubject) -> HandlerResult:
    return _to_result(
        await args.billing_client.checkout(_with_customer(args.body_dict, subject))
    )


@customer_scoped
async def attach(args: HandlerArgs, subject: BillingSubject) -> HandlerResult:
    return _to_result(
        await args.billing_client.attach(_with_customer(args.body_dict, subject))
    )


@customer_scoped
async def check(args: HandlerArgs, subject: BillingSubject) -> HandlerResult:
    return _to_result(
        await args.billing_client.check(_with_customer(args.body_dict, subject))
    )


@customer_scoped
async def track(args: HandlerArgs, subject: BillingSubject) -> HandlerResult:
    return _to_result(
        await args.billing_client.track(_with_customer(args.body_dict, subject))
    )


@customer_scoped
async def cancel(args: HandlerArgs, subject: BillingSubject) -> HandlerResult:
    return _to_result(
        await args.billing_client.cancel(_with_customer(args.body_dict, subject))
    )


@customer_scoped
async def create_referral_code(args: HandlerArgs, subject: BillingSubject) -> HandlerResult:
    return _to_result(
        await args.billing_client.create_referral_code(
            _with_customer(args.body_dict, subject)
        )
    )


@customer_scoped
async def redeem_referral_code(args: HandlerArgs, subject: BillingSubject) -> HandlerResult:
    return _to_result(
        await args.billing_client.redeem_referral_code(
            _with_customer(args.body_dict, subject)
        )
    )


@customer_scoped
async def billing_portal(args: HandlerArgs, subject: BillingSubject) -> HandlerResult:
    return _to_result(
        await args.billing_client.billing_portal(subject.customer_id, args.body_dict)
    )


@customer_scoped
async def create_entity(args: HandlerArgs, subject: BillingSubject) -> HandlerResult:
    # A list body creates several entities at once
    return _to_result(
        await args.billing_client.create_entity(subject.customer_id, args.body)
    )


@customer_scoped
async def get_entity(args: HandlerArgs, subject: BillingSubject) -> HandlerResult:
    return _to_result(
        await args.billing_client.get_entity(
            subject.customer_id,
            args.path_params["entityId"],
            params=args.search_params,
        )
    )


@customer_scoped
async def delete_entity(args: HandlerArgs, subject: BillingSubject) -> HandlerResult:
    return _to_result(
        await args.billing_client.delete_entity(
            subject.customer_id, args.path_params["entityId"]
        )
    )


def create_internal_router() -> InternalRouter:
    """Bind every billing handler to its internal route."""
    router = InternalRouter()
    prefix = AUTUMN_INTERNAL_PREFIX

    router.add("POST", f"{prefix}/customers", create_customer)
    router.add("GET", f"{prefix}/products", list_products)
    router.add("POST", f"{prefix}/checkout", checkout)
    router.add("POST", f"{prefix}/attach", attach)
    router.add("POST", f"{prefix}/check", check)
    router.add("POST", f"{prefix}/track", track)
    router.add("POST", f"{prefix}/cancel", cancel)
    router.add("POST", f"{prefix}/referrals/code", create_referral_code)
    router.add("POST", f"{prefix}/referrals/redeem", redeem_referral_code)
    router.add("POST", f"{prefix}/billing_portal", billing_portal)
    router.add("POST", f"{prefix}/entities", create_entity)
    router.add("GET", f"{prefix}/entities/:entityId", get_entity)
    router.add("DELETE", f"{prefix}/entities/:entityId", delete_entity)

    return router
