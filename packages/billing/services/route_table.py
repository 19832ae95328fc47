"""
Public-to-internal path rewriting and method/path matching for billing routes.

Public paths are what the auth layer exposes below ``/autumn/``; internal
paths are the ``/api/autumn/...`` routes the billing handlers are bound to.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Tuple
from pydantic import BaseModel, ConfigDict

from common.core.constants import AUTUMN_INTERNAL_PREFIX, AUTUMN_PUBLIC_SEGMENT


class RouteEntry(BaseModel):
    """One row of the public-to-internal path table."""

    model_config = ConfigDict(frozen=True)

    public_path: str
    internal_name: str


# Legacy public names kept so older clients keep working
ROUTE_ENTRIES: Tuple[RouteEntry, ...] = (
    RouteEntry(public_path="checkout", internal_name="checkout"),
    RouteEntry(public_path="attach", internal_name="attach"),
    RouteEntry(public_path="check", internal_name="check"),
    RouteEntry(public_path="track", internal_name="track"),
    RouteEntry(public_path="cancel", internal_name="cancel"),
    RouteEntry(public_path="referrals/redeem-code", internal_name="referrals/redeem"),
    RouteEntry(public_path="referrals/create-code", internal_name="referrals/code"),
    RouteEntry(public_path="open-billing-portal", internal_name="billing_portal"),
)

PUBLIC_PATH_MAP: Mapping[str, str] = MappingProxyType(
    {entry.public_path: entry.internal_name for entry in ROUTE_ENTRIES}
)


def public_suffix(path: str) -> str:
    """Portion of ``path`` after the first ``/autumn/`` segment."""
    _, _, rest = path.partition(AUTUMN_PUBLIC_SEGMENT)
    return rest


def resolve_path(suffix: str) -> str:
    """Map a public suffix to its internal path; unknown suffixes pass through."""
    return f"{AUTUMN_INTERNAL_PREFIX}/{PUBLIC_PATH_MAP.get(suffix, suffix)}"


def _split(path: str) -> List[str]:
    return [segment for segment in path.strip("/").split("/") if segment]


@dataclass(frozen=True)
class RouteMatch:
    """A matched handler plus the values captured by ``:name`` segments."""

    handler: Callable[..., Awaitable[Any]]
    params: Dict[str, str]


class InternalRoute:
    def __init__(self, method: str, pattern: str, handler: Callable[..., Awaitable[Any]]):
        self.method = method.upper()
        self.pattern = pattern
        self.segments = _split(pattern)
        self.handler = handler

    def match(self, method: str, segments: List[str]) -> Optional[Dict[str, str]]:
        if method.upper() != self.method or len(segments) != len(self.segments):
            return None

        params: Dict[str, str] = {}
        for expected, actual in zip(self.segments, segments):
            if expected.startswith(":"):
                params[expected[1:]] = actual
            elif expected != actual:
                return None
        return params


class InternalRouter:
    """Ordered route list; the first structural match for the method wins."""

    def __init__(self):
        self.routes: List[InternalRoute] = []

    def add(self, method: str, pattern: str, handler: Callable[..., Awaitable[Any]]):
        self.routes.append(InternalRoute(method, pattern, handler))

    def match(self, method: str, path: str) -> Optional[RouteMatch]:
        segments = _split(path)
        for route in self.routes:
            params = route.match(method, segments)
            if params is not None:
                return RouteMatch(handler=route.handler, params=params)
        return None
