"""
Per-request models passed between the dispatcher and the billing handlers.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class RequestContext(BaseModel):
    """Immutable bundle describing one inbound plugin request."""

    model_config = ConfigDict(frozen=True)

    path: str
    method: str
    url: str
    body: Any = None
    path_params: Dict[str, str] = Field(default_factory=dict)
    headers: Dict[str, str] = Field(default_factory=dict)

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())


class HandlerResult(BaseModel):
    """Outcome of a delegated billing handler."""

    status_code: int
    body: Any = None

    @property
    def is_error(self) -> bool:
        return self.status_code >= 400

    def error_field(self, key: str) -> Optional[str]:
        if isinstance(self.body, dict):
            return self.body.get(key)
        return None
