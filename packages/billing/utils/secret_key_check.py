"""
Credential source for the billing backend secret key.
"""

from typing import Optional
from pydantic import BaseModel

from common.core.config import settings
from common.core.constants import Environment


class SecretKeyError(BaseModel):
    status_code: int = 400
    message: str = "Autumn secret key not found in environment variables"
    code: str = "no_secret_key"


class SecretKeyCheckResult(BaseModel):
    found: bool
    secret_key: Optional[str] = None
    error: Optional[SecretKeyError] = None


def read_secret_key() -> Optional[str]:
    """Production key wins in the production environment, sandbox key otherwise."""
    if settings.environment == Environment.PRODUCTION and settings.autumn_prod_secret_key:
        return settings.autumn_prod_secret_key
    return settings.autumn_secret_key or None


def check_secret_key() -> SecretKeyCheckResult:
    secret_key = read_secret_key()
    if secret_key:
        return SecretKeyCheckResult(found=True, secret_key=secret_key)
    return SecretKeyCheckResult(found=False, error=SecretKeyError())
