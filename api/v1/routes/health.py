from fastapi import APIRouter

from common.core.config import settings
from common.core.otel_axiom_exporter import get_logger
from packages.billing.utils.secret_key_check import check_secret_key

logger = get_logger(__name__)

router = APIRouter()


@router.get("/")
async def health_check():
    # No logging - k8s probes hit this every 5-10s
    return {"status": "healthy", "service": settings.otel_service_name}


@router.get("/billing")
async def billing_check():
    """Report whether a billing secret key is configured, without revealing it."""
    if check_secret_key().found:
        return {"status": "healthy", "billing": "configured"}
    logger.warning("Billing health check: no secret key configured")
    return {"status": "unhealthy", "billing": "missing_secret_key"}
