import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from common.core.config import settings
from common.core.exceptions import BillingAPIError, billing_api_error_handler
from api.v1.routes.router import api_router
from packages.auth.providers.header_session_provider import HeaderSessionProvider
from packages.auth.providers.interface import (
    OrganizationProviderInterface,
    SessionProviderInterface,
)
from packages.auth.providers.organization_provider import NullOrganizationProvider
from packages.billing.models.domain.plugin_config import PluginConfig
from packages.billing.routes.autumn import create_autumn_router

# Initialize Axiom OpenTelemetry exporter (must be first)
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from common.core.otel_axiom_exporter import (
    _initialize_telemetry,
    get_logger,
)  # noqa


_initialize_telemetry()
# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

# Get logger
logger = get_logger(__name__)


def create_app(
    plugin_config: Optional[PluginConfig] = None,
    session_provider: Optional[SessionProviderInterface] = None,
    organization_provider: Optional[OrganizationProviderInterface] = None,
) -> FastAPI:
    """Assemble the API with the billing plugin mounted under the auth prefix."""
    plugin_config = plugin_config or PluginConfig.from_settings(settings)
    session_provider = session_provider or HeaderSessionProvider()
    organization_provider = organization_provider or NullOrganizationProvider()

    # Only expose OpenAPI docs in local development
    docs_url = "/docs" if settings.environment == "local" else None
    redoc_url = "/redoc" if settings.environment == "local" else None
    openapi_url = "/openapi.json" if settings.environment == "local" else None

    app = FastAPI(
        title=settings.app_name,
        version=settings.api_version,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
    )
    app.add_exception_handler(BillingAPIError, billing_api_error_handler)

    # Instrument FastAPI with OpenTelemetry
    FastAPIInstrumentor.instrument_app(app)

    # Add gzip compression middleware
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api/v1")
    app.include_router(
        create_autumn_router(plugin_config, session_provider, organization_provider),
        prefix=settings.auth_route_prefix,
        tags=["billing"],
    )

    # Internal health endpoint for k8s probes - not under /api/v1 to avoid external spam
    @app.get("/healthz", include_in_schema=False)
    async def healthz():
        return {"status": "ok"}

    logger.info(
        "Billing plugin mounted",
        extra={
            "prefix": settings.auth_route_prefix,
            "enable_organizations": plugin_config.enable_organizations,
            "custom_identity": plugin_config.identify is not None,
        },
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
