from typing import Optional, List
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.core.constants import Environment


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Environment Profile
    environment: Environment = Environment.LOCAL

    # API Settings
    app_name: str = "Autumn Billing Adapter"
    api_version: str = "0.1.0"
    debug: bool = False

    # Prefix the auth layer is mounted under; plugin endpoints live below it
    auth_route_prefix: str = "/api/auth"

    # Autumn billing backend
    autumn_secret_key: Optional[str] = None
    autumn_prod_secret_key: Optional[str] = None
    autumn_url: str = "https://api.useautumn.com/v1"
    autumn_enable_organizations: bool = False
    autumn_request_timeout_seconds: float = 30.0

    # OpenTelemetry
    otel_service_name: str = "autumn-billing-adapter"
    otel_service_version: str = "0.1.0"

    # Axiom (exporters are only attached when a token is configured)
    axiom_token: Optional[str] = None
    axiom_dataset: Optional[str] = None

    @property
    def cors_allowed_origins(self) -> List[str]:
        """Auto-select CORS origins based on environment."""
        if self.environment == Environment.LOCAL:
            return [
                "http://localhost:3000",
                "http://localhost:3001",
            ]
        return []


settings = Settings()
