"""Central environment-driven settings for the Black Cat gateway client.

Scripts and host applications load this once at startup and hand the resolved
`GatewayCredentials` to the client (see `.env.example`).
"""

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_URL = "https://api.blackcatpagamentos.online/api"


class GatewayCredentials(BaseModel):
    """Resolved key pair sent on every gateway call."""

    api_key: str = ""
    public_key: str = ""


class GatewaySettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "catpay"
    log_level: str = "INFO"
    blackcat_api_url: str = DEFAULT_API_URL
    blackcat_timeout_seconds: float = 10.0
    otel_exporter_otlp_endpoint: str | None = None

    # Secret key slots, in lookup order.
    blackcat_api_key: str = ""
    blackcat_secret_key: str = ""
    next_public_blackcat_api_key: str = ""
    next_public_blackcat_secret_key: str = ""

    # Public key slots, in lookup order.
    blackcat_public_key: str = ""
    next_public_blackcat_public_key: str = ""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def credentials(self) -> GatewayCredentials:
        """Resolve the api/public key pair from the first populated slots."""

        api_key = (
            self.blackcat_api_key
            or self.blackcat_secret_key
            or self.next_public_blackcat_api_key
            or self.next_public_blackcat_secret_key
            or ""
        )
        public_key = self.blackcat_public_key or self.next_public_blackcat_public_key or api_key
        return GatewayCredentials(api_key=api_key, public_key=public_key)


settings = GatewaySettings()
