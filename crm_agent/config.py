"""Configuration management using pydantic-settings."""

from typing import List, Optional, Sequence
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field

from .errors import ConfigurationError


# Settings the privileged database client cannot be built without
SUPABASE_ADMIN_SETTINGS = ("supabase_url", "supabase_service_role_key")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True
    )

    # Application
    app_name: str = Field(default="CRM Agent API", description="Service name")
    app_url: str = Field(
        default="http://localhost:3000",
        validation_alias=AliasChoices("app_url", "next_public_app_url"),
        description="Public application URL"
    )
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("environment", "node_env"),
        description="Deployment environment"
    )

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")
    debug: bool = Field(default=False, description="Debug mode")

    # Supabase
    supabase_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("supabase_url", "next_public_supabase_url"),
        description="Supabase project URL"
    )
    supabase_anon_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("supabase_anon_key", "next_public_supabase_anon_key"),
        description="Supabase anonymous key"
    )
    supabase_service_role_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key (bypasses row level security)"
    )

    # CRM platform OAuth
    crm_client_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("crm_client_id", "ghl_client_id"),
        description="OAuth client ID"
    )
    crm_client_secret: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("crm_client_secret", "ghl_client_secret"),
        description="OAuth client secret"
    )
    crm_redirect_uri: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("crm_redirect_uri", "ghl_redirect_uri"),
        description="OAuth redirect URI"
    )
    crm_api_base_url: str = Field(
        default="https://services.leadconnectorhq.com",
        description="CRM platform API base URL"
    )
    crm_oauth_base_url: str = Field(
        default="https://marketplace.gohighlevel.com",
        description="CRM platform OAuth base URL"
    )

    # Diagnostics (development scaffolding)
    enable_diagnostic_routes: bool = Field(default=True, description="Mount the /api/test-db route")
    diagnostic_location_id: str = Field(
        default="test_location_456",
        description="Location ID looked up by the diagnostic route"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")
    log_file: Optional[str] = Field(default=None, description="Log file path")

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def missing_required(self, names: Sequence[str] = SUPABASE_ADMIN_SETTINGS) -> List[str]:
        """Get the names of required settings that are unset or empty."""
        return [name for name in names if not getattr(self, name)]

    def validate_required(self, names: Sequence[str] = SUPABASE_ADMIN_SETTINGS) -> None:
        """
        Ensure required settings are present.

        Args:
            names: Setting field names to check

        Raises:
            ConfigurationError: If any of them is missing
        """
        missing = self.missing_required(names)
        if missing:
            raise ConfigurationError(missing)


# Global settings instance
settings = Settings()
