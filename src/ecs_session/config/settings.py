"""Runtime settings for ecs-session."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ecs_session.config.paths import default_region_path


class SessionSettings(BaseSettings):
    """Settings read from ``ECS_SESSION_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="ECS_SESSION_", extra="ignore")

    aws_cli: str = Field(default="aws", description="AWS CLI executable name or path")
    region_file: Path | None = Field(default=None, description="Default region file override")
    default_profile: str | None = Field(default=None, description="AWS profile when none is given")

    def resolved_region_file(self) -> Path:
        """Return the default region file, honouring the override."""
        return self.region_file or default_region_path()


def get_settings() -> SessionSettings:
    """Load and return the settings from the environment."""
    return SessionSettings()
