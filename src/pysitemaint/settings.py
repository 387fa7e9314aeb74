"""Place for all settings classes for the maintenance command."""

import os
from typing import Literal, Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MaintenanceSettings(BaseSettings):
    """Settings for the maintenance command."""

    site_root: str = Field(default_factory=os.getcwd, description="Install root of the web site")
    content_dir: str | None = Field(
        default=None,
        description="Content root of the web site, if not specified, it will be set to <site_root>/wp-content",
    )
    marker_file: str = Field(default=".maintenance", description="Maintenance marker file, relative to site_root")
    template_file: str = Field(
        default="maintenance.php",
        description="Maintenance page slot, relative to content_dir",
    )
    tool_name: str = Field(default="WP-CLI", description="Name written into the template override delimiters")

    loglevel: Literal["INFO", "DEBUG", "WARNING", "ERROR"] = "WARNING"

    model_config = SettingsConfigDict(env_prefix="MAINTENANCE_")

    @model_validator(mode="after")
    def fallback(self) -> Self:
        """Fallback implementation to derive the content directory from the site root."""

        if not self.content_dir:
            self.content_dir = os.path.join(self.site_root, "wp-content")

        return self
