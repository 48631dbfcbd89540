"""
Configuration module for Form Studio.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class FormStudioConfig:
    """Configuration settings for Form Studio."""

    # REST collaborator
    api_base_url: str = "http://localhost:4000/api"
    request_timeout: float = 30.0

    # Auth session persistence
    auth_store_path: str = ".form_studio/auth.json"

    # Schema output
    json_schema_version: str = "https://json-schema.org/draft/2020-12/schema"
    default_form_title: str = "New Form"

    # Rendering
    default_col_span: int = 12  # half of a 24 column grid
    textarea_rows: int = 3
    summary_field_count: int = 6

    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "FormStudioConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            api_base_url=os.getenv("FORM_STUDIO_API_URL", _defaults.api_base_url),
            request_timeout=float(os.getenv("FORM_STUDIO_TIMEOUT", str(_defaults.request_timeout))),
            auth_store_path=os.getenv("FORM_STUDIO_AUTH_FILE", _defaults.auth_store_path),
            json_schema_version=os.getenv("FORM_STUDIO_SCHEMA_VERSION", _defaults.json_schema_version),
            default_form_title=os.getenv("FORM_STUDIO_DEFAULT_TITLE", _defaults.default_form_title),
            summary_field_count=int(os.getenv("FORM_STUDIO_SUMMARY_FIELDS", str(_defaults.summary_field_count))),
            log_level=os.getenv("FORM_STUDIO_LOG_LEVEL", _defaults.log_level).upper(),
        )


config = FormStudioConfig.from_env()


def get_config() -> FormStudioConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> FormStudioConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
