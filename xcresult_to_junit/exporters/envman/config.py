"""Configuration for the envman exporter."""

from pydantic import BaseModel


class EnvmanConfig(BaseModel):
    """Configuration for the envman exporter."""

    envman_path: str = "envman"
