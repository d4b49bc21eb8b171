"""Step configuration."""

from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

ENV_KEYS = (
    "xcresult_path",
    "output_dir",
    "junit_filename",
    "verbose",
    "exporter",
    "exporter_config",
)


class StepConfig(BaseModel):
    """Inputs of the conversion step."""

    xcresult_path: Path
    output_dir: Path
    junit_filename: str = Field(..., min_length=1)
    verbose: bool = False
    exporter: str = "envman"
    exporter_config: str = Field(
        default="{}", description="JSON configuration for the exporter"
    )

    @field_validator("verbose", mode="before")
    @classmethod
    def empty_verbose_is_false(cls, value: object) -> object:
        """Treat an unset ``verbose`` input as "no"."""
        if value is None or value == "":
            return False
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str], **overrides: str) -> "StepConfig":
        """Build config from step inputs exposed as environment variables.

        Empty variables count as unset. Overrides take precedence over the
        environment.
        """
        inputs = {key: environ[key] for key in ENV_KEYS if environ.get(key)}
        inputs.update(overrides)
        return cls.model_validate(inputs)
