"""Configuration for the GitHub Actions exporter."""

import os
from pathlib import Path

from pydantic import BaseModel, Field


class GitHubActionsConfig(BaseModel):
    """Configuration for the GitHub Actions exporter."""

    # Defaults to the file the runner exposes to every step.
    output_file: Path | None = Field(
        default_factory=lambda: (
            Path(path) if (path := os.environ.get("GITHUB_OUTPUT")) else None
        )
    )
