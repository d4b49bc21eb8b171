"""GitHub Actions exporter implementation."""

import logging
from dataclasses import dataclass

from xcresult_to_junit.errors import ExportError
from xcresult_to_junit.exporters.base import OutputExporter
from xcresult_to_junit.exporters.github_actions.config import GitHubActionsConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class GitHubActionsExporter(OutputExporter):
    """Exports outputs by appending to the GitHub Actions output file."""

    config: GitHubActionsConfig

    @classmethod
    def from_config(cls, config: GitHubActionsConfig) -> "GitHubActionsExporter":
        """Create exporter from its configuration."""
        return cls(config=config)

    async def export(self, key: str, value: str) -> None:
        """Append ``key=value`` to the step output file."""
        if self.config.output_file is None:
            raise ExportError("GITHUB_OUTPUT is not set and no output_file given")

        if "\n" in value:
            raise ExportError(f"Output value for {key} must be a single line")

        log.info("Exporting %s to %s", key, self.config.output_file)
        try:
            with self.config.output_file.open("a", encoding="utf-8") as output:
                output.write(f"{key}={value}\n")
        except OSError as e:
            raise ExportError(f"Failed to write {self.config.output_file}: {e}") from e
