"""Envman exporter implementation."""

import asyncio
import logging
from dataclasses import dataclass

from xcresult_to_junit.errors import ExportError
from xcresult_to_junit.exporters.base import OutputExporter
from xcresult_to_junit.exporters.envman.config import EnvmanConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class EnvmanExporter(OutputExporter):
    """Exports outputs with ``envman add`` for Bitrise workflows."""

    config: EnvmanConfig

    @classmethod
    def from_config(cls, config: EnvmanConfig) -> "EnvmanExporter":
        """Create exporter from its configuration."""
        return cls(config=config)

    async def export(self, key: str, value: str) -> None:
        """Run ``envman add`` for the given output."""
        log.info("Exporting %s with envman", key)

        try:
            process = await asyncio.create_subprocess_exec(
                self.config.envman_path,
                "add",
                "--key",
                key,
                "--value",
                value,
            )
        except OSError as e:
            raise ExportError(f"Failed to execute envman: {e}") from e

        await process.communicate()

        if process.returncode != 0:
            raise ExportError(
                f"envman add failed for {key} with exit code {process.returncode}"
            )
