"""Loading of exporters from entry points."""

from importlib.metadata import entry_points
from typing import Any

from xcresult_to_junit.errors import StepError
from xcresult_to_junit.exporters.manifest import ExporterManifest

ENTRY_POINT_GROUP = "xcresult_to_junit.exporters"


class ExporterNotFoundError(StepError):
    """Raised when an exporter is not found."""


def load_exporter_manifest(key: str) -> ExporterManifest[Any]:
    """Load an exporter manifest by key.

    Args:
        key: The exporter key as registered in pyproject.toml
             (e.g., "envman", "github-actions")

    Returns:
        The exporter manifest instance

    Raises:
        ExporterNotFoundError: If no exporter with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: ExporterManifest[Any] = entry.load()
            return manifest

    available = [e.name for e in entries]
    raise ExporterNotFoundError(
        f"Exporter '{key}' not found. Available exporters: {available}"
    )
