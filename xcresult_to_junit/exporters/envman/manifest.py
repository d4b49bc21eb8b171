"""Envman exporter manifest."""

from xcresult_to_junit.exporters.envman.config import EnvmanConfig
from xcresult_to_junit.exporters.envman.exporter import EnvmanExporter
from xcresult_to_junit.exporters.manifest import ExporterManifest

envman_manifest = ExporterManifest(
    config_cls=EnvmanConfig,
    exporter_factory=EnvmanExporter.from_config,
)
