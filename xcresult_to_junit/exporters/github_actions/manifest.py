"""GitHub Actions exporter manifest."""

from xcresult_to_junit.exporters.github_actions.config import GitHubActionsConfig
from xcresult_to_junit.exporters.github_actions.exporter import GitHubActionsExporter
from xcresult_to_junit.exporters.manifest import ExporterManifest

github_actions_manifest = ExporterManifest(
    config_cls=GitHubActionsConfig,
    exporter_factory=GitHubActionsExporter.from_config,
)
