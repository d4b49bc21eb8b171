"""GitHub Actions exporter module."""

from xcresult_to_junit.exporters.github_actions.config import GitHubActionsConfig
from xcresult_to_junit.exporters.github_actions.exporter import GitHubActionsExporter
from xcresult_to_junit.exporters.github_actions.manifest import github_actions_manifest

__all__ = ["GitHubActionsConfig", "GitHubActionsExporter", "github_actions_manifest"]
