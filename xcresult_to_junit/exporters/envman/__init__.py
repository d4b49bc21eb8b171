"""Envman exporter module."""

from xcresult_to_junit.exporters.envman.config import EnvmanConfig
from xcresult_to_junit.exporters.envman.exporter import EnvmanExporter
from xcresult_to_junit.exporters.envman.manifest import envman_manifest

__all__ = ["EnvmanConfig", "EnvmanExporter", "envman_manifest"]
