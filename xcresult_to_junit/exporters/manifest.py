"""Exporter manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from xcresult_to_junit.exporters.base import OutputExporter

ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass(frozen=True, kw_only=True)
class ExporterManifest(Generic[ConfigT]):
    """Manifest describing an exporter plugin.

    The manifest holds the configuration class and the factory building the
    exporter, so exporters are only imported once selected by key.
    """

    config_cls: type[ConfigT]
    exporter_factory: Callable[[ConfigT], OutputExporter]
