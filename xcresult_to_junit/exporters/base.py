"""Abstract base class for output exporters."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class OutputExporter(ABC):
    """Publishes step outputs to the CI environment running the step."""

    @abstractmethod
    async def export(self, key: str, value: str) -> None:
        """Make an output value available to later steps.

        Args:
            key: Output name (e.g., "XCRESULT_TO_JUNIT_OUTPUT_PATH")
            value: Output value

        Raises:
            ExportError: If the output cannot be published

        """
