"""Integration tests for the envman exporter using a fake envman."""

from collections.abc import Callable
from pathlib import Path

import pytest

from xcresult_to_junit.errors import ExportError
from xcresult_to_junit.exporters.envman import EnvmanConfig, EnvmanExporter


async def test_runs_envman_add(
    tmp_path: Path, fake_executable: Callable[[str, str], Path]
) -> None:
    """Runs envman add with the key and value."""
    args_file = tmp_path / "args.txt"
    fake_executable("envman", f'printf "%s\\n" "$@" > "{args_file}"')
    exporter = EnvmanExporter.from_config(EnvmanConfig())

    await exporter.export("XCRESULT_TO_JUNIT_OUTPUT_PATH", "/out/junit.xml")

    assert args_file.read_text().splitlines() == [
        "add",
        "--key",
        "XCRESULT_TO_JUNIT_OUTPUT_PATH",
        "--value",
        "/out/junit.xml",
    ]


async def test_raises_on_failure(fake_executable: Callable[[str, str], Path]) -> None:
    """Non-zero envman exit raises ExportError."""
    fake_executable("envman", "exit 3")
    exporter = EnvmanExporter.from_config(EnvmanConfig())

    with pytest.raises(ExportError) as exc_info:
        await exporter.export("KEY", "value")

    assert "exit code 3" in str(exc_info.value)


async def test_raises_when_envman_missing(tmp_path: Path) -> None:
    """A missing envman binary raises ExportError."""
    exporter = EnvmanExporter.from_config(
        EnvmanConfig(envman_path=str(tmp_path / "no-envman"))
    )

    with pytest.raises(ExportError):
        await exporter.export("KEY", "value")
