"""Conversion of xcresulttool test results JSON to JUnit XML."""

import json
import logging
from collections.abc import Callable
from pathlib import Path

from xcresult_to_junit.assembler import assemble, serialize
from xcresult_to_junit.errors import OutputWriteError, XCResultDecodeError
from xcresult_to_junit.flattener import flatten
from xcresult_to_junit.models.junit import Report, current_timestamp
from xcresult_to_junit.models.xcresult import XCResultRoot

log = logging.getLogger(__name__)


def parse_xcresult_json(data: bytes) -> XCResultRoot:
    """Decode the output of ``xcresulttool get test-results tests``.

    Raises:
        XCResultDecodeError: If the data is not JSON or does not match the
            expected structure

    """
    try:
        root = XCResultRoot.model_validate(json.loads(data))
    except ValueError as e:
        raise XCResultDecodeError(f"Failed to parse XCResult JSON: {e}") from e

    for device in root.devices:
        log.debug(
            "Device: %s (%s, %s %s)",
            device.device_name,
            device.model_name,
            device.platform,
            device.os_version,
        )
    return root


def build_report(
    root: XCResultRoot, *, now: Callable[[], str] = current_timestamp
) -> Report:
    """Flatten the results tree and assemble it into a report."""
    return assemble(flatten(root.test_nodes, now=now), now=now)


def convert_xcresult_json(data: bytes) -> bytes:
    """Convert xcresulttool JSON to a JUnit XML document."""
    return serialize(build_report(parse_xcresult_json(data)))


def write_report(output_dir: Path, filename: str, data: bytes) -> Path:
    """Write the XML document, creating the output directory if needed.

    Returns:
        Path of the written file

    """
    output_path = output_dir / filename
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
    except OSError as e:
        raise OutputWriteError(
            f"Failed to write JUnit XML to {output_path}: {e}"
        ) from e
    return output_path
