"""Fetch test results from an xcresult bundle with xcresulttool."""

import asyncio
import logging
from pathlib import Path

from xcresult_to_junit.errors import XCResultToolError

log = logging.getLogger(__name__)


async def fetch_test_results(xcresult_path: Path, *, xcrun: str = "xcrun") -> bytes:
    """Run ``xcresulttool get test-results tests`` and return its JSON output.

    Args:
        xcresult_path: Path to the .xcresult bundle
        xcrun: Name or path of the xcrun executable

    Raises:
        XCResultToolError: If the command cannot be started or exits with a
            non-zero status

    """
    try:
        process = await asyncio.create_subprocess_exec(
            xcrun,
            "xcresulttool",
            "get",
            "test-results",
            "tests",
            "--path",
            str(xcresult_path),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise XCResultToolError(
            f"Failed to execute {xcrun}: {e}", exit_code=None, stderr=""
        ) from e

    stdout, stderr = await process.communicate()

    if process.returncode != 0:
        diagnostics = stderr.decode(errors="replace").strip()
        raise XCResultToolError(
            f"xcresulttool failed with exit code {process.returncode}: {diagnostics}",
            exit_code=process.returncode,
            stderr=diagnostics,
        )

    log.debug("XCResult JSON output length: %d bytes", len(stdout))
    return stdout
