"""CLI entry point for the xcresult to JUnit conversion step."""

import argparse
import asyncio
import json
import logging
import os
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from xcresult_to_junit.assembler import serialize
from xcresult_to_junit.config import StepConfig
from xcresult_to_junit.converter import build_report, parse_xcresult_json, write_report
from xcresult_to_junit.errors import ExportError, StepError
from xcresult_to_junit.exporters.base import OutputExporter
from xcresult_to_junit.exporters.loading import load_exporter_manifest
from xcresult_to_junit.models.junit import Report
from xcresult_to_junit.xcresulttool import fetch_test_results

OUTPUT_PATH_KEY = "XCRESULT_TO_JUNIT_OUTPUT_PATH"

STATUS_SYMBOLS = {
    "passed": "✅",
    "failed": "❌",
}


def log_config(log: logging.Logger, config: StepConfig) -> None:
    """Log the effective step configuration."""
    log.info("Configs:")
    for key, value in config.model_dump().items():
        log.info("- %s: %s", key, value)


def log_report_summary(log: logging.Logger, report: Report) -> None:
    """Log a formatted summary of the converted suites."""
    log.info("=" * 80)
    log.info("Test Results Summary:")
    log.info("=" * 80)

    for suite in report.suites:
        symbol = STATUS_SYMBOLS["failed" if suite.failures else "passed"]
        log.info(
            "%s %s: %d test(s), %d failure(s) (%.2fs)",
            symbol,
            suite.name,
            suite.tests,
            suite.failures,
            suite.time,
        )
        for case in suite.cases:
            if case.failure is not None:
                log.info(
                    "  %s.%s: %s", case.classname, case.name, case.failure.message
                )

    log.info(
        "Total: %d test(s), %d failure(s)", report.total_tests, report.total_failures
    )


def load_exporter(key: str, exporter_config_json: str) -> OutputExporter:
    """Load the exporter plugin for key and build it from its JSON config."""
    manifest = load_exporter_manifest(key)

    try:
        config = manifest.config_cls(**json.loads(exporter_config_json))
    except (ValueError, TypeError) as e:
        raise ExportError(f"Invalid configuration for exporter '{key}': {e}") from e

    return manifest.exporter_factory(config)


async def run(config: StepConfig) -> int:
    """Convert the configured xcresult bundle and return exit code."""
    log = logging.getLogger("xcresult_to_junit")
    log_config(log, config)

    if not config.xcresult_path.exists():
        log.error("XCResult path does not exist: %s", config.xcresult_path)
        return 1

    try:
        exporter = load_exporter(config.exporter, config.exporter_config)

        log.info("Converting XCResult to JSON...")
        json_data = await fetch_test_results(config.xcresult_path)

        log.info("Converting JSON to JUnit XML...")
        report = build_report(parse_xcresult_json(json_data))
        junit_xml = serialize(report)

        log_report_summary(log, report)

        log.info(
            "Writing JUnit XML to file: %s", config.output_dir / config.junit_filename
        )
        output_path = write_report(config.output_dir, config.junit_filename, junit_xml)

        await exporter.export(OUTPUT_PATH_KEY, str(output_path))
    except StepError as e:
        log.error("%s", e)
        return 1

    log.info("XCResult successfully converted to JUnit XML")
    return 0


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Every option is optional on the command line and falls back to the step
    input of the same name in the environment.
    """
    parser = argparse.ArgumentParser(
        description="Convert Xcode xcresult test results to JUnit XML"
    )
    parser.add_argument(
        "--xcresult-path",
        help="Path to the .xcresult bundle (env: xcresult_path)",
    )
    parser.add_argument(
        "--output-dir",
        help="Directory to write the JUnit report to (env: output_dir)",
    )
    parser.add_argument(
        "--junit-filename",
        help="File name of the JUnit report (env: junit_filename)",
    )
    parser.add_argument(
        "--verbose",
        help="Enable debug logging, 'yes' or 'no' (env: verbose)",
    )
    parser.add_argument(
        "--exporter",
        help="Exporter for the output path: envman, github-actions (env: exporter)",
    )
    parser.add_argument(
        "--exporter-config",
        help="JSON configuration for the exporter (env: exporter_config)",
    )
    return parser.parse_args(argv)


def main() -> None:
    """CLI entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    log = logging.getLogger("xcresult_to_junit")

    overrides = {key: value for key, value in vars(args).items() if value is not None}
    try:
        config = StepConfig.from_env(os.environ, **overrides)
    except ValidationError as e:
        log.error("Failed to parse config: %s", e)
        sys.exit(1)

    if config.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    exit_code = asyncio.run(run(config))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
