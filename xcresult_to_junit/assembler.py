"""Assemble flattened suites into a JUnit report and serialize it."""

import re
import xml.etree.ElementTree as ET
from collections.abc import Callable, Mapping

from xcresult_to_junit.durations import format_seconds
from xcresult_to_junit.models.junit import (
    Report,
    SuiteAccumulator,
    TestSuite,
    current_timestamp,
)

DEFAULT_SUITE_NAME = "XCTest"
XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

# Characters outside the XML 1.0 Char production.
INVALID_XML_CHARS = re.compile(
    "[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def assemble(
    suites: Mapping[str, SuiteAccumulator],
    *,
    now: Callable[[], str] = current_timestamp,
) -> Report:
    """Build a report with aggregated counts and deterministic ordering.

    The accumulators are left untouched, so assembling the same mapping twice
    yields equal reports.

    Args:
        suites: Suite accumulators keyed by suite name
        now: Timestamp source for the default suite

    Returns:
        Report with suites and cases sorted by name. Holds a single empty
        default suite when no test cases were collected.

    """
    finalized = [finalize_suite(suites[name]) for name in sorted(suites)]

    if not finalized:
        finalized = [
            TestSuite(
                name=DEFAULT_SUITE_NAME,
                tests=0,
                failures=0,
                time=0.0,
                timestamp=now(),
            )
        ]

    return Report(suites=finalized)


def finalize_suite(accumulator: SuiteAccumulator) -> TestSuite:
    """Compute counts and total time of a suite and sort its cases."""
    return TestSuite(
        name=accumulator.name,
        tests=len(accumulator.cases),
        failures=accumulator.failures,
        time=sum(case.time for case in accumulator.cases),
        timestamp=accumulator.timestamp,
        cases=sorted(accumulator.cases, key=lambda case: case.name),
    )


def xml_text(text: str) -> str:
    """Replace characters XML cannot represent with U+FFFD."""
    return INVALID_XML_CHARS.sub("\ufffd", text)


def serialize(report: Report) -> bytes:
    """Serialize a report to a UTF-8 JUnit XML document."""
    root = ET.Element("testsuites")

    for suite in report.suites:
        suite_element = ET.SubElement(
            root,
            "testsuite",
            {
                "name": xml_text(suite.name),
                "tests": str(suite.tests),
                "failures": str(suite.failures),
                "errors": str(suite.errors),
                "time": format_seconds(suite.time),
                "timestamp": suite.timestamp,
            },
        )
        for case in suite.cases:
            case_element = ET.SubElement(
                suite_element,
                "testcase",
                {
                    "name": xml_text(case.name),
                    "classname": xml_text(case.classname),
                    "time": format_seconds(case.time),
                },
            )
            if case.failure is not None:
                failure_element = ET.SubElement(
                    case_element,
                    "failure",
                    {
                        "message": xml_text(case.failure.message),
                        "type": case.failure.type,
                    },
                )
                failure_element.text = xml_text(case.failure.content)

    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return (XML_HEADER + body).encode("utf-8")
