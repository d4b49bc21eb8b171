"""Flatten the xcresult test tree into JUnit suites."""

import logging
from collections.abc import Callable, Mapping, Sequence
from enum import Enum, auto

from xcresult_to_junit.durations import parse_duration
from xcresult_to_junit.models.junit import (
    Failure,
    SuiteAccumulator,
    TestCase,
    current_timestamp,
)
from xcresult_to_junit.models.xcresult import NodeKind, TestNode

log = logging.getLogger(__name__)

UNKNOWN_SUITE = "UnknownSuite"
FALLBACK_FAILURE_MESSAGE = "Test failed"
FAILED_RESULT = "Failed"
IDENTIFIER_SEPARATOR = "/"


class Traversal(Enum):
    """How the walk treats a node of a given kind."""

    EXTEND_PREFIX = auto()
    KEEP_PREFIX = auto()
    TEST_CASE = auto()
    SKIP = auto()


TRAVERSAL_BY_KIND: Mapping[NodeKind, Traversal] = {
    NodeKind.UNIT_TEST_BUNDLE: Traversal.EXTEND_PREFIX,
    NodeKind.UI_TEST_BUNDLE: Traversal.EXTEND_PREFIX,
    NodeKind.TEST_SUITE: Traversal.EXTEND_PREFIX,
    NodeKind.TEST_PLAN: Traversal.KEEP_PREFIX,
    NodeKind.TEST_PLAN_CONFIGURATION: Traversal.KEEP_PREFIX,
    NodeKind.TEST_CASE: Traversal.TEST_CASE,
    # Only reached through find_failure_message.
    NodeKind.FAILURE_MESSAGE: Traversal.SKIP,
}


def flatten(
    nodes: Sequence[TestNode],
    *,
    now: Callable[[], str] = current_timestamp,
) -> dict[str, SuiteAccumulator]:
    """Collect the test cases of a results forest into suites keyed by name.

    Args:
        nodes: Root nodes of the results tree
        now: Timestamp source, called once per created suite

    Returns:
        Suite accumulators keyed by suite name, in discovery order

    """
    suites: dict[str, SuiteAccumulator] = {}
    _walk(nodes, "", suites, now)
    return suites


def _walk(
    nodes: Sequence[TestNode],
    classname: str,
    suites: dict[str, SuiteAccumulator],
    now: Callable[[], str],
) -> None:
    for node in nodes:
        kind = node.kind
        traversal = Traversal.SKIP if kind is None else TRAVERSAL_BY_KIND[kind]

        match traversal:
            case Traversal.EXTEND_PREFIX:
                prefix = join_classname(classname, node.name)
                _walk(node.children, prefix, suites, now)
            case Traversal.KEEP_PREFIX:
                _walk(node.children, classname, suites, now)
            case Traversal.TEST_CASE:
                _add_test_case(node, classname, suites, now)
            case Traversal.SKIP:
                pass


def _add_test_case(
    node: TestNode,
    classname: str,
    suites: dict[str, SuiteAccumulator],
    now: Callable[[], str],
) -> None:
    # Identifiers without a separator belong to configurations, not tests.
    if IDENTIFIER_SEPARATOR not in node.node_identifier:
        log.debug(
            "Skipping test node without test identifier: name=%s identifier=%r",
            node.name,
            node.node_identifier,
        )
        return

    suite_name = node.node_identifier.split(IDENTIFIER_SEPARATOR, 1)[0]
    suite_name = suite_name or UNKNOWN_SUITE

    failure = None
    if node.result == FAILED_RESULT:
        message = find_failure_message(node)
        if message is None:
            message = FALLBACK_FAILURE_MESSAGE
        failure = Failure(message=message, content=message)

    if (suite := suites.get(suite_name)) is None:
        suite = SuiteAccumulator(name=suite_name, timestamp=now())
        suites[suite_name] = suite

    suite.add(
        TestCase(
            name=node.name,
            classname=classname,
            time=parse_duration(node.duration),
            failure=failure,
        )
    )


def find_failure_message(node: TestNode) -> str | None:
    """Return the first failure message below a node, depth first.

    Children are visited in order, each one checked before its own subtree
    is searched. Returns None when the subtree holds no failure message.
    """
    for child in node.children:
        if child.kind is NodeKind.FAILURE_MESSAGE:
            return child.name

        if (message := find_failure_message(child)) is not None:
            return message

    return None


def join_classname(prefix: str, name: str) -> str:
    """Append a container name to a dotted classname."""
    if not prefix:
        return name
    return f"{prefix}.{name}"
