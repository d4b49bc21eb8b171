"""Models for the JUnit report built from the results tree."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

FAILURE_TYPE = "Failure"


@dataclass(frozen=True, kw_only=True)
class Failure:
    """Failure detail attached to a failing test case."""

    message: str
    type: str = FAILURE_TYPE
    content: str


@dataclass(frozen=True, kw_only=True)
class TestCase:
    """Single test case of a suite."""

    __test__ = False

    name: str
    classname: str
    time: float
    failure: Failure | None = None


@dataclass(kw_only=True)
class SuiteAccumulator:
    """Suite collected while walking the results tree.

    Cases are kept in discovery order; sorting happens at assembly time.
    """

    name: str
    timestamp: str
    cases: list[TestCase] = field(default_factory=list)
    failures: int = 0

    def add(self, case: TestCase) -> None:
        """Append a case and count it if it failed."""
        self.cases.append(case)
        if case.failure is not None:
            self.failures += 1


@dataclass(frozen=True, kw_only=True)
class TestSuite:
    """Finalized suite with aggregated counts."""

    __test__ = False

    name: str
    tests: int
    failures: int
    errors: int = 0
    time: float
    timestamp: str
    cases: Sequence[TestCase] = ()


@dataclass(frozen=True, kw_only=True)
class Report:
    """Complete JUnit report, suites sorted by name."""

    suites: Sequence[TestSuite]

    @property
    def total_tests(self) -> int:
        """Number of test cases across all suites."""
        return sum(suite.tests for suite in self.suites)

    @property
    def total_failures(self) -> int:
        """Number of failing test cases across all suites."""
        return sum(suite.failures for suite in self.suites)


def current_timestamp() -> str:
    """Return the current local time formatted as RFC3339."""
    return datetime.now().astimezone().isoformat(timespec="seconds")
