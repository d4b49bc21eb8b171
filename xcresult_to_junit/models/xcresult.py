"""Models for the test-results JSON emitted by xcresulttool."""

from collections.abc import Sequence
from enum import StrEnum

from pydantic import Field

from xcresult_to_junit.models.base import Model


class NodeKind(StrEnum):
    """Recognized values of the ``nodeType`` field."""

    UNIT_TEST_BUNDLE = "Unit test bundle"
    UI_TEST_BUNDLE = "UI test bundle"
    TEST_SUITE = "Test Suite"
    TEST_PLAN = "Test Plan"
    TEST_PLAN_CONFIGURATION = "Test Plan Configuration"
    TEST_CASE = "Test Case"
    FAILURE_MESSAGE = "Failure Message"


class Device(Model):
    """Device the tests ran on."""

    architecture: str = ""
    device_id: str = ""
    device_name: str = ""
    model_name: str = ""
    os_version: str = ""
    platform: str = ""


class TestNode(Model):
    """A node in the test results tree.

    Every field is optional in the payload. Missing text fields read as empty
    strings so that malformed nodes degrade instead of failing the conversion.
    """

    __test__ = False

    name: str = ""
    node_type: str = ""
    duration: str = ""
    result: str = ""
    node_identifier: str = Field(
        default="", description="Slash-delimited identifier, empty for containers"
    )
    children: Sequence["TestNode"] = Field(default_factory=list)

    @property
    def kind(self) -> NodeKind | None:
        """Node kind, or None when the node type is not recognized."""
        try:
            return NodeKind(self.node_type)
        except ValueError:
            return None


class XCResultRoot(Model):
    """Root object of ``xcresulttool get test-results tests``."""

    devices: Sequence[Device] = Field(default_factory=list)
    test_nodes: Sequence[TestNode] = Field(default_factory=list)
