"""Tests for xcresulttool payload models."""

import pytest
from pydantic import ValidationError

from xcresult_to_junit.models.xcresult import NodeKind, TestNode, XCResultRoot


@pytest.mark.parametrize(
    ("node_type", "kind"),
    [
        ("Unit test bundle", NodeKind.UNIT_TEST_BUNDLE),
        ("UI test bundle", NodeKind.UI_TEST_BUNDLE),
        ("Test Suite", NodeKind.TEST_SUITE),
        ("Test Plan", NodeKind.TEST_PLAN),
        ("Test Plan Configuration", NodeKind.TEST_PLAN_CONFIGURATION),
        ("Test Case", NodeKind.TEST_CASE),
        ("Failure Message", NodeKind.FAILURE_MESSAGE),
        ("Repetition", None),
        ("test case", None),
        ("", None),
    ],
)
def test_kind(node_type: str, kind: NodeKind | None) -> None:
    """Maps recognized node types to kinds and everything else to None."""
    assert TestNode(node_type=node_type).kind is kind


def test_accepts_aliases_and_field_names() -> None:
    """Nodes validate from camelCase payloads and from field names."""
    from_payload = TestNode.model_validate(
        {"nodeType": "Test Case", "nodeIdentifier": "A/b"}
    )
    from_fields = TestNode(node_type="Test Case", node_identifier="A/b")

    assert from_payload == from_fields


def test_nodes_are_frozen() -> None:
    """Nodes cannot be modified after validation."""
    node = TestNode(name="testA")

    with pytest.raises(ValidationError):
        node.name = "testB"  # type: ignore[misc]


def test_root_defaults() -> None:
    """Root fields default to empty sequences."""
    root = XCResultRoot.model_validate({})

    assert root.test_nodes == []
    assert root.devices == []
