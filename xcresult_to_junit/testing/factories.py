"""Test factories for generating test data."""

from polyfactory.factories import DataclassFactory

from xcresult_to_junit.models.junit import TestCase


class TestCaseFactory(DataclassFactory[TestCase]):
    """Factory for passing TestCase records."""

    failure = None
