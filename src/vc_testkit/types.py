"""Errors and type aliases for vc-testkit"""

from typing import Any, Callable, TypeAlias

ViewControllerFactory: TypeAlias = Callable[[], Any]
"""Zero-argument callable returning the view controller under test"""


class TestKitError(Exception):
    """Base class for vc-testkit errors"""


class ClassUnderTestNotDefined(NotImplementedError, TestKitError):
    """The test case subclass did not name the view controller class to test"""


class ViewControllerNotCreated(TestKitError):
    """Constructing the view controller did not produce an instance"""


class PersistenceError(TestKitError):
    """The persistence stack could not be bootstrapped"""
