"""Base test case for Django view controllers"""

from vc_testkit.testcase import ViewControllerTestCase, register_lifecycle_tests
from vc_testkit.types import (
    ClassUnderTestNotDefined,
    PersistenceError,
    TestKitError,
    ViewControllerNotCreated,
)

__all__ = (
    "ClassUnderTestNotDefined",
    "PersistenceError",
    "TestKitError",
    "ViewControllerNotCreated",
    "ViewControllerTestCase",
    "register_lifecycle_tests",
)
