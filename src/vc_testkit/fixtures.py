"""Fixtures

For test suites using unittest_fixtures instead of subclassing ViewControllerTestCase:

    >>> @given(fixtures.view_controller)
    >>> @where(view_controller__factory=NoteListView)
    >>> class NoteListViewTests(TestCase):
    ...     def test(self, fixtures: Fixtures) -> None:
    ...         self.assertIsInstance(fixtures.view_controller, NoteListView)
"""

# pylint: disable=missing-docstring,redefined-outer-name
import os
from typing import Any
from unittest import mock

from django.db.backends.base.base import BaseDatabaseWrapper
from django.test import RequestFactory
from unittest_fixtures import FixtureContext, Fixtures, fixture

from vc_testkit.persistence import persistence_stack
from vc_testkit.settings import Settings
from vc_testkit.types import ViewControllerFactory, ViewControllerNotCreated


@fixture()
def environ(
    _fixtures: Fixtures, environ: dict[str, str] | None = None, clear: bool = False
) -> FixtureContext[dict[str, str]]:
    """Override os.environ

    When the clear parameter is True, the os.environ is replaced with an empty Mapping.
    Pass overrides in the environ parameter.
    """
    environ = environ or {}

    with mock.patch.dict(os.environ, environ, clear=clear):
        yield environ


@fixture(environ)
def settings(_fixtures: Fixtures) -> Settings:
    """Creates a vc_testkit.settings.Settings object

    This is instantiated from the environment variables. As such this fixture uses the
    environ fixture.
    """
    return Settings.from_environ()


@fixture(settings)
def test_database(
    fixtures: Fixtures, database: str | None = None
) -> FixtureContext[BaseDatabaseWrapper]:
    """The persistence stack for the test database

    The alias comes from the settings unless given with the database parameter. All
    changes are rolled back when the test is done.
    """
    settings: Settings = fixtures.settings

    with persistence_stack(
        database or settings.DATABASE,
        require_test_database=settings.REQUIRE_TEST_DATABASE,
    ) as connection:
        yield connection


@fixture()
def request_factory(
    _fixtures: Fixtures, defaults: dict[str, Any] | None = None
) -> RequestFactory:
    return RequestFactory(**(defaults or {}))


@fixture(test_database)
def view_controller(
    _fixtures: Fixtures, factory: ViewControllerFactory | None = None
) -> Any:
    """The view controller created by the given factory

    The factory is called inside the test database. A view class works as a factory.
    """
    if factory is None:
        raise ViewControllerNotCreated("No view controller factory given")

    if (instance := factory()) is None:
        raise ViewControllerNotCreated(f"Could not create {factory!r}")

    return instance
