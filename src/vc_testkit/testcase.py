"""Abstract base test case for Django view controllers

Subclass ViewControllerTestCase and name the view class you are testing, either by
overriding the class_under_test() classmethod or with the class keyword:

    >>> class NoteListViewTests(ViewControllerTestCase, class_under_test=NoteListView):
    ...     def test_paginates(self) -> None:
    ...         self.assertEqual(self.view_controller_under_test.paginate_by, 10)

Before each test the base class brings up the persistence stack against the test
database, creates an instance of the view class and makes sure that worked. The
instance is available as self.view_controller_under_test. Each subclass also gets
creation, view-did-load and view-did-unload tests for free.
"""

from __future__ import annotations

import inspect
import logging
import unittest
from types import MappingProxyType
from typing import Any, ClassVar, Mapping

from django.core.signals import request_finished
from django.db import close_old_connections
from django.http import HttpResponseBase
from django.test import RequestFactory

from vc_testkit.persistence import persistence_stack
from vc_testkit.settings import Settings
from vc_testkit.types import (
    ClassUnderTestNotDefined,
    PersistenceError,
    ViewControllerFactory,
    ViewControllerNotCreated,
)
from vc_testkit.utils import snake_case

logger = logging.getLogger(__name__)

LIFECYCLE_TESTS: dict[str, str] = {
    "creation": "validate_view_controller_created",
    "view_did_load": "validate_view_did_load",
    "view_did_unload": "validate_view_did_unload",
}


class ViewControllerTestCase(unittest.TestCase):
    """Base class for view controller tests"""

    # Have Django's test runner set up the test databases for us
    databases: ClassVar[Any] = "__all__"

    database: ClassVar[str | None] = None
    """Database alias for the persistence stack. Defaults to the settings' alias"""

    request_path: ClassVar[str | None] = None
    """Path requested by load_view(). Defaults to the settings' REQUEST_PATH"""

    view_args: tuple[Any, ...] = ()
    view_kwargs: Mapping[str, Any] = MappingProxyType({})

    generate_lifecycle_tests: ClassVar[bool] = True
    view_controller_factory: ClassVar[ViewControllerFactory | None] = None

    view_controller_under_test: Any = None
    testkit_settings: Settings

    def __init_subclass__(
        cls,
        class_under_test: type | None = None,
        factory: ViewControllerFactory | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)

        if not isinstance(inspect.getattr_static(cls, "class_under_test"), classmethod):
            raise ClassUnderTestNotDefined(
                f"{cls.__qualname__} must override class_under_test() as a classmethod"
            )

        if class_under_test is not None:
            hook = classmethod(lambda _cls: class_under_test)
            cls.class_under_test = hook  # type: ignore[method-assign,assignment]

        if factory is not None:
            cls.view_controller_factory = staticmethod(factory)  # type: ignore

        if cls.generate_lifecycle_tests and Settings.from_environ().GENERATE_TESTS:
            register_lifecycle_tests(cls)

    @classmethod
    def class_under_test(cls) -> type:
        """Override this method with the view controller class you want to test"""
        raise ClassUnderTestNotDefined(
            f"{cls.__qualname__} must override class_under_test() or supply a factory"
        )

    @classmethod
    def has_class_under_test(cls) -> bool:
        """Return True if the class_under_test() hook has been overridden"""
        hook = getattr(cls.class_under_test, "__func__", None)

        return hook is not ViewControllerTestCase.class_under_test.__func__

    def setUp(self) -> None:
        super().setUp()

        self.view_controller_under_test = None
        self.testkit_settings = Settings.from_environ()

        try:
            self.enterContext(
                persistence_stack(
                    self.database or self.testkit_settings.DATABASE,
                    require_test_database=self.testkit_settings.REQUIRE_TEST_DATABASE,
                )
            )
        except PersistenceError as error:
            raise self.failureException(str(error)) from error

        # Runs before the persistence stack is torn down, even if setUp fails below
        self.addCleanup(setattr, self, "view_controller_under_test", None)

        try:
            self.view_controller_under_test = self.create_view_controller()
        except (ClassUnderTestNotDefined, ViewControllerNotCreated) as error:
            raise self.failureException(str(error)) from error

        self.assertIsNotNone(
            self.view_controller_under_test,
            f"Could not create {self.subject_name()}",
        )
        if self.has_class_under_test():
            self.assertIsInstance(
                self.view_controller_under_test,
                self.class_under_test(),
                f"Could not create {self.subject_name()}",
            )
        logger.debug("Created %r for %s", self.view_controller_under_test, self.id())

    def tearDown(self) -> None:
        self.view_controller_under_test = None

        super().tearDown()

    def create_view_controller(self) -> Any:
        """Create and return the view controller under test

        The registered factory is used if there is one. Otherwise this is the default
        constructor of class_under_test(). Construction errors are re-raised as
        ViewControllerNotCreated.
        """
        factory = self.view_controller_factory or self.class_under_test()

        try:
            return factory()
        except Exception as error:  # pylint: disable=broad-exception-caught
            raise ViewControllerNotCreated(
                f"Could not create {self.subject_name()}: {error!r}"
            ) from error

    @classmethod
    def subject_name(cls) -> str:
        """Human-readable name of the view controller under test"""
        if cls.has_class_under_test():
            return cls.class_under_test().__qualname__

        factory = cls.view_controller_factory

        return getattr(factory, "__qualname__", repr(factory))

    def load_view(
        self, method: str = "get", path: str | None = None, **extra: Any
    ) -> HttpResponseBase:
        """Send a request through the view controller and return the response

        The request goes straight to the view's setup() and dispatch(), bypassing URL
        resolution and middleware. view_args and view_kwargs are passed along.
        Template responses are rendered.
        """
        path = path or self.request_path or self.testkit_settings.REQUEST_PATH
        request = getattr(RequestFactory(), method.lower())(path, **extra)
        view = self.view_controller_under_test

        view.setup(request, *self.view_args, **self.view_kwargs)
        response: HttpResponseBase = view.dispatch(
            request, *self.view_args, **self.view_kwargs
        )

        if callable(render := getattr(response, "render", None)):
            render()

        return response

    def unload_view(self, response: HttpResponseBase) -> bool:
        """Close the response and release the view controller's request

        Return True if closing the response signaled request_finished.
        """
        finished: list[Any] = []

        def on_finished(sender: Any, **kwargs: Any) -> None:
            finished.append(sender)

        request_finished.connect(on_finished)
        # Closing old connections would end the persistence stack's transaction
        disconnected = request_finished.disconnect(close_old_connections)
        try:
            response.close()
        finally:
            if disconnected:
                request_finished.connect(close_old_connections)
            request_finished.disconnect(on_finished)

        for attr in ["request", "args", "kwargs"]:
            vars(self.view_controller_under_test).pop(attr, None)

        return bool(finished)

    def validate_view_controller_created(self) -> None:
        """The view controller was created and is of the class under test"""
        self.assertIsNotNone(
            self.view_controller_under_test, "View controller not created successfully"
        )
        if self.has_class_under_test():
            self.assertIsInstance(
                self.view_controller_under_test, self.class_under_test()
            )

    def validate_view_did_load(self) -> None:
        """The view controller handles a request"""
        response = self.load_view()

        self.assertIsInstance(
            response,
            HttpResponseBase,
            "View controller's view didn't load correctly",
        )

    def validate_view_did_unload(self) -> None:
        """The view controller lets go of its request when the response is closed"""
        response = self.load_view()

        self.assertTrue(
            self.unload_view(response),
            "Closing the response did not finish the request",
        )
        self.assertFalse(hasattr(self.view_controller_under_test, "request"))


def register_lifecycle_tests(test_case: type[ViewControllerTestCase]) -> list[str]:
    """Add the creation, view-did-load and view-did-unload tests to the test case

    Tests are named after the class under test, e.g. "test_note_list_view_creation".
    Nothing is added when the test case has no class under test. Existing attributes
    are left alone. Return the names of the tests added.
    """
    if not test_case.has_class_under_test():
        return []

    prefix = f"test_{snake_case(test_case.class_under_test().__name__)}"
    added = []

    for suffix, validator in LIFECYCLE_TESTS.items():
        name = f"{prefix}_{suffix}"

        if name in vars(test_case):
            continue

        setattr(test_case, name, getattr(ViewControllerTestCase, validator))
        added.append(name)

    logger.debug("Registered tests for %s: %s", test_case.__qualname__, added)

    return added
