"""Persistence stack for view controller tests

The persistence stack is the Django database connection for a given alias, wrapped
in a transaction that is always rolled back. Nothing written during a test
survives it.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections, transaction
from django.db.backends.base.base import BaseDatabaseWrapper
from django.db.backends.base.creation import TEST_DATABASE_PREFIX
from django.utils.connection import ConnectionDoesNotExist

from vc_testkit.types import PersistenceError

logger = logging.getLogger(__name__)


def is_test_database(connection: BaseDatabaseWrapper) -> bool:
    """Return True if the connection points at a test database

    Django's test runner swaps the database NAME for the test database's name before
    any tests run. That is either an in-memory database (SQLite), the configured
    TEST["NAME"], or the original name with the "test_" prefix.
    """
    settings_dict = connection.settings_dict
    name = str(settings_dict.get("NAME") or "")

    if connection.vendor == "sqlite" and connection.creation.is_in_memory_db(name):
        return True

    if test_name := (settings_dict.get("TEST") or {}).get("NAME"):
        if name == str(test_name):
            return True

    return Path(name).name.startswith(TEST_DATABASE_PREFIX)


def get_connection(alias: str) -> BaseDatabaseWrapper:
    """Return the database connection for the given alias

    Raise PersistenceError if the alias is not configured.
    """
    try:
        return connections[alias]
    except ConnectionDoesNotExist as error:
        raise PersistenceError(f"No database configured for alias {alias!r}") from error


@contextmanager
def persistence_stack(
    alias: str = DEFAULT_DB_ALIAS, *, require_test_database: bool = True
) -> Iterator[BaseDatabaseWrapper]:
    """Bring up the persistence stack for the database alias and yield the connection

    Everything done inside the context happens in a transaction that is rolled back on
    exit, including when the body raises.
    """
    connection = get_connection(alias)

    if require_test_database and not is_test_database(connection):
        raise PersistenceError(
            f"Database {alias!r} ({connection.settings_dict.get('NAME')}) "
            "is not a test database"
        )

    try:
        connection.ensure_connection()
    except DatabaseError as error:
        raise PersistenceError(f"Could not connect to database {alias!r}") from error

    logger.debug("Persistence stack up: %s", alias)

    with transaction.atomic(using=alias):
        try:
            yield connection
        finally:
            transaction.set_rollback(True, using=alias)
            logger.debug("Persistence stack down: %s", alias)
