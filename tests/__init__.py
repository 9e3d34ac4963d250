"""Tests for vc-testkit"""

# pylint: disable=missing-class-docstring,missing-function-docstring
import logging
import unittest

logging.basicConfig(handlers=[logging.NullHandler()])


class TestCase(unittest.TestCase):
    # Have Django's test runner set up the test databases for us
    databases = "__all__"
