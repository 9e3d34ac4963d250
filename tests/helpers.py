"""helpers for writing tests"""

# pylint: disable=missing-docstring
import unittest


def run_test(
    test_case: type[unittest.TestCase], name: str
) -> tuple[unittest.TestResult, unittest.TestCase]:
    """Run the named test of the given TestCase class

    Return the TestResult and the TestCase instance that ran.
    """
    test = test_case(name)
    result = unittest.TestResult()
    test.run(result)

    return result, test


def run_tests(test_case: type[unittest.TestCase]) -> unittest.TestResult:
    """Run all the tests of the given TestCase class"""
    suite = unittest.defaultTestLoader.loadTestsFromTestCase(test_case)
    result = unittest.TestResult()
    suite.run(result)

    return result


def failure_messages(result: unittest.TestResult) -> list[str]:
    return [traceback for _, traceback in result.failures]
