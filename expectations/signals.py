"""Adapt test frameworks to the failure signal.

A failure signal is any object with a ``fail()`` method that marks the
current test failed without interrupting it.
"""

__all__ = [
    'TestCaseSignal',
]


class TestCaseSignal:
    """Failure signal for a ``unittest.TestCase``.

    ``TestCase.fail`` raises, which would stop the test at the first
    failed expectation; instead, failures are counted and raised once
    from a cleanup, after the test body has run.
    """

    def __init__(self, test_case):
        self.test_case = test_case
        self.num_failures = 0

    def fail(self):
        if self.num_failures == 0:
            self.test_case.addCleanup(self._raise_failure)
        self.num_failures += 1

    def _raise_failure(self):
        raise self.test_case.failureException(
            '%d expectation(s) failed' % self.num_failures
        )
