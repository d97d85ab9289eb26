"""Entry points: bind a test to a failure signal and a logger.

Examples:
>>> class NumbersTest(unittest.TestCase):
...     def test_add(self):
...         et = expectations.new_t(self)
...         et.expect_that(1 + 1).equals(2).is_lower(3)
"""

__all__ = [
    'AssertionContext',
    'Et',
    'new_t',
    'new_t_with_logger',
]

import logging
import unittest

from . import chains
from . import loggers
from . import preconds
from . import signals


class AssertionContext:
    """Hold the failure signal and the logger of one test."""

    __slots__ = ('signal', 'logger')

    def __init__(self, signal, logger):
        preconds.check_argument(
            callable(getattr(signal, 'fail', None)),
            'expect an object with fail(), not %r', signal,
        )
        preconds.check_argument(
            callable(getattr(logger, 'log', None)),
            'expect an object with log(message), not %r', logger,
        )
        object.__setattr__(self, 'signal', signal)
        object.__setattr__(self, 'logger', logger)

    def __setattr__(self, name, value):
        raise AttributeError('%s is immutable' % self.__class__.__name__)

    def __repr__(self):
        return '%s(%r, %r)' % (
            self.__class__.__name__, self.signal, self.logger
        )

    def expect_that(self, value):
        return chains.Expectation(self, value)

    def expect_that_string(self, value):
        return chains.StringExpectation(self, value)

    def expect_that_sequence(self, value):
        return chains.SequenceExpectation(self, value)

    # Older names.
    expect = expect_that
    expect_string = expect_that_string
    expect_slice = expect_that_slice = expect_that_sequence


Et = AssertionContext


def _adapt_signal(signal):
    if isinstance(signal, unittest.TestCase):
        return signals.TestCaseSignal(signal)
    return signal


def _adapt_logger(logger):
    if isinstance(logger, logging.Logger):
        return loggers.LoggingLogger(logger)
    return logger


def new_t(signal):
    """Make a context that prints failures to stdout."""
    return AssertionContext(_adapt_signal(signal), loggers.ConsoleLogger())


def new_t_with_logger(signal, logger):
    return AssertionContext(_adapt_signal(signal), _adapt_logger(logger))
