"""Fluent expectations for unit tests.

Wrap the actual value and chain the expectations on it; failures are
written to a logger and mark the test failed, but never interrupt it.

Examples:
>>> et = expectations.new_t(self)
>>> et.expect_that(5).is_greater(2).is_lower(7)
>>> et.expect_that_string('Hello World').starts_with('Hello')
>>> et.expect_that_sequence([1, 2, 3]).contains(1, 3).first().equals(1)
"""

__all__ = [
    'D',

    'AssertionContext',
    'Et',
    'new_t',
    'new_t_with_logger',

    'Expectation',
    'SequenceExpectation',
    'StringExpectation',

    'ConsoleLogger',
    'LoggingLogger',
    'SilentLogger',

    'hidden',
]

import os

# Defined before the submodules are imported; they look it up lazily.
D = {
    # Print the file name before the first failure of each file.
    'BANNER': True,
    # Resolve the caller's code location of each failure.
    'LOCATION': True,
    # Annotate every value in failure messages with its type.
    'TYPE_INFO': False,
}

if os.environ.get('EXPECTATIONS_TYPE_INFO') not in (None, '', '0'):
    D['TYPE_INFO'] = True

from .chains import (  # noqa: E402
    Expectation,
    SequenceExpectation,
    StringExpectation,
)
from .contexts import (  # noqa: E402
    AssertionContext,
    Et,
    new_t,
    new_t_with_logger,
)
from .locations import hidden  # noqa: E402
from .loggers import (  # noqa: E402
    ConsoleLogger,
    LoggingLogger,
    SilentLogger,
)
