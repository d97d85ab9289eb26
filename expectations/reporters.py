"""Report failed expectations.

Reporting never raises: it writes the failure to the context's logger
and marks the test failed through the context's signal.  The output of
a test file looks like::

    test_numbers.py
    ---------------
    --- test_add in line 12: Expect 3 to equal 4
    --- test_sub in line 20: Expect 1 to be greater than 2
"""

__all__ = [
    'BANNER',
    'Banner',
    'Failure',
    'FailureKind',
    'report',
]

import collections
import enum
import logging
import threading

import expectations

from . import locations

LOG = logging.getLogger(__name__)


class FailureKind(enum.Enum):
    VALUE_MISMATCH = 'value mismatch'
    TYPE_MISMATCH = 'type mismatch'
    PRECONDITION_VIOLATION = 'precondition violation'
    OUT_OF_RANGE = 'out of range'


Failure = collections.namedtuple('Failure', 'kind location message')


class Banner:
    """Remember the last file name a failure was reported for.

    The file name is printed once, as a banner, before the first
    failure of each file.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._last_file_name = None

    def check(self, file_name):
        """Return true if a banner should be printed for ``file_name``."""
        with self._lock:
            if self._last_file_name == file_name:
                return False
            self._last_file_name = file_name
            return True

    def reset(self):
        with self._lock:
            self._last_file_name = None


# Shared by loggers that do not carry a banner of their own.
BANNER = Banner()


def report(context, kind, message):
    if expectations.D['LOCATION']:
        location = locations.get_caller_location()
    else:
        location = locations.UNKNOWN
    logger = context.logger
    banner = getattr(logger, 'banner', None) or BANNER
    if expectations.D['BANNER'] and banner.check(location.file_name):
        logger.log(location.file_name)
        logger.log('-' * len(location.file_name))
    logger.log(
        '--- %s in line %d: %s' %
        (location.function_name, location.line_number, message)
    )
    LOG.debug(
        '%s at %s:%d: %s',
        kind.value, location.file_name, location.line_number, message,
    )
    context.signal.fail()
    return Failure(kind, location, message)
