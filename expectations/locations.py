"""Find the code location that an expectation failure belongs to.

The failure is attributed to the first frame, walking outward, that is
not hidden.  Hidden frames are:

* Frames of this package; expectations call each other and the
  reporter, and none of that is the caller's code.
* Frames of functions decorated with ``hidden``: helpers that wrap an
  expectation and want the failure attributed to their own caller.
* Frames that set ``__tracebackhide__ = True`` (the pytest
  convention for the same thing).

This relies on ``sys._getframe``, which is a CPython implementation
detail; where it is missing, the location is reported as unknown.
"""

__all__ = [
    'CodeLocation',
    'UNKNOWN',
    'get_caller_location',
    'hidden',
]

import collections
import os.path
import sys

CodeLocation = collections.namedtuple(
    'CodeLocation',
    'file_name function_name line_number',
)

UNKNOWN = CodeLocation('unknown', 'unknown', 0)

_PACKAGE = __name__.partition('.')[0]

_HIDDEN_CODES = set()


def hidden(func):
    """Attribute failures raised inside ``func`` to its caller."""
    _HIDDEN_CODES.add(func.__code__)
    return func


def _is_hidden(frame):
    module_name = frame.f_globals.get('__name__', '')
    if module_name.partition('.')[0] == _PACKAGE:
        return True
    if frame.f_code in _HIDDEN_CODES:
        return True
    return frame.f_locals.get('__tracebackhide__') is True


def get_caller_location(skip=0):
    """Return the location of the first non-hidden frame.

    ``skip`` drops that many frames above the caller of this function
    before the search starts.
    """
    getframe = getattr(sys, '_getframe', None)
    if getframe is None:
        return UNKNOWN
    try:
        frame = getframe(skip + 1)
    except ValueError:
        # Call stack is not deep enough.
        return UNKNOWN
    while frame is not None and _is_hidden(frame):
        frame = frame.f_back
    if frame is None:
        return UNKNOWN
    return CodeLocation(
        os.path.basename(frame.f_code.co_filename),
        frame.f_code.co_name,
        frame.f_lineno,
    )
