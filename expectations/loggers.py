"""Loggers that failure messages are written to.

A logger is any object with a ``log(message)`` method.  A logger may
also carry a ``banner`` (see ``reporters.Banner``); loggers without one
share the process-wide banner.
"""

__all__ = [
    'ConsoleLogger',
    'Logger',
    'LoggingLogger',
    'SilentLogger',
]

import logging
import sys

from . import reporters


class Logger:

    def __init__(self, banner=None):
        self.banner = reporters.BANNER if banner is None else banner

    def log(self, message):
        raise NotImplementedError


class ConsoleLogger(Logger):
    """Print messages, to stdout unless told otherwise."""

    def __init__(self, stream=None, banner=None):
        super().__init__(banner)
        self.stream = stream

    def log(self, message):
        # Look up sys.stdout late so that redirection is honored.
        stream = sys.stdout if self.stream is None else self.stream
        print(message, file=stream)


class LoggingLogger(Logger):
    """Forward messages to a standard library logger."""

    def __init__(self, logger=None, level=logging.ERROR, banner=None):
        super().__init__(banner)
        self.logger = logger or logging.getLogger('expectations')
        self.level = level

    def log(self, message):
        self.logger.log(self.level, '%s', message)


class SilentLogger(Logger):

    def log(self, message):
        pass
