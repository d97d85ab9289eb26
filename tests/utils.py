__all__ = [
    'RecordingLogger',
    'RecordingSignal',
    'make_context',
    'preserve_defaults',
]

import functools

import expectations
from expectations import reporters
from expectations.contexts import AssertionContext
from expectations.loggers import Logger


class RecordingSignal:

    def __init__(self):
        self.num_calls = 0

    @property
    def has_been_called(self):
        return self.num_calls > 0

    def fail(self):
        self.num_calls += 1

    def reset(self):
        self.num_calls = 0


class RecordingLogger(Logger):

    def __init__(self):
        # Each recording logger prints its own banners.
        super().__init__(reporters.Banner())
        self.lines = []

    @property
    def logs(self):
        return '\n'.join(self.lines)

    def log(self, message):
        self.lines.append(message)

    def reset(self):
        self.lines.clear()
        self.banner.reset()


def make_context():
    signal = RecordingSignal()
    logger = RecordingLogger()
    return AssertionContext(signal, logger), signal, logger


def preserve_defaults(func):
    """Restore ``expectations.D`` after the test."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        saved = dict(expectations.D)
        try:
            return func(*args, **kwargs)
        finally:
            expectations.D.clear()
            expectations.D.update(saved)
    return wrapper
