"""Checks for misuse of the expectations API.

Failed expectations are reported, never raised; calling the API with
arguments it cannot work with is a programming error, and that is what
these checks raise on.
"""

__all__ = [
    'IllegalArgumentError',
    'check_argument',
    'check_type',
]


class IllegalArgumentError(ValueError):
    pass


def check_argument(cond, message=None, *message_args):
    if not cond:
        if message is None:
            raise IllegalArgumentError
        raise IllegalArgumentError(message % message_args)
    return cond


def check_type(value, type_, name):
    # ``bool`` is an ``int`` subclass, but ``has_size(True)`` is a bug.
    check_argument(
        isinstance(value, type_) and not isinstance(value, bool),
        'expect %s to be %s, not %r', name, type_.__name__, value,
    )
    return value
