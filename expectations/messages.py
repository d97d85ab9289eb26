"""Compose failure messages.

Templates are ``%``-formatted; every ``%s`` receives one argument,
rendered either bare (``5``) or with its type (``5 (int)``).  List and
tuple arguments are rendered element by element, so that a type
mismatch inside them is visible too (``[1 (int), 1.0 (float)]``).
"""

__all__ = [
    'DIFFERENT_TYPES',
    'format_message',
    'format_type_mismatch',
    'render',
    'render_typed',
]

import expectations

from . import comparisons

DIFFERENT_TYPES = 'You try to compare different types: '


def _is_list(value):
    return isinstance(value, (list, tuple))


def _type_name(value):
    return type(value).__name__


def render(value):
    if _is_list(value):
        return '[%s]' % ', '.join(map(render, value))
    return str(comparisons.native(value))


def render_typed(value):
    if _is_list(value):
        return '[%s]' % ', '.join(map(render_typed, value))
    return '%s (%s)' % (render(value), _type_name(value))


def format_message(template, show_types, *args):
    if show_types or expectations.D['TYPE_INFO']:
        render_ = render_typed
    else:
        render_ = render
    return template % tuple(map(render_, args))


def format_type_mismatch(template, *args):
    return DIFFERENT_TYPES + format_message(template, True, *args)
