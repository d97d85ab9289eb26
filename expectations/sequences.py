"""Helpers for the sequence and text expectations."""

__all__ = [
    'equal_ignoring_case',
    'find_missing',
    'find_present',
    'is_sequence',
    'is_text',
    'to_list',
    'types_match',
]

import ctypes
from collections import abc

from . import comparisons

# Text is a sequence too, but it has its own expectation.
_TEXT_TYPES = (str, bytes, bytearray)


def is_text(value):
    return isinstance(value, str)


def is_sequence(value):
    if isinstance(value, _TEXT_TYPES):
        return False
    return isinstance(value, (abc.Sequence, ctypes.Array))


def to_list(value):
    # Indexing a ctypes array already yields Python values.
    return list(value)


def _contains(items, expect):
    return any(
        comparisons.compare_equality(expect, item)
        is comparisons.Outcome.EQUAL for item in items
    )


def find_missing(items, expects):
    return [expect for expect in expects if not _contains(items, expect)]


def find_present(items, expects):
    return [expect for expect in expects if _contains(items, expect)]


def types_match(items, expects):
    """True if every expected item has the type of some element.

    An empty sequence has no element type to disagree with.
    """
    if not items:
        return True
    element_types = {type(item) for item in items}
    return all(type(expect) in element_types for expect in expects)


def equal_ignoring_case(text, other):
    return text.casefold() == other.casefold()
