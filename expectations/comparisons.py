"""Equality and ordering of dynamically-typed values.

Values are compared only when they share the same runtime type; the
ordering is then chosen by the value's family:

  SIGNED    int, ctypes signed integers
  UNSIGNED  ctypes unsigned integers
  FLOAT     float, ctypes floating point
  TEXT      str, bytes
  UNSUPPORTED  everything else (equality only)

ctypes simple values do not implement ``==`` by value, so they are
unwrapped to their ``.value`` before comparing.
"""

__all__ = [
    'Family',
    'Outcome',
    'compare',
    'compare_equality',
    'family_of',
    'is_nil',
    'native',
]

import ctypes
import enum
import weakref


class Outcome(enum.Enum):
    EQUAL = 'equal'
    GREATER = 'greater'
    LOWER = 'lower'
    NOT_EQUAL = 'not equal'
    NOT_COMPARABLE = 'not comparable'


class Family(enum.Enum):
    SIGNED = 'signed integer'
    UNSIGNED = 'unsigned integer'
    FLOAT = 'floating point'
    TEXT = 'text'
    UNSUPPORTED = 'unsupported'


_FAMILIES = {
    int: Family.SIGNED,
    float: Family.FLOAT,
    str: Family.TEXT,
    bytes: Family.TEXT,
}

# Fixed-width aliases such as ``c_int32`` are the same classes as one of
# the C names below, so listing the C names covers them.
for _type in (
    ctypes.c_byte,
    ctypes.c_short,
    ctypes.c_int,
    ctypes.c_long,
    ctypes.c_longlong,
    ctypes.c_ssize_t,
):
    _FAMILIES[_type] = Family.SIGNED
for _type in (
    ctypes.c_ubyte,
    ctypes.c_ushort,
    ctypes.c_uint,
    ctypes.c_ulong,
    ctypes.c_ulonglong,
    ctypes.c_size_t,
):
    _FAMILIES[_type] = Family.UNSIGNED
for _type in (ctypes.c_float, ctypes.c_double, ctypes.c_longdouble):
    _FAMILIES[_type] = Family.FLOAT
del _type

_WIDEN = {
    Family.SIGNED: int,
    Family.UNSIGNED: int,
    Family.FLOAT: float,
    Family.TEXT: lambda x: x,
}

_NULLABLE_CHAR_POINTERS = (ctypes.c_void_p, ctypes.c_char_p, ctypes.c_wchar_p)


def family_of(value):
    return _FAMILIES.get(type(value), Family.UNSUPPORTED)


def native(value):
    """Unwrap ctypes simple values; return anything else unchanged."""
    if isinstance(value, ctypes._SimpleCData):
        return value.value
    return value


def _natively_equal(expected, actual):
    if expected is actual:
        return True
    if type(expected) is not type(actual):
        return False
    return bool(native(expected) == native(actual))


def compare_equality(expected, actual):
    if _natively_equal(expected, actual):
        return Outcome.EQUAL
    if type(expected) is not type(actual):
        return Outcome.NOT_COMPARABLE
    return Outcome.NOT_EQUAL


def compare(reference, actual):
    """Order ``actual`` relative to ``reference``.

    ``Outcome.GREATER`` means ``actual`` is greater than ``reference``.
    """
    if _natively_equal(reference, actual):
        return Outcome.EQUAL
    if reference is None or actual is None:
        return Outcome.NOT_COMPARABLE
    if type(reference) is not type(actual):
        return Outcome.NOT_COMPARABLE
    family = family_of(reference)
    if family is Family.UNSUPPORTED:
        return Outcome.NOT_COMPARABLE
    widen = _WIDEN[family]
    reference = widen(native(reference))
    actual = widen(native(actual))
    if actual > reference:
        return Outcome.GREATER
    elif actual < reference:
        return Outcome.LOWER
    elif actual == reference:
        return Outcome.EQUAL
    else:
        # NaN is not ordered.
        return Outcome.NOT_COMPARABLE


def is_nil(value):
    """True for ``None`` and for null references.

    A zero-valued object is not nil; only a reference that points to
    nothing is.
    """
    if value is None:
        return True
    if isinstance(value, ctypes._Pointer):
        return not value
    if isinstance(value, _NULLABLE_CHAR_POINTERS):
        return value.value is None
    if isinstance(value, weakref.ref):
        return value() is None
    return False
