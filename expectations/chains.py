"""Fluent expectation chains.

Every predicate follows the same pattern: once a chain has failed, the
predicate does nothing and returns the chain; otherwise it compares,
reports a failure (and marks the chain failed) if the comparison does
not hold, and returns the chain.  So only the first failure of a chain
is reported:

>>> et.expect_that(2).equals(3).is_lower(1)  # Reports "to equal" only.

Call ``reset`` to run further checks on the same value.
"""

__all__ = [
    'Expectation',
    'SequenceExpectation',
    'StringExpectation',
]

import functools

from . import comparisons
from . import messages
from . import preconds
from . import reporters
from . import sequences
from .comparisons import Outcome
from .reporters import FailureKind


def _unless_failed(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        if not self.failed:
            method(self, *args, **kwargs)
        return self

    return wrapper


def _differ_in_type(x, y):
    # ``None`` is absent rather than of another type.
    return x is not None and y is not None and type(x) is not type(y)


class _ExpectationBase:

    __slots__ = ('context', 'value', 'failed')

    def __init__(self, context, value, failed=False):
        self.context = context
        self.value = value
        self.failed = failed

    def reset(self):
        """Clear the failed state so that further checks are executed."""
        self.failed = False
        return self

    def _fail(self, kind, message):
        self.failed = True
        reporters.report(self.context, kind, message)

    def _fail_value(self, template, *args):
        self._fail(
            FailureKind.VALUE_MISMATCH,
            messages.format_message(template, False, *args),
        )

    def _fail_type(self, template, *args):
        self._fail(
            FailureKind.TYPE_MISMATCH,
            messages.format_type_mismatch(template, *args),
        )

    def _fail_outcome(self, outcome, template, *args):
        if outcome is Outcome.NOT_COMPARABLE:
            self._fail_type(template, *args)
        else:
            self._fail_value(template, *args)

    def _fail_precondition(self, template, *args):
        self._fail(
            FailureKind.PRECONDITION_VIOLATION,
            messages.format_message(template, True, *args),
        )


class Expectation(_ExpectationBase):
    """Expectations on any value; ordering for numbers and text."""

    __slots__ = ()

    @_unless_failed
    def equals(self, expected):
        template = 'Expect %s to equal %s'
        if _differ_in_type(self.value, expected):
            self._fail_type(template, self.value, expected)
            return
        # Past the type check, only a ``None`` operand is not comparable,
        # and that is a plain mismatch.
        outcome = comparisons.compare_equality(expected, self.value)
        if outcome is not Outcome.EQUAL:
            self._fail_value(template, self.value, expected)

    @_unless_failed
    def does_not_equal(self, expected):
        template = 'Expect %s to not equal %s'
        if _differ_in_type(self.value, expected):
            self._fail_type(template, self.value, expected)
            return
        outcome = comparisons.compare_equality(expected, self.value)
        if outcome is Outcome.EQUAL:
            self._fail_value(template, self.value, expected)

    def _order(self, reference, accepted, template):
        outcome = comparisons.compare(reference, self.value)
        if outcome not in accepted:
            self._fail_outcome(outcome, template, self.value, reference)

    @_unless_failed
    def is_greater(self, reference):
        self._order(
            reference,
            (Outcome.GREATER, ),
            'Expect %s to be greater than %s',
        )

    @_unless_failed
    def is_greater_or_equal(self, reference):
        self._order(
            reference,
            (Outcome.GREATER, Outcome.EQUAL),
            'Expect %s to be greater than or equal to %s',
        )

    @_unless_failed
    def is_lower(self, reference):
        self._order(
            reference,
            (Outcome.LOWER, ),
            'Expect %s to be lower than %s',
        )

    @_unless_failed
    def is_lower_or_equal(self, reference):
        self._order(
            reference,
            (Outcome.LOWER, Outcome.EQUAL),
            'Expect %s to be lower than or equal to %s',
        )

    @_unless_failed
    def is_none(self):
        if not comparisons.is_nil(self.value):
            self._fail_value('Expect %s to be None', self.value)

    @_unless_failed
    def is_not_none(self):
        if comparisons.is_nil(self.value):
            self._fail_value('Expect %s to not be None', self.value)

    is_nil = is_none
    is_not_nil = is_not_none

    # Older names.
    to_be_greater = is_greater
    to_be_greater_or_equal = is_greater_or_equal
    to_be_lower = is_lower
    to_be_lower_or_equal = is_lower_or_equal

    def string(self):
        """Continue with text expectations on the value."""
        return StringExpectation(self.context, self.value, self.failed)

    def sequence(self):
        """Continue with sequence expectations on the value."""
        return SequenceExpectation(self.context, self.value, self.failed)

    slice = sequence


class StringExpectation(_ExpectationBase):
    """Expectations on a ``str`` (or ``None``) value."""

    __slots__ = ()

    def __init__(self, context, value, failed=False):
        super().__init__(context, value, failed)
        if self.failed or value is None or sequences.is_text(value):
            return
        self._fail_precondition('Expect %s to be a string', value)

    def _check_text(self, template, arg, texts):
        """Report unless the value and all of ``texts`` are text."""
        if not sequences.is_text(self.value):
            self._fail_precondition(template, self.value, arg)
            return False
        if not all(map(sequences.is_text, texts)):
            self._fail_type(template, self.value, arg)
            return False
        return True

    @_unless_failed
    def equals(self, expected):
        template = 'Expect %s to equal %s'
        if _differ_in_type(self.value, expected):
            self._fail_type(template, self.value, expected)
        elif (
            comparisons.compare_equality(expected, self.value)
            is not Outcome.EQUAL
        ):
            self._fail_value(template, self.value, expected)

    @_unless_failed
    def equals_ignoring_case(self, expected):
        template = 'Expect %s to equal ignoring case %s'
        if not self._check_text(template, expected, [expected]):
            return
        if not sequences.equal_ignoring_case(self.value, expected):
            self._fail_value(template, self.value, expected)

    @_unless_failed
    def does_not_equal(self, expected):
        template = 'Expect %s to not equal %s'
        if _differ_in_type(self.value, expected):
            self._fail_type(template, self.value, expected)
        elif (
            comparisons.compare_equality(expected, self.value)
            is Outcome.EQUAL
        ):
            self._fail_value(template, self.value, expected)

    @_unless_failed
    def starts_with(self, prefix):
        template = 'Expect %s to start with %s'
        if not self._check_text(template, prefix, [prefix]):
            return
        if not self.value.startswith(prefix):
            self._fail_value(template, self.value, prefix)

    @_unless_failed
    def ends_with(self, suffix):
        template = 'Expect %s to end with %s'
        if not self._check_text(template, suffix, [suffix]):
            return
        if not self.value.endswith(suffix):
            self._fail_value(template, self.value, suffix)

    @_unless_failed
    def contains(self, *substrings):
        preconds.check_argument(substrings, 'expect at least one substring')
        substrings = list(substrings)
        if not self._check_text(
            'Expect %s to contain %s', substrings, substrings
        ):
            return
        missing = [s for s in substrings if s not in self.value]
        if missing:
            self._fail_value(
                'Expect %s to contain %s but was missing %s',
                self.value, substrings, missing,
            )

    @_unless_failed
    def does_not_contain(self, *substrings):
        preconds.check_argument(substrings, 'expect at least one substring')
        substrings = list(substrings)
        if not self._check_text(
            'Expect %s to not contain %s', substrings, substrings
        ):
            return
        present = [s for s in substrings if s in self.value]
        if present:
            self._fail_value(
                'Expect %s to not contain %s but it includes %s',
                self.value, substrings, present,
            )

    @_unless_failed
    def is_none(self):
        if self.value is not None:
            self._fail_value('Expect %s to be None', self.value)

    @_unless_failed
    def is_not_none(self):
        if self.value is None:
            self._fail_value('Expect %s to not be None', self.value)

    is_nil = is_none
    is_not_nil = is_not_none


class SequenceExpectation(_ExpectationBase):
    """Expectations on a flat sequence: list, tuple, range, ctypes array.

    Elements are compared with the same equality as ``equals``, so ``1``
    and ``1.0`` are different elements.
    """

    __slots__ = ('items', )

    def __init__(self, context, value, failed=False):
        super().__init__(context, value, failed)
        if sequences.is_sequence(value):
            self.items = sequences.to_list(value)
        else:
            self.items = []
            if not self.failed:
                self._fail_precondition('Expect %s to be a sequence', value)

    def _fail_membership(self, expects, template, *args):
        if sequences.types_match(self.items, expects):
            self._fail_value(template, *args)
        else:
            self._fail_type(template, *args)

    @_unless_failed
    def contains(self, *expects):
        preconds.check_argument(expects, 'expect at least one element')
        expects = list(expects)
        missing = sequences.find_missing(self.items, expects)
        if missing:
            self._fail_membership(
                expects,
                'Expect %s to contain %s but was missing %s',
                self.items, expects, missing,
            )

    @_unless_failed
    def does_not_contain(self, *expects):
        preconds.check_argument(expects, 'expect at least one element')
        expects = list(expects)
        present = sequences.find_present(self.items, expects)
        if present:
            self._fail_membership(
                expects,
                'Expect %s to not contain %s but it includes %s',
                self.items, expects, present,
            )

    @_unless_failed
    def is_empty(self):
        if self.items:
            self._fail_value('Expect %s to be empty', self.items)

    @_unless_failed
    def is_not_empty(self):
        if not self.items:
            self._fail_value('Expect %s to not be empty', self.items)

    @_unless_failed
    def has_size(self, size):
        preconds.check_type(size, int, 'size')
        if len(self.items) != size:
            self._fail_value(
                'Expect len of %s to be %s and not %s',
                self.items, size, len(self.items),
            )

    def nth(self, position):
        """Continue with expectations on the element at ``position``.

        Positions start at 1.  When there is no such element (including
        positions below 1), or when this chain has failed, the returned
        expectation is a failed placeholder, so that the rest of the
        chain is skipped.
        """
        preconds.check_type(position, int, 'position')
        if self.failed:
            return Expectation(self.context, None, True)
        if not 1 <= position <= len(self.items):
            self._fail(
                FailureKind.OUT_OF_RANGE,
                messages.format_message(
                    'Expect %s to have an element at position %s '
                    'but its len is %s',
                    False,
                    self.items,
                    position,
                    len(self.items),
                ),
            )
            return Expectation(self.context, None, True)
        return Expectation(self.context, self.items[position - 1])

    def first(self):
        return self.nth(1)

    def second(self):
        return self.nth(2)

    def third(self):
        return self.nth(3)
