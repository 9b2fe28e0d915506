"""
Fluent builder surface — one factory per operator family and directive.

Usage:
    params = [
        equals('system.type', 'article'),
        greater_than_or_equal('elements.age', 18),
        in_list('elements.tags', 'red', 'blue'),
        order_by('elements.title', 'desc'),
        limit(10),
    ]

Element names are not checked against any content type; unknown elements are
for the delivery service to report.
"""

from . import operators as op
from .parameters import (
    DEPTH, LIMIT, SKIP,
    count_parameter, elements_parameter, language_parameter, make, order_parameter,
)


def _flatten(values):
    """Accept both f('el', 'a', 'b') and f('el', ['a', 'b'])."""
    if len(values) == 1 and isinstance(values[0], (list, tuple)):
        return tuple(values[0])
    return tuple(values)


def equals(element, value):
    return make(element, op.EQ, [value])


def less_than(element, value):
    return make(element, op.LT, [value])


def less_than_or_equal(element, value):
    return make(element, op.LTE, [value])


def greater_than(element, value):
    return make(element, op.GT, [value])


def greater_than_or_equal(element, value):
    return make(element, op.GTE, [value])


def range_(element, lower, upper):
    """Inclusive range; both bounds are required."""
    return make(element, op.RANGE, [lower, upper])


def in_list(element, *values):
    """Element value is one of `values`."""
    return make(element, op.IN, _flatten(values))


def not_in_list(element, *values):
    """Element value is none of `values`."""
    return make(element, op.NIN, _flatten(values))


def contains(element, *values):
    """Array element contains the value(s)."""
    return make(element, op.CONTAINS, _flatten(values))


def contains_all(element, *values):
    """Array element contains every one of `values`."""
    return make(element, op.ALL, _flatten(values))


def contains_any(element, *values):
    """Array element contains at least one of `values`."""
    return make(element, op.ANY, _flatten(values))


def is_empty(element):
    return make(element, op.EMPTY, [])


def is_not_empty(element):
    return make(element, op.NEMPTY, [])


def order_by(element, direction='asc'):
    """Sort directive: order=<element>[asc|desc]."""
    return order_parameter(element, direction)


def elements(*names):
    """Projection directive: only return the named elements."""
    return elements_parameter(_flatten(names))


def depth(n):
    """How many levels of modular content to include."""
    return count_parameter(DEPTH, n, minimum=0)


def limit(n):
    return count_parameter(LIMIT, n, minimum=1)


def skip(n):
    return count_parameter(SKIP, n, minimum=0)


def language(codename):
    """Language variant of the returned content."""
    return language_parameter(codename)
