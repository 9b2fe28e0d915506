"""
Delivery query composition.

compose() flattens an ordered collection of parameters into a query string;
Query is an immutable, chainable collection of parameters built on it.

Usage:
    q = query().equals('system.type', 'article').order_by('elements.title').limit(5)
    str(q)  # 'system.type=article&order=elements.title[asc]&limit=5'
"""

from . import builders
from .errors import DuplicateParameter, InvalidValue

PAIR_SEPARATOR = '&'


def render_pair(parameter):
    """(key, value) of a parameter object or of a pre-rendered 'key=value' string."""
    if isinstance(parameter, str):
        key, sep, value = parameter.partition('=')
        if not sep or not key or PAIR_SEPARATOR in parameter:
            raise InvalidValue(f"raw parameter must be a single 'key=value' pair, got {parameter!r}",
                               value=parameter)
        return key, value
    return parameter.render()


def compose(parameters) -> str:
    """
    Render parameters in order as 'key=value' pairs joined by '&'.

    Nothing is merged or deduplicated: two filters on one element with
    different operators are both legal. All pairs are rendered before any
    joining, so an error leaves no partial string behind.
    """
    pairs = [render_pair(p) for p in parameters]
    return PAIR_SEPARATOR.join(f'{key}={value}' for key, value in pairs)


class Query:
    """
    Immutable ordered set of query parameters.

    Every builder method returns a new Query. Adding a parameter whose key is
    already present raises DuplicateParameter instead of letting the later
    one silently win on the server.
    """

    def __init__(self, parameters=()):
        params = []
        keys = {}
        for p in parameters:
            key, value = render_pair(p)
            if key in keys:
                raise DuplicateParameter(
                    f"'{key}' is already set to '{keys[key]}'",
                    element=getattr(p, 'element', key),
                    operator=getattr(p, 'operator', None),
                    value=value)
            keys[key] = value
            params.append(p)
        self._parameters = tuple(params)

    @property
    def parameters(self):
        return self._parameters

    def add(self, *parameters):
        """New query with `parameters` appended."""
        return Query(self._parameters + tuple(parameters))

    def __add__(self, other):
        if not isinstance(other, Query):
            return NotImplemented
        return Query(self._parameters + other.parameters)

    def __iter__(self):
        return iter(self._parameters)

    def __len__(self):
        return len(self._parameters)

    def __eq__(self, other):
        if not isinstance(other, Query):
            return NotImplemented
        return self._parameters == other.parameters

    def __hash__(self):
        return hash(self._parameters)

    def __repr__(self):
        return f'Query({self.to_query_string()!r})'

    def to_query_string(self) -> str:
        return compose(self._parameters)

    def __str__(self):
        return self.to_query_string()

    # Filters

    def equals(self, element, value):
        return self.add(builders.equals(element, value))

    def less_than(self, element, value):
        return self.add(builders.less_than(element, value))

    def less_than_or_equal(self, element, value):
        return self.add(builders.less_than_or_equal(element, value))

    def greater_than(self, element, value):
        return self.add(builders.greater_than(element, value))

    def greater_than_or_equal(self, element, value):
        return self.add(builders.greater_than_or_equal(element, value))

    def range_(self, element, lower, upper):
        return self.add(builders.range_(element, lower, upper))

    def in_list(self, element, *values):
        return self.add(builders.in_list(element, *values))

    def not_in_list(self, element, *values):
        return self.add(builders.not_in_list(element, *values))

    def contains(self, element, *values):
        return self.add(builders.contains(element, *values))

    def contains_all(self, element, *values):
        return self.add(builders.contains_all(element, *values))

    def contains_any(self, element, *values):
        return self.add(builders.contains_any(element, *values))

    def is_empty(self, element):
        return self.add(builders.is_empty(element))

    def is_not_empty(self, element):
        return self.add(builders.is_not_empty(element))

    # Directives

    def order_by(self, element, direction='asc'):
        return self.add(builders.order_by(element, direction))

    def elements(self, *names):
        return self.add(builders.elements(*names))

    def depth(self, n):
        return self.add(builders.depth(n))

    def limit(self, n):
        return self.add(builders.limit(n))

    def skip(self, n):
        return self.add(builders.skip(n))

    def language(self, codename):
        return self.add(builders.language(codename))


def query(*parameters):
    """Create a new query, optionally seeded with parameters."""
    return Query(parameters)
