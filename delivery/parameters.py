"""
Query parameters — the atomic units of a delivery query string.

Two shapes share one render() protocol:

    QueryParameter('elements.price', GTE, [18]).render()  => ('elements.price[gte]', '18')
    SystemParameter('limit', '10').render()                => ('limit', '10')

Both are immutable and fully validated at construction, so a parameter that
exists can always be rendered.
"""

import re
from dataclasses import dataclass, field
from typing import Tuple

from .encoding import VALUE_SEPARATOR, encode_value
from .errors import InvalidArity, InvalidElement, InvalidValue, UnsupportedValueType
from .operators import DEFAULT_CATALOG, OperatorCatalog, VARIADIC

# Whitespace and the characters that split keys, pairs or the URL itself
_ILLEGAL_ELEMENT = re.compile(r'[\s=&?#]')

ORDER_DIRECTIONS = ('asc', 'desc')

ORDER = 'order'
ELEMENTS = 'elements'
DEPTH = 'depth'
LIMIT = 'limit'
SKIP = 'skip'
LANGUAGE = 'language'


def validate_element(element, operator=None) -> str:
    """Return the element unchanged or raise InvalidElement."""
    if not isinstance(element, str) or not element:
        raise InvalidElement("element is required and must be a non-empty string",
                             element=element, operator=operator)
    match = _ILLEGAL_ELEMENT.search(element)
    if match:
        raise InvalidElement(f"element '{element}' contains illegal character {match.group()!r}",
                             element=element, operator=operator)
    return element


@dataclass(frozen=True)
class QueryParameter:
    """A filter: element, operator and the operator's values."""

    element: str
    operator: str
    values: Tuple = field(default=(), compare=False)
    catalog: OperatorCatalog = field(default=DEFAULT_CATALOG, repr=False, compare=False)
    # equality and hashing follow the rendered tokens: 1 == True, but x=1 != x=true
    _tokens: Tuple[str, ...] = field(default=(), init=False, repr=False)

    def __post_init__(self):
        validate_element(self.element, self.operator)
        if isinstance(self.values, (str, bytes)):
            raise InvalidArity(
                f"values for '{self.element}' must be a list of values, not a bare {type(self.values).__name__}",
                element=self.element, operator=self.operator, value=self.values)
        values = tuple(self.values)
        object.__setattr__(self, 'values', values)

        if not self.catalog.accepts(self.operator, len(values)):
            arity = self.catalog.arity_of(self.operator)
            expected = 'at least 1' if arity == VARIADIC else str(arity)
            raise InvalidArity(
                f"operator '{self.operator}' on '{self.element}' takes {expected} value(s), got {len(values)}",
                element=self.element, operator=self.operator, value=values)

        tokens = []
        for value in values:
            if isinstance(value, (list, tuple)):
                raise InvalidArity(
                    f"nested value list for '{self.element}'; pass values individually",
                    element=self.element, operator=self.operator, value=value)
            try:
                tokens.append(encode_value(value))
            except UnsupportedValueType as e:
                raise UnsupportedValueType(
                    f"cannot encode {type(value).__name__} value {value!r} for '{self.element}'",
                    element=self.element, operator=self.operator, value=value) from e
        object.__setattr__(self, '_tokens', tuple(tokens))

    @property
    def key(self) -> str:
        # the equals token is empty, so equality filters get a bare key
        return self.element + self.catalog.token_of(self.operator)

    def render(self) -> Tuple[str, str]:
        return self.key, VALUE_SEPARATOR.join(self._tokens)

    def __str__(self):
        return '%s=%s' % self.render()


@dataclass(frozen=True)
class SystemParameter:
    """A directive without an element-operator key (order, limit, ...)."""

    key: str
    value: str

    def render(self) -> Tuple[str, str]:
        return self.key, self.value

    def __str__(self):
        return f'{self.key}={self.value}'


def make(element, operator, values=(), catalog=DEFAULT_CATALOG) -> QueryParameter:
    """Create a validated filter parameter."""
    return QueryParameter(element, operator, values, catalog)


def order_parameter(element, direction='asc') -> SystemParameter:
    validate_element(element)
    if direction not in ORDER_DIRECTIONS:
        raise InvalidValue(f"order direction must be one of {ORDER_DIRECTIONS}, got {direction!r}",
                           element=element, value=direction)
    return SystemParameter(ORDER, f'{element}[{direction}]')


def elements_parameter(names) -> SystemParameter:
    names = list(names)
    if not names:
        raise InvalidArity("elements projection needs at least one element name", value=names)
    for name in names:
        validate_element(name)
        if VALUE_SEPARATOR in name:
            raise InvalidElement(f"element '{name}' contains illegal character ','", element=name)
    return SystemParameter(ELEMENTS, VALUE_SEPARATOR.join(names))


def count_parameter(key, n, minimum=0) -> SystemParameter:
    """depth / limit / skip: a non-negative (or positive) integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidValue(f"{key} must be an integer, got {n!r}", value=n)
    if n < minimum:
        raise InvalidValue(f"{key} must be >= {minimum}, got {n}", value=n)
    return SystemParameter(key, str(n))


def language_parameter(codename) -> SystemParameter:
    if not isinstance(codename, str) or not codename:
        raise InvalidValue("language codename is required", value=codename)
    return SystemParameter(LANGUAGE, encode_value(codename))
