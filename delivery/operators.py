"""
Operator catalog — comparison and containment operators of the filter grammar.

Every operator maps to exactly one wire token, appended to the element name
to form the query-string key:

    token_of(GTE) => '[gte]'      # age[gte]=18
    token_of(EQ)  => ''           # type=article

The catalog is a plain table so a new grammar version can be injected
without touching the parameter code.
"""

EQ = 'eq'
LT = 'lt'
LTE = 'lte'
GT = 'gt'
GTE = 'gte'
RANGE = 'range'
IN = 'in'
NIN = 'nin'
CONTAINS = 'contains'
ALL = 'all'
ANY = 'any'
EMPTY = 'empty'
NEMPTY = 'nempty'

# Arity sentinel: one or more values
VARIADIC = -1

GRAMMAR_VERSION = '1'

_DEFAULT_TOKENS = {
    EQ: '',
    LT: '[lt]',
    LTE: '[lte]',
    GT: '[gt]',
    GTE: '[gte]',
    RANGE: '[range]',
    IN: '[in]',
    NIN: '[nin]',
    CONTAINS: '[contains]',
    ALL: '[all]',
    ANY: '[any]',
    EMPTY: '[empty]',
    NEMPTY: '[nempty]',
}

_DEFAULT_ARITIES = {
    EQ: 1,
    LT: 1,
    LTE: 1,
    GT: 1,
    GTE: 1,
    RANGE: 2,
    IN: VARIADIC,
    NIN: VARIADIC,
    CONTAINS: VARIADIC,
    ALL: VARIADIC,
    ANY: VARIADIC,
    EMPTY: 0,
    NEMPTY: 0,
}


class OperatorCatalog:
    """Immutable operator -> (wire token, arity) table."""

    def __init__(self, tokens, arities, version=GRAMMAR_VERSION):
        if set(tokens) != set(arities):
            missing = sorted(set(tokens) ^ set(arities))
            raise ValueError(f"Delivery: operators without both token and arity: {missing}")
        seen = {}
        for op, token in tokens.items():
            if token in seen:
                raise ValueError(f"Delivery: token '{token}' is shared by '{seen[token]}' and '{op}'")
            seen[token] = op
        for op, arity in arities.items():
            if not isinstance(arity, int) or arity < VARIADIC:
                raise ValueError(f"Delivery: invalid arity {arity!r} for operator '{op}'")
        self._tokens = dict(tokens)
        self._arities = dict(arities)
        self._version = version

    @property
    def version(self):
        return self._version

    @property
    def operators(self):
        """Operator tags in declaration order."""
        return tuple(self._tokens)

    def __contains__(self, op):
        return op in self._tokens

    def token_of(self, op):
        """Wire token of an operator, e.g. '[lt]'."""
        try:
            return self._tokens[op]
        except KeyError:
            raise ValueError(f"Delivery: unknown operator '{op}'") from None

    def arity_of(self, op):
        """Required value count, or VARIADIC for one-or-more."""
        try:
            return self._arities[op]
        except KeyError:
            raise ValueError(f"Delivery: unknown operator '{op}'") from None

    def accepts(self, op, count):
        """Whether `count` values satisfy the operator's arity."""
        arity = self.arity_of(op)
        if arity == VARIADIC:
            return count >= 1
        return count == arity


DEFAULT_CATALOG = OperatorCatalog(_DEFAULT_TOKENS, _DEFAULT_ARITIES)


def token_of(op):
    return DEFAULT_CATALOG.token_of(op)


def arity_of(op):
    return DEFAULT_CATALOG.arity_of(op)
