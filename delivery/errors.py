"""Error taxonomy for the Delivery SDK."""


class DeliveryError(Exception):
    """Base class for all Delivery SDK errors."""


class ConfigError(DeliveryError):
    """Missing or invalid client configuration."""


class QueryError(DeliveryError, ValueError):
    """A query parameter could not be built or composed."""

    def __init__(self, message, element=None, operator=None, value=None):
        super().__init__(f"Delivery: {message}")
        self.element = element
        self.operator = operator
        self.value = value


class InvalidArity(QueryError):
    """Wrong number of values for an operator."""


class InvalidElement(QueryError):
    """Empty or malformed element identifier."""


class UnsupportedValueType(QueryError):
    """Value has no encoding rule."""


class InvalidValue(QueryError):
    """Directive value out of range (negative limit, unknown sort direction)."""


class DuplicateParameter(QueryError):
    """Two parameters in one query render the same key."""


class DeliveryRequestError(DeliveryError):
    """The delivery service answered with an HTTP error."""

    def __init__(self, message, status_code=None, url=None):
        super().__init__(f"Delivery: {message}")
        self.status_code = status_code
        self.url = url
