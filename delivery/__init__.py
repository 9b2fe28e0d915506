SDK_VERSION = '0.1.0'

from .operators import (
    EQ, LT, LTE, GT, GTE, RANGE, IN, NIN, CONTAINS, ALL, ANY, EMPTY, NEMPTY,
    VARIADIC, OperatorCatalog, DEFAULT_CATALOG, token_of, arity_of,
)
from .encoding import encode_value, decode_value
from .parameters import QueryParameter, SystemParameter, make
from .builders import (
    equals, less_than, less_than_or_equal, greater_than, greater_than_or_equal,
    range_, in_list, not_in_list, contains, contains_all, contains_any, is_empty, is_not_empty,
    order_by, elements, depth, limit, skip, language,
)
from .query import compose, query, Query
from .errors import (
    DeliveryError, ConfigError, QueryError,
    InvalidArity, InvalidElement, UnsupportedValueType, InvalidValue, DuplicateParameter,
    DeliveryRequestError,
)
from .config import DeliveryOptions
from .links import ContentLink, resolve_links
from .responses import (
    ContentItem, ContentType, ContentElement, Pagination,
    DeliveryItemResponse, DeliveryItemListingResponse, DeliveryTypeListingResponse,
)
from .client import DeliveryClient

__all__ = [
    'EQ', 'LT', 'LTE', 'GT', 'GTE', 'RANGE', 'IN', 'NIN', 'CONTAINS', 'ALL', 'ANY', 'EMPTY', 'NEMPTY',
    'VARIADIC', 'OperatorCatalog', 'DEFAULT_CATALOG', 'token_of', 'arity_of',
    'encode_value', 'decode_value',
    'QueryParameter', 'SystemParameter', 'make',
    'equals', 'less_than', 'less_than_or_equal', 'greater_than', 'greater_than_or_equal',
    'range_', 'in_list', 'not_in_list', 'contains', 'contains_all', 'contains_any', 'is_empty', 'is_not_empty',
    'order_by', 'elements', 'depth', 'limit', 'skip', 'language',
    'compose', 'query', 'Query',
    'DeliveryError', 'ConfigError', 'QueryError',
    'InvalidArity', 'InvalidElement', 'UnsupportedValueType', 'InvalidValue', 'DuplicateParameter',
    'DeliveryRequestError',
    'DeliveryOptions',
    'ContentLink', 'resolve_links',
    'ContentItem', 'ContentType', 'ContentElement', 'Pagination',
    'DeliveryItemResponse', 'DeliveryItemListingResponse', 'DeliveryTypeListingResponse',
    'DeliveryClient',
    'SDK_VERSION',
]
