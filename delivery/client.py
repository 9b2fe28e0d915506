"""
Delivery client — retrieves content items and content types.

Usage:
    client = DeliveryClient('975bf280-fd91-488c-994c-2f04416e5ee3')
    response = client.get_items(equals('system.type', 'article'), order_by('elements.title'), limit(10))
    for item in response.items:
        print(item.get_string('title'))
"""

from typing import Optional
from urllib.parse import quote

import requests

from .config import DeliveryOptions
from .errors import DeliveryRequestError
from .log import logger
from .query import Query
from .responses import (
    ContentElement, ContentType,
    DeliveryItemListingResponse, DeliveryItemResponse, DeliveryTypeListingResponse,
    default_model_provider,
)


class DeliveryClient:
    """
    Client for the delivery service of one project.

    Args:
        project_id: Project identifier (ignored when `options` is given)
        options: DeliveryOptions with project id, base URL and timeout
        session: Optional requests.Session or compatible HTTP client.
                 Must have a .get(url, timeout=...) method.
        model_provider: callable (model, ContentItem) -> instance, used when a
                        model is passed to get_item()/get_items()
        content_link_url_resolver: callable (ContentLink) -> url for rich-text links
    """

    def __init__(self, project_id=None, options: Optional[DeliveryOptions] = None, session=None,
                 model_provider=None, content_link_url_resolver=None):
        self.options = options or DeliveryOptions(project_id=project_id)
        self.session = session if session is not None else requests.Session()
        self.model_provider = model_provider or default_model_provider
        self.content_link_url_resolver = content_link_url_resolver

    # Items

    def get_item_json(self, codename, *parameters) -> dict:
        """A content item as JSON data."""
        return self._get(f'items/{_codename(codename)}', parameters)

    def get_items_json(self, *parameters) -> dict:
        """Content items as JSON data. No parameters returns all items."""
        return self._get('items', parameters)

    def get_item(self, codename, *parameters, model=None) -> DeliveryItemResponse:
        """A content item, projected onto `model` when given."""
        data = self.get_item_json(codename, *parameters)
        return DeliveryItemResponse(data, model, self.model_provider, self.content_link_url_resolver)

    def get_items(self, *parameters, model=None) -> DeliveryItemListingResponse:
        """Content items matching the filters, projected onto `model` when given."""
        data = self.get_items_json(*parameters)
        return DeliveryItemListingResponse(data, model, self.model_provider, self.content_link_url_resolver)

    # Types

    def get_type_json(self, codename) -> dict:
        return self._get(f'types/{_codename(codename)}', ())

    def get_types_json(self, *parameters) -> dict:
        return self._get('types', parameters)

    def get_type(self, codename) -> ContentType:
        return ContentType(self.get_type_json(codename))

    def get_types(self, *parameters) -> DeliveryTypeListingResponse:
        return DeliveryTypeListingResponse(self.get_types_json(*parameters))

    def get_content_element(self, content_type_codename, content_element_codename) -> ContentElement:
        """An element definition of a content type."""
        path = f'types/{_codename(content_type_codename)}/elements/{_codename(content_element_codename)}'
        return ContentElement(self._get(path, ()), content_element_codename)

    # Transport

    def url_for(self, path, parameters=()) -> str:
        """Request URL for a resource path and its query parameters."""
        query_string = build_query(parameters).to_query_string()
        url = self.options.endpoint(path)
        return f'{url}?{query_string}' if query_string else url

    def _get(self, path, parameters) -> dict:
        url = self.url_for(path, parameters)
        logger.debug(f"GET {url}")
        response = self.session.get(url, timeout=self.options.timeout)
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            message = _error_message(response)
            logger.warning(f"GET {url} failed: HTTP {response.status_code} {message}")
            raise DeliveryRequestError(
                f"HTTP {response.status_code} for {url}: {message}",
                status_code=response.status_code, url=url,
            ) from e
        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"GET {url} returned a body that is not JSON")
            raise DeliveryRequestError(
                f"response for {url} is not valid JSON",
                status_code=response.status_code, url=url,
            ) from e


def build_query(parameters) -> Query:
    """
    One Query from a mix of parameters, Query objects, raw 'key=value'
    strings and lists of those.
    """
    flat = []
    for p in parameters:
        if isinstance(p, Query):
            flat.extend(p.parameters)
        elif isinstance(p, (list, tuple)):
            flat.extend(build_query(p).parameters)
        else:
            flat.append(p)
    return Query(flat)


def _codename(codename):
    if not codename or not isinstance(codename, str):
        raise ValueError("Delivery: codename is required and must be a string")
    # codenames are single path segments
    return quote(codename, safe='')


def _error_message(response):
    try:
        body = response.json()
    except ValueError:
        return response.text[:200] if response.text else 'no response body'
    if isinstance(body, dict) and body.get('message'):
        return body['message']
    return str(body)[:200]
