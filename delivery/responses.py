"""
Response envelopes for delivery JSON.

Each envelope keeps the raw payload on `.json` and exposes the parts callers
use most: items, types, modular content and pagination.
"""

from typing import Optional

from .links import resolve_links


class ContentItem:
    """A content item: `system` metadata plus named `elements`."""

    def __init__(self, data: dict, modular_content: dict = None, link_resolver=None):
        self.json = data
        self.system = data.get('system', {})
        self.elements = data.get('elements', {})
        self._modular_content = modular_content or {}
        self._link_resolver = link_resolver

    @property
    def id(self):
        return self.system.get('id')

    @property
    def codename(self):
        return self.system.get('codename')

    @property
    def name(self):
        return self.system.get('name')

    @property
    def type(self):
        return self.system.get('type')

    @property
    def last_modified(self):
        return self.system.get('last_modified')

    def get(self, element, default=None):
        """Raw value of an element."""
        if element not in self.elements:
            return default
        return self.elements[element].get('value', default)

    def get_string(self, element) -> Optional[str]:
        """Text value of an element; rich-text content links are resolved."""
        data = self.elements.get(element)
        if data is None:
            return None
        value = data.get('value')
        if data.get('type') == 'rich_text':
            return resolve_links(value, data.get('links', {}), self._link_resolver)
        return value

    def get_modular_content(self, element):
        """Items referenced by a modular content element, in element order."""
        codenames = self.get(element) or []
        return [
            ContentItem(self._modular_content[c], self._modular_content, self._link_resolver)
            for c in codenames if c in self._modular_content
        ]

    def __repr__(self):
        return f'ContentItem(codename={self.codename!r}, type={self.type!r})'


class ContentElement:
    """An element definition of a content type."""

    def __init__(self, data: dict, codename: str = None):
        self.json = data
        self.type = data.get('type')
        self.name = data.get('name')
        self.codename = data.get('codename', codename)
        self.options = data.get('options', [])
        self.taxonomy_group = data.get('taxonomy_group')

    def __repr__(self):
        return f'ContentElement(codename={self.codename!r}, type={self.type!r})'


class ContentType:
    """A content type with its element definitions keyed by codename."""

    def __init__(self, data: dict):
        self.json = data
        self.system = data.get('system', {})
        self.elements = {
            codename: ContentElement(element, codename)
            for codename, element in data.get('elements', {}).items()
        }

    @property
    def codename(self):
        return self.system.get('codename')

    @property
    def name(self):
        return self.system.get('name')

    def __repr__(self):
        return f'ContentType(codename={self.codename!r})'


class Pagination:
    def __init__(self, data: dict):
        data = data or {}
        self.skip = data.get('skip', 0)
        self.limit = data.get('limit', 0)
        self.count = data.get('count', 0)
        self.next_page_url = data.get('next_page') or None

    @property
    def has_next_page(self):
        return self.next_page_url is not None


def default_model_provider(model, item):
    """Project a ContentItem onto `model` by calling model(item)."""
    return model(item)


class DeliveryItemResponse:
    """Response of items/{codename}. `item` is the projection when a model was requested."""

    def __init__(self, data: dict, model=None, model_provider=default_model_provider, link_resolver=None):
        self.json = data
        self.modular_content = data.get('modular_content', {})
        self.content_item = ContentItem(data.get('item', {}), self.modular_content, link_resolver)
        self.item = model_provider(model, self.content_item) if model else self.content_item


class DeliveryItemListingResponse:
    """Response of items. `items` are projections when a model was requested."""

    def __init__(self, data: dict, model=None, model_provider=default_model_provider, link_resolver=None):
        self.json = data
        self.modular_content = data.get('modular_content', {})
        self.content_items = [
            ContentItem(item, self.modular_content, link_resolver) for item in data.get('items', [])
        ]
        if model:
            self.items = [model_provider(model, item) for item in self.content_items]
        else:
            self.items = list(self.content_items)
        self.pagination = Pagination(data.get('pagination'))

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


class DeliveryTypeListingResponse:
    def __init__(self, data: dict):
        self.json = data
        self.types = [ContentType(t) for t in data.get('types', [])]
        self.pagination = Pagination(data.get('pagination'))

    def __len__(self):
        return len(self.types)

    def __iter__(self):
        return iter(self.types)
