"""Tests for the delivery client against a fake HTTP session."""

import pytest
import requests
from loguru import logger

from delivery import (
    DeliveryClient, DeliveryOptions, DeliveryItemResponse, DeliveryItemListingResponse,
    DeliveryTypeListingResponse, ContentType, ContentElement,
    DeliveryRequestError, DuplicateParameter, ConfigError,
    equals, order_by, limit, depth, elements, query,
)


BASE = 'https://deliver.kenticocloud.com/proj'

ARTICLE = {
    'system': {'id': '1', 'name': 'Coffee', 'codename': 'coffee', 'type': 'article', 'last_modified': '2017-01-01T00:00:00Z'},
    'elements': {'title': {'type': 'text', 'name': 'Title', 'value': 'Coffee'}},
}

TYPE = {
    'system': {'id': 't1', 'name': 'Article', 'codename': 'article'},
    'elements': {'title': {'type': 'text', 'name': 'Title'}},
}


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=''):
        self._payload = payload
        self.status_code = status_code
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError('no JSON')
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code} Error', response=self)


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        return self.response


def make_client(payload=None, status_code=200, **kwargs):
    session = FakeSession(FakeResponse(payload if payload is not None else {}, status_code))
    return DeliveryClient('proj', session=session, **kwargs), session


class Article:
    def __init__(self, item):
        self.title = item.get('title')


class TestUrls:
    def test_items_without_parameters(self):
        client, session = make_client({'items': []})
        client.get_items_json()
        assert session.calls == [(f'{BASE}/items', 10.0)]

    def test_items_with_parameters(self):
        client, session = make_client({'items': []})
        client.get_items_json(equals('system.type', 'article'), order_by('elements.title', 'desc'), limit(2))
        assert session.calls[0][0] == f'{BASE}/items?system.type=article&order=elements.title[desc]&limit=2'

    def test_item_by_codename(self):
        client, session = make_client({'item': ARTICLE})
        client.get_item_json('coffee', depth(0), elements('title'))
        assert session.calls[0][0] == f'{BASE}/items/coffee?depth=0&elements=title'

    def test_accepts_query_lists_and_raw_strings(self):
        client, session = make_client({'items': []})
        client.get_items_json(query().equals('system.type', 'article'), [limit(1)], 'depth=2')
        assert session.calls[0][0] == f'{BASE}/items?system.type=article&limit=1&depth=2'

    def test_types(self):
        client, session = make_client({'types': []})
        client.get_types_json(limit(3))
        client.get_type_json('article')
        assert [c[0] for c in session.calls] == [f'{BASE}/types?limit=3', f'{BASE}/types/article']

    def test_content_element(self):
        client, session = make_client({'type': 'text', 'name': 'Title', 'codename': 'title'})
        element = client.get_content_element('article', 'title')
        assert session.calls[0][0] == f'{BASE}/types/article/elements/title'
        assert isinstance(element, ContentElement)
        assert element.codename == 'title'

    def test_custom_options(self):
        options = DeliveryOptions('p2', base_url='https://example.test/', timeout=2.5)
        session = FakeSession(FakeResponse({'items': []}))
        DeliveryClient(options=options, session=session).get_items_json()
        assert session.calls == [('https://example.test/p2/items', 2.5)]

    def test_duplicate_parameters_rejected_before_request(self):
        client, session = make_client({'items': []})
        with pytest.raises(DuplicateParameter):
            client.get_items_json(limit(1), limit(2))
        assert session.calls == []

    def test_codename_is_encoded_as_one_path_segment(self):
        client, session = make_client({'item': ARTICLE})
        client.get_item_json('a b?limit=1#x')
        assert session.calls[0][0] == f'{BASE}/items/a%20b%3Flimit%3D1%23x'

    def test_element_path_is_encoded(self):
        client, session = make_client({'type': 'text'})
        client.get_content_element('article/../x', 'title')
        assert session.calls[0][0] == f'{BASE}/types/article%2F..%2Fx/elements/title'

    def test_codename_required(self):
        client, session = make_client({})
        with pytest.raises(ValueError):
            client.get_item_json('')
        with pytest.raises(ValueError):
            client.get_type(None)

    def test_project_id_required(self):
        with pytest.raises(ConfigError):
            DeliveryClient(session=FakeSession(FakeResponse({})))


class TestResponses:
    def test_get_item(self):
        client, _ = make_client({'item': ARTICLE, 'modular_content': {}})
        response = client.get_item('coffee')
        assert isinstance(response, DeliveryItemResponse)
        assert response.item.codename == 'coffee'
        assert response.item.get('title') == 'Coffee'

    def test_get_item_with_model(self):
        client, _ = make_client({'item': ARTICLE})
        response = client.get_item('coffee', model=Article)
        assert isinstance(response.item, Article)
        assert response.item.title == 'Coffee'
        assert response.content_item.codename == 'coffee'

    def test_get_items_with_model_provider(self):
        seen = []

        def provider(model, item):
            seen.append(item.codename)
            return model(item)

        client, _ = make_client({'items': [ARTICLE, ARTICLE]}, model_provider=provider)
        response = client.get_items(model=Article)
        assert isinstance(response, DeliveryItemListingResponse)
        assert [a.title for a in response.items] == ['Coffee', 'Coffee']
        assert seen == ['coffee', 'coffee']

    def test_get_types(self):
        client, _ = make_client({'types': [TYPE], 'pagination': {'skip': 0, 'limit': 1, 'count': 1, 'next_page': ''}})
        response = client.get_types()
        assert isinstance(response, DeliveryTypeListingResponse)
        assert [t.codename for t in response] == ['article']
        assert not response.pagination.has_next_page

    def test_get_type(self):
        client, _ = make_client(TYPE)
        content_type = client.get_type('article')
        assert isinstance(content_type, ContentType)
        assert content_type.elements['title'].type == 'text'


class TestErrors:
    def test_success_without_json(self):
        session = FakeSession(FakeResponse(None, status_code=200, text='<html>maintenance</html>'))
        client = DeliveryClient('proj', session=session)
        with pytest.raises(DeliveryRequestError) as exc:
            client.get_items_json()
        assert exc.value.status_code == 200
        assert exc.value.url == f'{BASE}/items'
        assert 'not valid JSON' in str(exc.value)

    def test_http_error_with_message(self):
        client, _ = make_client({'message': "The requested content item 'nope' was not found."}, status_code=404)
        with pytest.raises(DeliveryRequestError) as exc:
            client.get_item('nope')
        assert exc.value.status_code == 404
        assert exc.value.url == f'{BASE}/items/nope'
        assert 'was not found' in str(exc.value)

    def test_http_error_without_json(self):
        session = FakeSession(FakeResponse(None, status_code=500, text='upstream failure'))
        client = DeliveryClient('proj', session=session)
        with pytest.raises(DeliveryRequestError) as exc:
            client.get_items()
        assert exc.value.status_code == 500
        assert 'upstream failure' in str(exc.value)


class TestLogging:
    def test_logs_request_url_when_enabled(self):
        messages = []
        logger.enable('delivery')
        sink_id = logger.add(messages.append, level='DEBUG', format='{message}')
        try:
            client, _ = make_client({'items': []})
            client.get_items_json(limit(1))
        finally:
            logger.remove(sink_id)
            logger.disable('delivery')
        assert any(f'GET {BASE}/items?limit=1' in m for m in messages)

    def test_silent_by_default(self):
        messages = []
        sink_id = logger.add(messages.append, level='DEBUG')
        try:
            client, _ = make_client({'items': []})
            client.get_items_json()
        finally:
            logger.remove(sink_id)
        assert messages == []
