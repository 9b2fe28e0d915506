"""
Content links in rich-text elements.

Rich text references other content items with anchors such as

    <a data-item-id="65832c4e-..." href="">Coffee</a>

and lists the targets in the element's `links` map. resolve_links() fills in
each href using a caller-supplied resolver.
"""

import html
import re
from dataclasses import dataclass

_LINK_ANCHOR = re.compile(r'<a\b(?P<before>[^>]*?)\bdata-item-id="(?P<id>[^"]*)"(?P<after>[^>]*)>')
_HREF = re.compile(r'\bhref="[^"]*"')


@dataclass(frozen=True)
class ContentLink:
    id: str
    codename: str = ''
    type: str = ''
    url_slug: str = ''

    @classmethod
    def from_json(cls, link_id, data):
        return cls(
            id=link_id,
            codename=data.get('codename', ''),
            type=data.get('type', ''),
            url_slug=data.get('url_slug', ''),
        )


def resolve_links(value, links, resolver):
    """
    Rewrite the href of every content-item anchor in `value`.

    Args:
        value: rich-text HTML
        links: the element's `links` map (id -> {codename, type, url_slug})
        resolver: callable (ContentLink) -> url. If it also has a
            resolve_broken_link() method, anchors whose id is missing from
            `links` get that url; otherwise they are left unchanged.
    """
    if not value or resolver is None:
        return value

    def replace(match):
        link_id = match.group('id')
        if link_id in (links or {}):
            url = resolver(ContentLink.from_json(link_id, links[link_id]))
        elif hasattr(resolver, 'resolve_broken_link'):
            url = resolver.resolve_broken_link()
        else:
            return match.group(0)
        return _with_href(match, url)

    return _LINK_ANCHOR.sub(replace, value)


def _with_href(match, url):
    attrs = f"{match.group('before')}data-item-id=\"{match.group('id')}\"{match.group('after')}"
    href = f'href="{html.escape(url or "", quote=True)}"'
    if _HREF.search(attrs):
        attrs = _HREF.sub(lambda _: href, attrs, count=1)
    else:
        attrs = f'{attrs} {href}'
    return f'<a{attrs}>'
