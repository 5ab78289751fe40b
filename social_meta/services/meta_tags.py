"""Open Graph / SEO tag generation for a single logical page."""

import html
from typing import List

from social_meta.models.page import LogicalPage

_ABSOLUTE_PREFIXES = ("http://", "https://")


def _esc(value: str) -> str:
    return html.escape(value or "", quote=True)


def page_url(base_url: str, slug: str) -> str:
    """Join *base_url* and *slug* with exactly one separator and one trailing slash."""
    return f"{base_url.rstrip('/')}/{slug.strip('/')}/"


def image_url(base_url: str, image: str) -> str:
    if image.startswith(_ABSOLUTE_PREFIXES):
        return image
    return f"{base_url.rstrip('/')}/{image.lstrip('/')}"


def generate_meta_tags(page: LogicalPage, base_url: str) -> List[str]:
    """Return the ordered head tags describing *page*.

    Seven tags are always produced (description, canonical, title and four
    ``og:*`` properties); an ``og:image`` tag is appended when the page
    declares an image.
    """
    url = _esc(page_url(base_url, page.slug))
    title = _esc(page.title)
    description = _esc(page.description)

    tags = [
        f'<meta name="description" content="{description}" />',
        f'<link rel="canonical" href="{url}" />',
        f"<title>{title}</title>",
        '<meta property="og:type" content="article" />',
        f'<meta property="og:title" content="{title}" />',
        f'<meta property="og:description" content="{description}" />',
        f'<meta property="og:url" content="{url}" />',
    ]

    if page.image:
        tags.append(
            f'<meta property="og:image" content="{_esc(image_url(base_url, page.image))}" />'
        )

    return tags


def render_meta_tags(page: LogicalPage, base_url: str) -> str:
    """Return the tags of :func:`generate_meta_tags` as one block, one tag per line."""
    return "\n".join(generate_meta_tags(page, base_url))
