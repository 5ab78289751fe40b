import re

# src="..." / href="..." whose value is not an absolute http(s) URL
_RELATIVE_URL_ATTR_RE = re.compile(r'(src|href)="(?!https?://)([^"]+?)"')


def root_all_urls(html: str) -> str:
    """Prefix every non-absolute ``src``/``href`` value in *html* with a single ``/``.

    Leading slashes are trimmed before the prefix is added, so ``/already``
    stays as it is and ``img/a.png`` becomes ``/img/a.png``.  Protocol-relative
    values (``//cdn.example.com/x.js``) are not recognised as absolute and end
    up as ``/cdn.example.com/x.js``.
    """
    return _RELATIVE_URL_ATTR_RE.sub(
        lambda m: f'{m.group(1)}="/{m.group(2).lstrip("/")}"', html
    )
