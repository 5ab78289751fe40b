"""Removal of previously injected SEO / Open Graph tags from a page shell.

The shell is produced by the static site generator, so every pattern here
targets one known, self-contained element shape rather than parsing the
document.  Running the stripper twice gives the same result as running it
once.
"""

import re
from typing import List

_FLAGS = re.IGNORECASE | re.DOTALL

# <meta property="og:*" ...>
_META_OG_RE = re.compile(
    r"""<meta\s+[^>]*\bproperty\s*=\s*['"]og:[^'"]+['"][^>]*>""", _FLAGS
)

# <meta name="description" ...>
_META_DESCRIPTION_RE = re.compile(
    r"""<meta\s+[^>]*\bname\s*=\s*['"]description['"][^>]*>""", _FLAGS
)

# <link rel="canonical" ...>
_LINK_CANONICAL_RE = re.compile(
    r"""<link\s+[^>]*\brel\s*=\s*['"]canonical['"][^>]*>""", _FLAGS
)

# <title>...</title>
_TITLE_RE = re.compile(r"<title\b[^>]*>.*?</title\s*>", _FLAGS)

# <meta name="twitter:*" ...>, only removed on request: the generator never
# emits Twitter card tags, so a shell carrying them put them there on purpose.
_META_TWITTER_RE = re.compile(
    r"""<meta\s+[^>]*\bname\s*=\s*['"]twitter:[^'"]+['"][^>]*>""", _FLAGS
)

_SEO_TAG_PATTERNS: List[re.Pattern] = [
    _META_OG_RE,
    _META_DESCRIPTION_RE,
    _LINK_CANONICAL_RE,
    _TITLE_RE,
]


def strip_seo_tags(html: str, include_twitter: bool = False) -> str:
    """Return *html* with every SEO tag the meta generator emits removed.

    Args:
        html:             Full HTML text of the shell document.
        include_twitter:  Also drop ``<meta name="twitter:*">`` tags.

    Missing tags are not an error; the text is simply returned unchanged.
    Passes repeat until nothing more is removed, since dropping one tag can
    close up the text around another.
    """
    patterns = list(_SEO_TAG_PATTERNS)
    if include_twitter:
        patterns.append(_META_TWITTER_RE)

    while True:
        stripped = html
        for pattern in patterns:
            stripped = pattern.sub("", stripped)
        if stripped == html:
            return html
        html = stripped
