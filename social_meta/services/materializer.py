import html
import logging
import re
from pathlib import Path

from social_meta.models.page import LogicalPage
from social_meta.services.meta_tags import render_meta_tags
from social_meta.services.rooter import root_all_urls

logger = logging.getLogger(__name__)

ROOT_BASE_TAG = '<base href="/" />'
OUTPUT_FILENAME = "index.html"

_HEAD_CLOSE_RE = re.compile(r"</head\s*>", re.IGNORECASE)


def render_page(blank_template: str, page: LogicalPage, base_url: str) -> str:
    """Turn the shared blank template into the output document for *page*.

    Order matters: the base tag is rewritten and the meta tags are inserted
    before URL rooting runs over the whole document.

    Raises:
        ValueError: if the template has no ``</head>`` to insert the tags before.
    """
    document = blank_template.replace(
        ROOT_BASE_TAG, f'<base href="{html.escape(base_url.rstrip("/"), quote=True)}/" />'
    )

    head_close = _HEAD_CLOSE_RE.search(document)
    if head_close is None:
        raise ValueError(
            f"Cannot inject meta tags for '{page.slug}': template has no </head>"
        )

    insert_at = head_close.start()
    document = f"{document[:insert_at]}{render_meta_tags(page, base_url)}\n{document[insert_at:]}"
    return root_all_urls(document)


def output_path_for(wwwroot: Path, page: LogicalPage) -> Path:
    return wwwroot / page.trimmed_slug / OUTPUT_FILENAME


def materialize_page(
    blank_template: str, page: LogicalPage, base_url: str, wwwroot: Path
) -> Path:
    """Render *page* and write it below *wwwroot*, overwriting any previous file.

    Returns the path written.  Directory creation and write errors
    (:class:`OSError`) propagate to the caller.
    """
    document = render_page(blank_template, page, base_url)

    output_path = output_path_for(wwwroot, page)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(document, encoding="utf-8")

    logger.info("Wrote page", extra={"slug": page.slug, "path": str(output_path)})
    return output_path
