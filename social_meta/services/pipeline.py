"""Post-bake driver: fans the baked root page out into one file per page.

States run strictly in order:

1. resolve the base URL from the build arguments (fatal in release builds
   when missing, before any file is touched);
2. check that ``wwwroot`` and its ``index.html`` exist, otherwise skip;
3. strip the SEO tags from the shell once;
4. materialise every non-root page, in the order the host listed them.

Pages are written sequentially and the first failure aborts the run.
"""

import logging

from social_meta.models.context import BuildContext, PipelineResult
from social_meta.services.materializer import materialize_page
from social_meta.services.settings import resolve_settings
from social_meta.services.stripper import strip_seo_tags

logger = logging.getLogger(__name__)


def run(context: BuildContext) -> PipelineResult:
    """Generate per-page HTML files for every page in *context*.

    Raises:
        ConfigurationError: release build without a base URL.
        ValueError: the shell document has no ``</head>``.
        OSError: a page could not be written.
    """
    logger.info(
        "Social meta generation started",
        extra={"project_path": context.project_path, "pages": len(context.generated_pages)},
    )

    settings = resolve_settings(context.arguments)
    if not settings.base_url_explicit:
        logger.info("No base URL provided; defaulting to '%s'", settings.base_url)

    wwwroot = context.wwwroot_path
    if not wwwroot.is_dir():
        logger.warning("wwwroot directory %s does not exist; skipping social meta generation", wwwroot)
        return PipelineResult(skipped=True, base_url=settings.base_url)

    shell_path = context.shell_path
    if not shell_path.is_file():
        logger.warning("%s does not exist; skipping social meta generation", shell_path)
        return PipelineResult(skipped=True, base_url=settings.base_url)

    blank_template = strip_seo_tags(shell_path.read_text(encoding="utf-8"))

    written = []
    for page in context.generated_pages:
        if page.is_root:
            continue
        output_path = materialize_page(blank_template, page, settings.base_url, wwwroot)
        written.append(str(output_path))

    logger.info("Social meta generation finished", extra={"pages_written": len(written)})
    return PipelineResult(skipped=False, base_url=settings.base_url, written=written)
