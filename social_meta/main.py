import argparse
import logging
import logging.config
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from social_meta.models.context import BuildContext
from social_meta.models.page import LogicalPage, PageManifest
from social_meta.services.pipeline import run
from social_meta.services.settings import ConfigurationError

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
        },
    },
    "root": {"level": "INFO", "handlers": ["console"]},
}

logger = logging.getLogger(__name__)


def load_pages(raw: str) -> List[LogicalPage]:
    """Parse a page manifest: ``{"pages": [...]}`` or a bare JSON list of pages."""
    if raw.lstrip().startswith("["):
        raw = '{"pages": ' + raw + "}"
    return PageManifest.model_validate_json(raw).pages


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="social-meta",
        allow_abbrev=False,
        description=(
            "Copy the baked wwwroot/index.html once per generated page, injecting "
            "page-specific SEO and Open Graph tags.  Unrecognised arguments are "
            "treated as host build arguments (--social:baseurl=<url>, -c <configuration>)."
        ),
    )
    parser.add_argument("project_path", help="Build output directory containing wwwroot/")
    parser.add_argument(
        "--pages",
        required=True,
        type=Path,
        help="JSON manifest of generated pages",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.config.dictConfig(LOGGING_CONFIG)

    parser = build_parser()
    args, build_arguments = parser.parse_known_args(argv)

    try:
        raw_manifest = args.pages.read_text(encoding="utf-8")
    except OSError as exc:
        parser.error(f"cannot read page manifest {args.pages}: {exc}")

    try:
        pages = load_pages(raw_manifest)
    except ValidationError as exc:
        parser.error(f"invalid page manifest {args.pages}: {exc}")

    context = BuildContext(
        project_path=args.project_path,
        arguments=build_arguments,
        generated_pages=pages,
    )

    try:
        run(context)
    except ConfigurationError as exc:
        logger.error("Social meta generation aborted: %s", exc)
        return 1
    except Exception:
        logger.exception("Unexpected failure while generating social meta for %s", args.project_path)
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
