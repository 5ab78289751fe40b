"""Resolution of the host build arguments into :class:`BuildSettings`."""

import logging
from typing import List, Optional

from social_meta.models.context import BuildSettings

logger = logging.getLogger(__name__)

BASE_URL_ARG_PREFIX = "--social:baseurl="
CONFIGURATION_FLAGS = ("-c", "--configuration")
DEFAULT_CONFIGURATION = "debug"
DEFAULT_BASE_URL = "/"


class ConfigurationError(ValueError):
    """Raised when the build arguments cannot produce usable settings."""


def parse_base_url(arguments: List[str]) -> Optional[str]:
    """Return the value of the first ``--social:baseurl=`` token, or *None*.

    An empty value (``--social:baseurl=``) counts as absent.
    """
    for arg in arguments:
        if arg.startswith(BASE_URL_ARG_PREFIX):
            return arg.split("=", 1)[1] or None
    return None


def parse_configuration_flag(arguments: List[str]) -> str:
    """Return the lowercased value following ``-c`` / ``--configuration``.

    Falls back to ``"debug"`` when the flag is missing or has no value.
    """
    for i, arg in enumerate(arguments):
        if arg in CONFIGURATION_FLAGS:
            if i + 1 < len(arguments):
                return arguments[i + 1].lower()
            break
    return DEFAULT_CONFIGURATION


def resolve_settings(arguments: List[str]) -> BuildSettings:
    """Build the run settings from the raw host *arguments*.

    Raises:
        ConfigurationError: in a release build when no base URL was given.
    """
    configuration = parse_configuration_flag(arguments)
    base_url = parse_base_url(arguments)

    if base_url:
        return BuildSettings(configuration=configuration, base_url=base_url, base_url_explicit=True)

    settings = BuildSettings(configuration=configuration, base_url=DEFAULT_BASE_URL)
    if settings.is_release:
        logger.error(
            "Base URL not provided for a release build; refusing to generate social meta",
            extra={"configuration": configuration},
        )
        raise ConfigurationError(
            f"A base URL ({BASE_URL_ARG_PREFIX}<url>) is required for social meta "
            "generation in release builds."
        )

    return settings
