"""Regenerate the desktop client's offline help table.

Downloads the support-site sitemap, then rewrites ``src/help_article.cc``
from it.  Run from the repository root of the desktop client::

    update-help-articles
"""

import logging
import logging.config
import sys
from typing import Optional

import httpx
from pydantic import ValidationError

from helpgen.models.config import BuildConfig
from helpgen.services.fetcher import fetch_sitemap
from helpgen.services.generator import generate_source

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "format": "%(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "plain",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"level": "INFO", "handlers": ["console"]},
        "loggers": {
            "httpx": {"level": "WARNING"},
            "httpcore": {"level": "WARNING"},
        },
    }
)

logger = logging.getLogger(__name__)


def run(config: BuildConfig) -> None:
    """Fetch the sitemap, then generate the source; the first failure propagates."""
    fetch_sitemap(config)
    generate_source(config)


def main(config: Optional[BuildConfig] = None) -> int:
    try:
        run(config or BuildConfig())
    except (httpx.HTTPError, OSError, ValidationError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
