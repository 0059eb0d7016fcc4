"""Download the support-site sitemap into the local cache file."""

import logging
from typing import Optional

import httpx

from helpgen.models.config import BuildConfig

logger = logging.getLogger(__name__)


def fetch_sitemap(config: BuildConfig, client: Optional[httpx.Client] = None) -> int:
    """Fetch ``config.sitemap_url`` and stream the body to ``config.sitemap_path``.

    Any previous cache file is removed first; a missing one is not an error.
    The body is copied as-is, so nothing here checks that it is JSON.

    Returns the number of bytes written.

    Raises:
        httpx.TransportError: on connection failures and timeouts.
        httpx.HTTPStatusError: on a 4xx/5xx response when
            ``config.raise_for_status`` is set.
        OSError: if the cache file cannot be replaced or written.
    """
    if client is None:
        with httpx.Client(timeout=config.timeout, follow_redirects=True) as owned:
            return _download(owned, config)
    return _download(client, config)


def _download(client: httpx.Client, config: BuildConfig) -> int:
    path = config.sitemap_path
    with client.stream("GET", config.sitemap_url) as response:
        if config.raise_for_status:
            response.raise_for_status()
        elif response.is_error:
            logger.warning(
                "Sitemap request returned HTTP %s; caching the body anyway",
                response.status_code,
            )

        path.unlink(missing_ok=True)
        path.parent.mkdir(parents=True, exist_ok=True)

        # A failure mid-copy leaves whatever was already written in place.
        total = 0
        with open(path, "wb") as output:
            for chunk in response.iter_bytes():
                output.write(chunk)
                total += len(chunk)

    logger.info("%d bytes downloaded.", total)
    return total
