from pathlib import Path

from pydantic import BaseModel, Field

SITEMAP_URL = "https://support.toggl.com/sitemap/"
ARTICLE_BASE_URL = "https://support.toggl.com/"
SITEMAP_PATH = Path("src") / "help" / "sitemap.json"
OUTPUT_PATH = Path("src") / "help_article.cc"


class BuildConfig(BaseModel):
    """Fixed locations used by one fetch-and-generate run."""

    sitemap_url: str = SITEMAP_URL
    article_base_url: str = Field(
        default=ARTICLE_BASE_URL,
        description="Prefix joined verbatim to every article's relative url.",
    )
    sitemap_path: Path = SITEMAP_PATH
    output_path: Path = OUTPUT_PATH
    # Replaces the httpx default timeout rather than leaving the transport default.
    timeout: float = Field(
        default=10.0,
        gt=0,
        description="Seconds to wait on the sitemap request.",
    )
    # On by default, so a plain download that caches error bodies needs False.
    raise_for_status: bool = True
    """Reject 4xx/5xx sitemap responses before the cache file is replaced.

    When ``False`` the error body is cached like any other download and the
    generator fails later when it cannot decode it.
    """
