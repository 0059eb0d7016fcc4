"""Turn the cached sitemap into the generated help table source."""

import logging
from typing import List, Optional

from helpgen.models.article import Article, RawRecord, RawSitemap, sitemap_adapter
from helpgen.models.config import BuildConfig
from helpgen.services.renderer import render_source

logger = logging.getLogger(__name__)


def load_sitemap(config: BuildConfig) -> RawSitemap:
    """Read and decode the cached sitemap.

    Raises:
        OSError: if the cache file is missing or unreadable.
        pydantic.ValidationError: on malformed JSON or a shape other than
            ``{group: [{field: str}]}`` (JSON null allowed at each level).
    """
    raw = config.sitemap_path.read_bytes()
    return sitemap_adapter.validate_json(raw)


def to_article(record: Optional[RawRecord], base_url: str) -> Article:
    """Build an :class:`Article` from one raw record; missing or null fields become ``""``."""
    record = record or {}
    name = record.get("name") or ""
    return Article(
        type=record.get("type") or "",
        name=name,
        url=base_url + (record.get("url") or ""),
        search_text=name.lower(),
    )


def flatten_sitemap(sitemap: RawSitemap, base_url: str) -> List[Article]:
    """Flatten every group into one list, keeping group then record order."""
    articles: List[Article] = []
    for group, records in sitemap.items():
        records = records or []
        logger.debug("Sitemap group %s: %d records", group, len(records))
        for record in records:
            article = to_article(record, base_url)
            logger.debug("Article %r -> %s", article.name, article.url)
            articles.append(article)
    return articles


def generate_source(config: BuildConfig) -> List[Article]:
    """Regenerate ``config.output_path`` from the cached sitemap.

    The output file is only written once decoding and rendering have
    succeeded, so any earlier failure leaves the previous file untouched.
    """
    sitemap = load_sitemap(config)
    articles = flatten_sitemap(sitemap, config.article_base_url)
    source = render_source(articles)

    config.output_path.parent.mkdir(parents=True, exist_ok=True)
    config.output_path.write_text(source, encoding="utf-8")
    logger.debug("Wrote %d articles to %s", len(articles), config.output_path)
    return articles
