from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter

# JSON null is accepted for a group, a record or a field value and is read as
# empty; any other non-string value is still rejected.
RawRecord = Dict[str, Optional[str]]
RawSitemap = Dict[str, Optional[List[Optional[RawRecord]]]]

# Strict so that a non-string record value is a decode error rather than coerced.
sitemap_adapter: TypeAdapter[RawSitemap] = TypeAdapter(
    RawSitemap, config=ConfigDict(strict=True)
)


class Article(BaseModel):
    """One help article as embedded in the generated table."""

    type: str
    name: str
    url: str  # absolute
    search_text: str  # lowercased name
