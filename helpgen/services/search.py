"""Keyword search over the help table, matching ``HelpDatabase::GetArticles``.

The generated C++ is what the desktop client runs; this is the same lookup
for use from Python against an in-memory article list.
"""

import re
from typing import List

from helpgen.models.article import Article

# Also passed verbatim to the Poco tokenizer in the generated GetArticles.
SEARCH_DELIMITERS = ";, "

_DELIMITERS = re.compile("[" + re.escape(SEARCH_DELIMITERS) + "]+")


def tokenize(keywords: str) -> List[str]:
    """Lowercase *keywords* and split on ``;``, ``,`` and spaces, dropping empties."""
    tokens = (token.strip() for token in _DELIMITERS.split(keywords.lower()))
    return [token for token in tokens if token]


def search_articles(articles: List[Article], keywords: str) -> List[Article]:
    """Return every article whose search text contains a keyword token.

    Results follow table order.  An article is listed once per matching
    token, so a name containing two of the keywords appears twice.
    """
    tokens = tokenize(keywords)
    result: List[Article] = []
    for article in articles:
        for token in tokens:
            if token in article.search_text:
                result.append(article)
    return result
