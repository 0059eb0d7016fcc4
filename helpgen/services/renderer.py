"""C++ source rendering for the offline help table.

The output is ``src/help_article.cc`` of the desktop client: a
``HelpDatabase`` constructor that fills ``articles_`` with one
``HelpArticle`` per entry, followed by the keyword search used by the
client's help box.  The search body never depends on the article list and is
emitted verbatim once.
"""

from typing import List

from helpgen.models.article import Article
from helpgen.services.search import SEARCH_DELIMITERS

_HEADER = """
// Copyright 2015 Toggl Desktop developers.

// Do not modify contents. Content is generated by running
// update-help-articles

#include "../src/help_article.h"

#include "Poco/StringTokenizer.h"
#include "Poco/UTF8String.h"

namespace toggl {

HelpDatabase::HelpDatabase() {"""

_ARTICLE = """  // NOLINT
    articles_.push_back(  // NOLINT
        HelpArticle(
            "{type}",  // NOLINT
            "{name}",  // NOLINT
            "{url}",  // NOLINT
            "{search_text}"));  // NOLINT"""

# Tokens are trimmed and empty ones dropped, so ", " between keywords does
# not turn into an empty token that matches every article.
_SEARCH = """  // NOLINT
}

std::vector<HelpArticle> HelpDatabase::GetArticles(
    const std::string keywords) {
    std::string lower = Poco::UTF8::toLower(keywords);
    Poco::StringTokenizer tokenizer(lower, "%s",
        Poco::StringTokenizer::TOK_IGNORE_EMPTY
        | Poco::StringTokenizer::TOK_TRIM);
    std::vector<HelpArticle> result;
    for (std::vector<HelpArticle>::const_iterator it = articles_.begin();
            it != articles_.end();
            it++) {
        HelpArticle article = *it;
        for (Poco::StringTokenizer::Iterator sit = tokenizer.begin();
                sit != tokenizer.end();
                ++sit) {
            std::string keyword = *sit;
            if (article.SearchText.find(keyword) != std::string::npos) {
                result.push_back(article);
            }
        }
    }
    return result;
}

}   // namespace toggl
""" % SEARCH_DELIMITERS


def render_source(articles: List[Article]) -> str:
    """Return the complete C++ source embedding *articles* in order."""
    parts = [_HEADER]
    for article in articles:
        parts.append(
            _ARTICLE.format(
                type=escape_cpp(article.type),
                name=escape_cpp(article.name),
                url=escape_cpp(article.url),
                search_text=escape_cpp(article.search_text),
            )
        )
    parts.append(_SEARCH)
    return "\n".join(parts)


def escape_cpp(value: str) -> str:
    """Escape characters that would break a double-quoted C++ string literal."""
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
