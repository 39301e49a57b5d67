from __future__ import annotations

from portfolio_api.services.ingest.rss import NormalizedFeedItem


def _matches_query(article: NormalizedFeedItem, query: str) -> bool:
    return (
        query in article.title.lower()
        or query in article.description.lower()
        or any(query in c.lower() for c in article.categories)
    )


def filter_articles(
    articles: list[NormalizedFeedItem],
    query: str | None = None,
    tag: str | None = None,
) -> list[NormalizedFeedItem]:
    """
    Filtra por texto libre (title, description, categorías) y por tag exacto.
    No reordena.
    """
    q = (query or "").strip().lower()
    if q:
        articles = [a for a in articles if _matches_query(a, q)]
    if tag:
        articles = [a for a in articles if tag in a.categories]
    return articles
