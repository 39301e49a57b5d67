from __future__ import annotations

from urllib.parse import quote

import httpx

from portfolio_api.core.config import settings
from portfolio_api.core.http import build_http_client
from portfolio_api.core.logging import get_logger
from portfolio_api.services.ingest.rss import (
    FeedProfile,
    NormalizedFeedItem,
    parse_feed_items,
    parse_feed_profile,
)

logger = get_logger()


class FetchFailure(Exception):
    """El feed no se pudo obtener (status no-2xx o error de transporte)"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def feed_url_for(username: str) -> str:
    return settings.medium_feed_url.format(username=quote(username, safe=""))


async def fetch_feed_document(client: httpx.AsyncClient, username: str, max_age: int) -> str:
    """
    Un solo GET al feed del usuario, sin reintentos.

    `max_age` se declara como ventana de frescura en Cache-Control.
    """
    url = feed_url_for(username)
    try:
        response = await client.get(url, headers={"Cache-Control": f"max-age={max_age}"})
    except httpx.HTTPError as e:
        logger.warning("medium_feed_fetch_failed", username=username, url=url, error=str(e))
        raise FetchFailure(f"Failed to fetch RSS feed: {e}") from e

    if not response.is_success:
        reason = response.reason_phrase or str(response.status_code)
        logger.warning(
            "medium_feed_fetch_failed",
            username=username,
            url=url,
            status_code=response.status_code,
        )
        raise FetchFailure(f"Failed to fetch RSS feed: {reason}", status_code=response.status_code)

    return response.text


async def fetch_medium_articles(
    username: str,
    limit: int | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[NormalizedFeedItem]:
    if limit is None:
        limit = settings.feed_default_limit

    if client is None:
        async with build_http_client() as own_client:
            xml = await fetch_feed_document(own_client, username, settings.feed_articles_max_age)
    else:
        xml = await fetch_feed_document(client, username, settings.feed_articles_max_age)

    articles = parse_feed_items(xml, limit)
    logger.info("medium_feed_fetched", username=username, limit=limit, articles=len(articles))
    return articles


async def fetch_medium_profile(
    username: str,
    client: httpx.AsyncClient | None = None,
) -> FeedProfile:
    if client is None:
        async with build_http_client() as own_client:
            xml = await fetch_feed_document(own_client, username, settings.feed_profile_max_age)
    else:
        xml = await fetch_feed_document(client, username, settings.feed_profile_max_age)

    return parse_feed_profile(xml)
