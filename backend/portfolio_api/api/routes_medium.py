from __future__ import annotations

import sys

import httpx
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from portfolio_api.core.config import settings
from portfolio_api.core.http import get_http_client
from portfolio_api.core.logging import get_logger
from portfolio_api.services.ingest.fetcher import fetch_medium_articles, fetch_medium_profile
from portfolio_api.services.ingest.listing import filter_articles

router = APIRouter()
logger = get_logger()

USERNAME_REQUIRED = {"error": "Username is required"}


def parse_limit(raw: str | None) -> int:
    """
    Limit no numérico, vacío o negativo -> default (10).
    "0" es válido; valores enormes se acotan a sys.maxsize.
    """
    default = settings.feed_default_limit
    if raw is None:
        return default
    raw = raw.strip()
    if not raw.isdecimal():
        return default
    if len(raw) > len(str(sys.maxsize)):
        return sys.maxsize
    return min(int(raw), sys.maxsize)


def cache_control(max_age: int) -> str:
    return (
        f"public, max-age={max_age}, "
        f"stale-while-revalidate={settings.feed_stale_while_revalidate}"
    )


def _error_message(exc: Exception, fallback: str) -> str:
    return str(exc) or fallback


@router.get("")
async def list_medium_articles(
    username: str | None = Query(None),
    limit: str | None = Query(None),
    q: str | None = Query(None),
    tag: str | None = Query(None),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Artículos del feed RSS de Medium de `username`, normalizados
    """
    if not username or not username.strip():
        return JSONResponse(status_code=400, content=USERNAME_REQUIRED)

    username = username.strip()
    try:
        articles = await fetch_medium_articles(username, parse_limit(limit), client=client)
        articles = filter_articles(articles, query=q, tag=tag)
    except Exception as e:
        logger.error("medium_articles_failed", username=username, error=str(e), exc_info=e)
        return JSONResponse(
            status_code=500,
            content={
                "error": _error_message(e, "Failed to fetch articles"),
                "articles": [],
            },
        )

    return JSONResponse(
        content={"articles": [a.to_dict() for a in articles]},
        headers={"Cache-Control": cache_control(settings.feed_articles_max_age)},
    )


@router.get("/profile")
async def get_medium_profile(
    username: str | None = Query(None),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    if not username or not username.strip():
        return JSONResponse(status_code=400, content=USERNAME_REQUIRED)

    username = username.strip()
    try:
        profile = await fetch_medium_profile(username, client=client)
    except Exception as e:
        logger.error("medium_profile_failed", username=username, error=str(e), exc_info=e)
        return JSONResponse(
            status_code=500,
            content={
                "error": _error_message(e, "Failed to fetch profile"),
                "profile": None,
            },
        )

    return JSONResponse(
        content={"profile": profile.to_dict()},
        headers={"Cache-Control": cache_control(settings.feed_profile_max_age)},
    )
