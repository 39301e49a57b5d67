# portfolio_api/core/http.py
from __future__ import annotations

from typing import AsyncGenerator

import httpx

from portfolio_api.core.config import settings


DEFAULT_HEADERS = {
    "User-Agent": settings.http_user_agent,
    "Accept": "application/rss+xml, application/xml;q=0.9, text/xml;q=0.8, */*;q=0.5",
}


def build_http_client(**kwargs) -> httpx.AsyncClient:
    # Sin timeout propio: se usa el default de httpx
    return httpx.AsyncClient(
        headers=DEFAULT_HEADERS,
        follow_redirects=True,
        **kwargs,
    )


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    Dependency para FastAPI.
    Uso típico:
        async def endpoint(client: httpx.AsyncClient = Depends(get_http_client)):
            ...
    """
    client = build_http_client()
    try:
        yield client
    finally:
        await client.aclose()
