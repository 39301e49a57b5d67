from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field

from portfolio_api.services.ingest.extract import (
    extract_categories,
    extract_tag,
    extract_thumbnail,
)
from portfolio_api.services.ingest.normalize import clean_description

ITEM_RE = re.compile(r"<item(?:\s[^>]*)?>([\s\S]*?)</item>", re.IGNORECASE)
ITEM_START_RE = re.compile(r"<item[\s>]", re.IGNORECASE)


@dataclass
class NormalizedFeedItem:
    """Un artículo del feed, listo para serializar"""
    title: str = ""
    link: str = ""
    published_at: str = ""  # pubDate tal cual viene en el feed
    description: str = ""
    thumbnail: str | None = None
    categories: list[str] = field(default_factory=list)
    author: str = ""
    identifier: str = ""  # guid

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class FeedProfile:
    name: str = ""
    description: str = ""
    link: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


def parse_item(item: str, max_length: int | None = None) -> NormalizedFeedItem:
    # Medium no manda <description>, el cuerpo viene en content:encoded
    description = extract_tag(item, "description") or extract_tag(item, "content:encoded")
    return NormalizedFeedItem(
        title=extract_tag(item, "title"),
        link=extract_tag(item, "link"),
        published_at=extract_tag(item, "pubDate"),
        description=clean_description(description, max_length),
        thumbnail=extract_thumbnail(item),
        categories=extract_categories(item),
        author=extract_tag(item, "dc:creator") or extract_tag(item, "author"),
        identifier=extract_tag(item, "guid"),
    )


def parse_feed_items(xml: str, limit: int, max_length: int | None = None) -> list[NormalizedFeedItem]:
    """
    Normaliza como mucho `limit` items, en el orden del documento.

    Un campo faltante queda vacío; nunca se aborta el lote.
    """
    if not xml or limit <= 0:
        return []
    items = []
    for match in ITEM_RE.finditer(xml):
        if len(items) >= limit:
            break
        items.append(parse_item(match.group(1), max_length))
    return items


def parse_feed_profile(xml: str) -> FeedProfile:
    """Lee title/description/link del <channel>, antes del primer <item>"""
    if not xml:
        return FeedProfile()
    first_item = ITEM_START_RE.search(xml)
    header = xml[: first_item.start()] if first_item else xml
    return FeedProfile(
        name=extract_tag(header, "title"),
        description=extract_tag(header, "description"),
        link=extract_tag(header, "link"),
    )
