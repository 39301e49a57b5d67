from __future__ import annotations

import re

from portfolio_api.core.config import settings
from portfolio_api.services.ingest.extract import decode_entities

TAG_RE = re.compile(r"<[^>]*>")
WHITESPACE_RE = re.compile(r"\s+")

ELLIPSIS = "..."


def clean_description(text: str, max_length: int | None = None) -> str:
    """
    Quita el markup, decodifica entidades y trunca a max_length.

    Solo se agrega "..." si hubo truncado, así que el resultado
    mide como mucho max_length + 3.
    """
    if not text:
        return ""
    if max_length is None:
        max_length = settings.feed_description_max_length

    cleaned = TAG_RE.sub("", text)
    cleaned = decode_entities(cleaned.replace("&nbsp;", " "))
    # las entidades pueden traer markup codificado (&lt;b&gt;)
    cleaned = TAG_RE.sub("", cleaned)
    cleaned = WHITESPACE_RE.sub(" ", cleaned).strip()

    if len(cleaned) > max_length:
        # sin strip del prefijo: clean(clean(x)) == clean(x)
        cleaned = cleaned[:max_length] + ELLIPSIS
    return cleaned
