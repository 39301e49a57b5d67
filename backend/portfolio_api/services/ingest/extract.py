from __future__ import annotations

import re
from functools import lru_cache

from bs4 import BeautifulSoup

# Parsing por regex: suficiente para el formato RSS de Medium.
# Todo el acceso a tags pasa por este módulo.

CDATA_RE = re.compile(r"<!\[CDATA\[([\s\S]*?)\]\]>")
CATEGORY_RE = re.compile(r"<category(?:\s[^>]*)?>([\s\S]*?)</category>", re.IGNORECASE)
MEDIA_THUMBNAIL_RE = re.compile(r"<media:thumbnail\b[^>]*?\burl=\"([^\"]+)\"", re.IGNORECASE)

# El orden importa: &amp; va después de &lt;/&gt; para no decodificar dos veces
ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


@lru_cache(maxsize=64)
def _tag_pattern(tag_name: str) -> re.Pattern[str]:
    name = re.escape(tag_name)
    return re.compile(rf"<{name}(?:\s[^>]*)?>([\s\S]*?)</{name}>", re.IGNORECASE)


def unwrap_cdata(text: str) -> str:
    return CDATA_RE.sub(r"\1", text)


def decode_entities(text: str) -> str:
    """
    Decodifica solo &lt; &gt; &amp; &quot; &#39;.
    Cualquier otra entidad queda literal.
    """
    for entity, char in ENTITIES:
        text = text.replace(entity, char)
    return text


def extract_tag(xml: str, tag_name: str) -> str:
    """
    Devuelve el texto interno del primer <tag_name ...>...</tag_name>.

    Acepta atributos en el tag de apertura y contenido multilínea.
    Si el tag no existe devuelve "" (no es un error).
    """
    if not xml:
        return ""
    match = _tag_pattern(tag_name).search(xml)
    if not match or not match.group(1):
        return ""
    content = unwrap_cdata(match.group(1)).strip()
    return decode_entities(content)


def _first_img_src(html: str) -> str | None:
    if not html:
        return None
    soup = BeautifulSoup(html, "lxml")
    for img in soup.find_all("img"):
        src = (img.get("src") or "").strip()
        if src:
            return src
    return None


def extract_thumbnail(item: str) -> str | None:
    """
    Busca la imagen del item en este orden:
    1) primer <img src> en content:encoded (o description si no hay)
    2) atributo url de <media:thumbnail>
    3) None
    """
    content = extract_tag(item, "content:encoded") or extract_tag(item, "description")
    src = _first_img_src(content)
    if src:
        return src

    match = MEDIA_THUMBNAIL_RE.search(item)
    if match:
        return decode_entities(match.group(1))

    return None


def extract_categories(item: str) -> list[str]:
    categories = []
    for raw in CATEGORY_RE.findall(item):
        label = decode_entities(unwrap_cdata(raw).strip())
        if label:
            categories.append(label)
    return categories
