import pytest
from portfolio_api.services.ingest.extract import (
    decode_entities,
    extract_categories,
    extract_tag,
    extract_thumbnail,
    unwrap_cdata,
)


def test_extract_tag_basic():
    """Test plain tag extraction"""
    assert extract_tag("<item><title>Hello</title></item>", "title") == "Hello"


def test_extract_tag_missing_returns_empty():
    """Test that a missing tag is an empty string, not an error"""
    assert extract_tag("<item><title>Hello</title></item>", "link") == ""
    assert extract_tag("", "title") == ""


def test_extract_tag_with_attributes_and_multiline():
    """Test attributes on the opening tag and content across lines"""
    xml = '<guid isPermaLink="false">\n  https://medium.com/p/abc\n</guid>'
    assert extract_tag(xml, "guid") == "https://medium.com/p/abc"


def test_extract_tag_case_insensitive():
    """Test case-insensitive tag names"""
    assert extract_tag("<PubDate>Mon, 01 Jan 2024</PubDate>", "pubDate") == "Mon, 01 Jan 2024"


def test_extract_tag_namespaced():
    """Test namespaced tags like dc:creator"""
    assert extract_tag("<dc:creator><![CDATA[Alice]]></dc:creator>", "dc:creator") == "Alice"


def test_extract_tag_does_not_match_prefix():
    """Test that <link> never matches <linkedin>"""
    xml = "<linkedin>nope</linkedin><link>https://example.com</link>"
    assert extract_tag(xml, "link") == "https://example.com"


def test_extract_tag_first_match_wins():
    xml = "<title>First</title><title>Second</title>"
    assert extract_tag(xml, "title") == "First"


def test_unwrap_cdata():
    assert unwrap_cdata("<![CDATA[<p>hi</p>]]>") == "<p>hi</p>"


def test_decode_entities_fixed_set():
    """Test the five supported entities"""
    assert decode_entities("&lt;b&gt; &quot;x&quot; &#39;y&#39; A &amp; B") == "<b> \"x\" 'y' A & B"


def test_decode_entities_no_double_decoding():
    """Test that &amp;lt; decodes to &lt; and not to <"""
    assert decode_entities("&amp;lt;") == "&lt;"


def test_decode_entities_unknown_passthrough():
    """Test that unsupported entities stay literal"""
    assert decode_entities("caf&eacute; &copy;") == "caf&eacute; &copy;"


def test_extract_tag_cdata_before_entities():
    """Test that CDATA is unwrapped and then entities decoded"""
    xml = "<title><![CDATA[A &amp; B]]></title>"
    assert extract_tag(xml, "title") == "A & B"


def test_thumbnail_inline_image_wins():
    """Test that an inline <img> beats media:thumbnail"""
    item = (
        '<description>&lt;img src="X"&gt;</description>'
        '<media:thumbnail url="Y" width="100"/>'
    )
    assert extract_thumbnail(item) == "X"


def test_thumbnail_prefers_content_encoded():
    item = (
        '<description>&lt;img src="from-description"&gt;</description>'
        '<content:encoded><![CDATA[<p><img alt="a" src="from-content"></p>]]></content:encoded>'
    )
    assert extract_thumbnail(item) == "from-content"


def test_thumbnail_skips_empty_src():
    item = '<content:encoded><![CDATA[<img src=""><img src="second.png">]]></content:encoded>'
    assert extract_thumbnail(item) == "second.png"


def test_thumbnail_media_fallback():
    """Test media:thumbnail when there is no inline image"""
    item = '<description>No images here</description><media:thumbnail url="https://img/y.jpg" />'
    assert extract_thumbnail(item) == "https://img/y.jpg"


def test_thumbnail_media_with_closing_tag():
    item = '<media:thumbnail url="https://img/z.jpg"></media:thumbnail>'
    assert extract_thumbnail(item) == "https://img/z.jpg"


def test_thumbnail_absent_is_none():
    assert extract_thumbnail("<title>Only a title</title>") is None


def test_categories_in_order_with_duplicates():
    """Test document order, trimming and no dedupe"""
    item = (
        "<category> python </category>"
        "<category><![CDATA[web]]></category>"
        '<category domain="x">python</category>'
    )
    assert extract_categories(item) == ["python", "web", "python"]


def test_categories_empty():
    assert extract_categories("<title>x</title>") == []
    assert extract_categories("<category>  </category>") == []
