import pytest

CHANNEL_HEADER = """<?xml version="1.0" encoding="UTF-8"?>
<rss xmlns:dc="http://purl.org/dc/elements/1.1/" xmlns:content="http://purl.org/rss/1.0/modules/content/" xmlns:atom="http://www.w3.org/2005/Atom" version="2.0">
<channel>
<title><![CDATA[Stories by Alice on Medium]]></title>
<description><![CDATA[Stories by Alice on Medium]]></description>
<link>https://medium.com/@alice?source=rss-alice</link>
<atom:link href="https://medium.com/feed/@alice" rel="self" type="application/rss+xml"/>
"""

CHANNEL_FOOTER = """</channel>
</rss>
"""


def make_item(n: int) -> str:
    return f"""<item>
<title><![CDATA[Post {n}]]></title>
<link>https://medium.com/@alice/post-{n}</link>
<guid isPermaLink="false">https://medium.com/p/{n}</guid>
<category><![CDATA[python]]></category>
<category><![CDATA[web]]></category>
<dc:creator><![CDATA[Alice]]></dc:creator>
<pubDate>Mon, 0{n} Jan 2024 12:00:00 GMT</pubDate>
<content:encoded><![CDATA[<figure><img alt="" src="https://cdn-images-1.medium.com/{n}.png" /></figure><p>Body of post {n}.</p>]]></content:encoded>
</item>
"""


def make_feed(count: int) -> str:
    return CHANNEL_HEADER + "".join(make_item(n) for n in range(1, count + 1)) + CHANNEL_FOOTER


@pytest.fixture
def feed_factory():
    return make_feed
