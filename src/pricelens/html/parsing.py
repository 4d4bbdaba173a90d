"""HTML parsing helpers built on lxml.

Python 3.13+.
"""

from __future__ import annotations

import lxml.html

__all__ = ["parse_html", "to_html"]


def parse_html(markup: str) -> lxml.html.HtmlElement:
    """Parse a full document with lxml's recovering HTML parser.

    Third-party pages are routinely malformed; the recovering parser never
    rejects them.

    Raises:
        lxml.etree.ParserError: If ``markup`` is empty or yields no document
    """
    parser = lxml.html.HTMLParser(recover=True, encoding="utf-8")
    return lxml.html.document_fromstring(markup.encode("utf-8"), parser=parser)


def to_html(element: lxml.html.HtmlElement) -> str:
    """Serialize an element (and its subtree) back to markup."""
    return lxml.html.tostring(element, encoding="unicode")
