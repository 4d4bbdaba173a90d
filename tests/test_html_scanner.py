"""Tests for the document traversal driver."""

from decimal import Decimal

import lxml.html

from pricelens.html import parse_html, read_marker, scan_document, to_html
from pricelens.providers import Settings

_MARKERS = "//*[@data-price-detected='true']"


def _marked(root: lxml.html.HtmlElement) -> list[tuple[Decimal, str] | None]:
    return [read_marker(el) for el in root.xpath(_MARKERS)]


class TestScanDocument:
    """Test full document passes."""

    def test_text_prices_wrapped(self, html) -> None:
        """Prices in text become marker spans, surrounding text kept."""
        body = html("<p>Was ₹999, now <b>only</b> ₹499!</p>")
        report = scan_document(body)
        assert report.text_prices == 2
        assert report.text_runs == 2
        assert _marked(body) == [(Decimal(999), "INR"), (Decimal(499), "INR")]
        assert body.find("p").text_content() == "Was ₹999, now only ₹499!"

    def test_marker_positions(self, html) -> None:
        """Markers replace the price text where it stood."""
        body = html("<p>A $5 B $6 C</p>")
        scan_document(body)
        p = body.find("p")
        assert p.text == "A "
        first, second = p.findall("span")
        assert (first.text, first.tail) == ("$5", " B ")
        assert (second.text, second.tail) == ("$6", " C")

    def test_tail_text(self, html) -> None:
        """Text after a child element is scanned as its own run."""
        body = html("<p><i>Sale</i> price €20 today</p>")
        scan_document(body)
        p = body.find("p")
        assert p.find("i").tail == " price "
        marker = p.findall("span")[0]
        assert read_marker(marker) == (Decimal(20), "EUR")
        assert marker.tail == " today"

    def test_skipped_regions(self, html) -> None:
        """Scripts, hidden and editable regions are untouched."""
        markup = (
            "<script>var p = '$5';</script>"
            '<div hidden>$6</div>'
            '<div contenteditable="">$7</div>'
            "<textarea>$8</textarea>"
            "<p>$9</p>"
        )
        body = html(markup)
        scan_document(body)
        assert _marked(body) == [(Decimal(9), "USD")]

    def test_idempotent(self, html) -> None:
        """Scanning twice gives the same markup as scanning once."""
        body = html('<p>₹100 and $5</p><span class="price">€7</span>')
        first = scan_document(body)
        once = to_html(body)
        second = scan_document(body)
        assert first.total == 3
        assert second.total == 0
        assert to_html(body) == once

    def test_structured_before_text(self, html) -> None:
        """Structured containers are tagged whole; their text is not rescanned."""
        body = html('<div class="price">€15</div>')
        report = scan_document(body)
        assert report.structured_elements == 1
        assert report.text_prices == 0
        assert body.find("div").find("span") is None

    def test_subtree_scan(self, html) -> None:
        """Scanning a newly inserted subtree touches only that subtree."""
        body = html("<p>$1</p><div id='new'><p>$2</p></div>")
        scan_document(body.get_element_by_id("new"))
        assert _marked(body) == [(Decimal(2), "USD")]

    def test_marked_subtree_root(self, html) -> None:
        """A subtree whose root is already a marker is skipped entirely."""
        body = html('<span data-price-detected="true">$3 and $4</span>')
        assert scan_document(body.find("span")).total == 0

    def test_disabled_settings(self, html) -> None:
        """Disabled settings make the pass a no-op."""
        body = html("<p>$5</p>")
        report = scan_document(body, settings=Settings(enabled=False))
        assert report.total == 0
        assert _marked(body) == []

    def test_negative_left_alone(self, html) -> None:
        """A minus-led amount is not wrapped."""
        body = html("<p>Refund: -$50</p>")
        assert scan_document(body).total == 0


class TestParseHtml:
    """Test the recovering HTML parser helpers."""

    def test_broken_markup(self) -> None:
        """Unclosed tags are recovered and scannable."""
        root = parse_html("<html><body><p>Price ₹250<p>Tax $3")
        report = scan_document(root)
        assert report.text_prices == 2
        assert "currency-converter-price" in to_html(root)

    def test_unicode_round_trip(self) -> None:
        """Non-ASCII text survives parsing and serialization."""
        root = parse_html("<p>₹ – € – £</p>")
        assert "₹ – € – £" in to_html(root)
