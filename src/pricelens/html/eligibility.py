"""Scanning-eligibility predicate.

An element is skipped, together with its whole subtree, when it or any
ancestor:
- is a non-rendering or form-control container (script, style, noscript,
  iframe, textarea, input, select, ...)
- is hidden (``hidden`` attribute, inline ``display: none`` or
  ``visibility: hidden``)
- already carries the detected marker
- is user-editable (``contenteditable``)

The predicate reads the element's attributes at call time, so a scan always
sees the current state of the tree. It is the single place the detected
marker is checked: re-scanning a marked subtree is a no-op.

Python 3.13+.
"""

from __future__ import annotations

import re

import lxml.html

from pricelens.constants import MARKER_DETECTED_ATTR

__all__ = ["SKIP_TAGS", "is_hidden", "should_skip", "skips_self"]

SKIP_TAGS: frozenset[str] = frozenset({
    # Non-rendering
    "script", "style", "noscript", "template",
    # Embedded documents
    "iframe", "frame", "object", "embed",
    # Form controls
    "textarea", "input", "select", "option",
})

_HIDDEN_STYLE = re.compile(
    r"(?:^|;)\s*(?:display\s*:\s*none|visibility\s*:\s*(?:hidden|collapse))\s*(?:!important\s*)?(?:;|$)",
    re.IGNORECASE,
)

_EDITABLE_VALUES = frozenset({"", "true", "plaintext-only"})


def is_hidden(element: lxml.html.HtmlElement) -> bool:
    """Check the element's own hiding attributes (ancestors not considered)."""
    if element.get("hidden") is not None:
        return True
    style = element.get("style")
    return bool(style) and _HIDDEN_STYLE.search(style) is not None


def skips_self(element: lxml.html.HtmlElement) -> bool:
    """Check only ``element`` itself against every skip rule."""
    tag = element.tag
    if not isinstance(tag, str):
        # Comments and processing instructions
        return True
    if tag.lower() in SKIP_TAGS:
        return True
    if element.get(MARKER_DETECTED_ATTR) is not None:
        return True
    editable = element.get("contenteditable")
    if editable is not None and editable.strip().lower() in _EDITABLE_VALUES:
        return True
    return is_hidden(element)


def should_skip(element: lxml.html.HtmlElement | None) -> bool:
    """Return True if ``element`` must not be scanned.

    Missing elements are skipped. Ancestors are consulted because hiding,
    editability and the detected marker all apply to a whole subtree.
    """
    if element is None:
        return True
    if skips_self(element):
        return True
    return any(skips_self(ancestor) for ancestor in element.iterancestors())
