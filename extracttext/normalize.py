"""Per-element text normalization and the default query step.

Both are extension points.  Pass replacements to
:class:`~extracttext.extractor.HTMLExtractText` as ``process=`` / ``find=``,
or override ``process_element`` / ``extract_texts`` in a subclass::

    def stripped(element):
        return process_element(element).strip()

    ext = HTMLExtractText(process=stripped)

Any callable matching the :class:`ElementProcessor` or :class:`TextFinder`
protocol will do; neither needs to inherit from anything.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from bs4 import BeautifulSoup, Tag
from bs4.element import CData, NavigableString, Script, Stylesheet, TemplateString
from soupsieve import SelectorSyntaxError

logger = logging.getLogger(__name__)

# Every string type that counts as inner text, script and style bodies included.
_TEXT_TYPES = (NavigableString, CData, Script, Stylesheet, TemplateString)

# ---------------------------------------------------------------------------
# Protocol definitions
# ---------------------------------------------------------------------------

@runtime_checkable
class ElementProcessor(Protocol):
    """Turns one matched element into its representative text."""

    def __call__(self, element: Tag) -> str:
        ...


@runtime_checkable
class TextFinder(Protocol):
    """Runs one selector against the parsed document.

    Returns the normalized text of every match, in document order.  Raising
    is allowed; the extractor records the message against the selector name.
    """

    def __call__(
        self, soup: BeautifulSoup, selector: str, process: ElementProcessor,
    ) -> list[str]:
        ...


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

def _attr(element: Tag, name: str) -> str:
    """Attribute value as a string, ``""`` when missing."""
    val: Any = element.get(name)
    if val is None:
        return ""
    if isinstance(val, list):
        return " ".join(str(v) for v in val)
    return str(val)


def process_element(element: Tag) -> str:
    """Default normalization policy.

    Images (``<img>`` and ``<input type="image">``) give their ``alt`` text,
    other form inputs give their ``value``, everything else gives its full
    inner text (``<script>``, ``<style>`` and ``<template>`` contents too).
    """
    tag = element.name
    if tag == "img" or (tag == "input" and _attr(element, "type") == "image"):
        return _attr(element, "alt")
    if tag == "input":
        return _attr(element, "value")
    return element.get_text(types=_TEXT_TYPES)


def find_texts(
    soup: BeautifulSoup, selector: str, process: ElementProcessor,
) -> list[str]:
    """Default query step: CSS-select, then normalize each match.

    A selector soupsieve cannot parse matches nothing, so it is reported as
    ``NOT FOUND`` when ``ignore_not_found`` is off.  Any other failure
    propagates.
    """
    try:
        elements = soup.select(selector)
    except SelectorSyntaxError as exc:
        logger.debug("Unparseable selector %r matches nothing: %s", selector, exc)
        return []
    return [process(el) for el in elements]
