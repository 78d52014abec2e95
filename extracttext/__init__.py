"""extracttext - pull several named text fragments out of HTML with CSS selectors.

Quick usage::

    from extracttext import HTMLExtractText

    ext = HTMLExtractText()
    if ext.extract({"title": "title"}, html) is None:
        raise SystemExit(f"Error: {ext.error()}")
    print(ext.last_results()["title"])

Options::

    HTMLExtractText(separator=" | ")       # join multiple matches with " | "
    HTMLExtractText(separator=None)        # keep every match, as a list
    HTMLExtractText(ignore_not_found=False)  # empty matches are errors

Custom normalization::

    from extracttext import HTMLExtractText, process_element

    ext = HTMLExtractText(process=lambda el: process_element(el).strip())
"""

from extracttext.errors import (
    ExtractTextError,
    InvalidInputError,
    InvalidOptionError,
    InvalidTargetError,
    MissingCapabilityError,
    SelectorNotFoundError,
    SelectorQueryError,
)
from extracttext.extractor import HTMLExtractText
from extracttext.normalize import ElementProcessor, TextFinder, find_texts, process_element
from extracttext.options import ExtractOptions
from extracttext.selector_files import load_selectors, parse_selector_args

__version__ = "0.1.0"
__all__ = [
    "ElementProcessor",
    "ExtractOptions",
    "ExtractTextError",
    "HTMLExtractText",
    "InvalidInputError",
    "InvalidOptionError",
    "InvalidTargetError",
    "MissingCapabilityError",
    "SelectorNotFoundError",
    "SelectorQueryError",
    "TextFinder",
    "find_texts",
    "load_selectors",
    "parse_selector_args",
    "process_element",
]
