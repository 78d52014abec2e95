"""extracttext.extractor — Batch text extraction with CSS selectors.

Usage::

    from extracttext import HTMLExtractText

    ext = HTMLExtractText()
    results = ext.extract({"title": "title", "links": "a[href]"}, html)
    if results is None:
        raise SystemExit(f"Extraction error: {ext.error()}")
    print(results["title"])

    # Push the values into setter methods instead
    class Page:
        def title(self, value): self._title = value
        def links(self, value): self._links = value

    page = Page()
    ext.extract({"title": "title", "links": "a[href]"}, html, page)

The selector mapping is modified in place: each selector string is replaced
by the text it matched (or by an ``"ERROR: ..."`` marker).  The same mapping
object is returned and kept as :meth:`HTMLExtractText.last_results`.
"""

from __future__ import annotations

import inspect
import logging
import numbers
from collections.abc import Mapping, MutableMapping, Set
from typing import Any

from bs4 import BeautifulSoup, Tag

from extracttext.errors import (
    ExtractTextError,
    InvalidInputError,
    InvalidTargetError,
    MissingCapabilityError,
    SelectorNotFoundError,
    SelectorQueryError,
)
from extracttext.normalize import ElementProcessor, TextFinder, find_texts
from extracttext.normalize import process_element as _default_process
from extracttext.options import build_options, set_option

logger = logging.getLogger(__name__)

ResultValue = str | list[str]

# Values of these types are data, not objects with setter methods.
_PLAIN_TYPES: tuple[type, ...] = (
    str, bytes, bytearray, numbers.Number, Mapping, list, tuple, Set,
)


def _accepts_one_arg(func: Any) -> bool:
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        # uninspectable builtins are accepted
        return True
    try:
        sig.bind(None)
    except TypeError:
        return False
    return True


def _message(exc: BaseException) -> str:
    return str(exc).rstrip("\n") or type(exc).__name__


class HTMLExtractText:
    """Extract several named text fragments from HTML in one pass.

    Args:
        process:           Per-element normalization strategy (see
                           :class:`~extracttext.normalize.ElementProcessor`).
                           Defaults to
                           :func:`~extracttext.normalize.process_element`.
        find:              Query step (see
                           :class:`~extracttext.normalize.TextFinder`).
                           Defaults to :func:`~extracttext.normalize.find_texts`.
        separator:         String used to join the texts of multiple matches
                           (default ``"\\n"``).  ``None`` returns lists, even
                           for a single match.
        ignore_not_found:  If ``True`` (default), a selector matching nothing
                           yields ``""`` (or ``[]``).  If ``False`` it is an
                           error for that name.

    Raises:
        :class:`~extracttext.errors.InvalidOptionError`: On any option other
            than ``separator`` / ``ignore_not_found``, or a badly typed one.

    Instances keep the last error and last results between calls, so one
    instance must not be shared between threads without a lock.
    """

    def __init__(
        self,
        *,
        process: ElementProcessor | None = None,
        find: TextFinder | None = None,
        **options: Any,
    ) -> None:
        self._options = build_options(**options)
        self._process: ElementProcessor = process or _default_process
        self._find: TextFinder = find or find_texts
        self._error: str | None = None
        self._last_results: MutableMapping[str, Any] | None = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(separator={self.separator!r}, "
            f"ignore_not_found={self.ignore_not_found!r})"
        )

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    @property
    def separator(self) -> str | None:
        return self._options.separator

    @separator.setter
    def separator(self, value: str | None) -> None:
        set_option(self._options, "separator", value)

    @property
    def ignore_not_found(self) -> bool:
        return self._options.ignore_not_found

    @ignore_not_found.setter
    def ignore_not_found(self, value: bool) -> None:
        set_option(self._options, "ignore_not_found", value)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def error(self) -> str | None:
        """Error message from the last :meth:`extract` call, or ``None``.

        When several selectors fail only the last one (in sorted name order)
        is reported here; every failure is visible in :meth:`last_results`
        as a value starting with ``"ERROR: "``.
        """
        return self._error

    def last_results(self) -> MutableMapping[str, Any] | None:
        """The mapping the last :meth:`extract` call filled in, partial or not."""
        return self._last_results

    # ------------------------------------------------------------------
    # Extension points
    # ------------------------------------------------------------------

    def process_element(self, element: Tag) -> str:
        """Normalize one matched element to text."""
        return self._process(element)

    def extract_texts(self, soup: BeautifulSoup, name: str, selector: str) -> list[str]:
        """Return the normalized texts matched by *selector* for *name*."""
        return self._find(soup, selector, self.process_element)

    # ------------------------------------------------------------------
    # Public methods
    # ------------------------------------------------------------------

    def extract(
        self,
        selectors: MutableMapping[str, Any],
        html: str | bytes,
        target: Any = None,
    ) -> MutableMapping[str, Any] | None:
        """Run every selector in *selectors* against *html*.

        Args:
            selectors: Mapping of name → CSS selector.  Modified in place:
                       each selector is replaced by its result.
            html:      HTML document to search.
            target:    Optional object; after extraction ``target.<name>(value)``
                       is called for every name.

        Returns:
            *selectors* itself when every selector succeeded, otherwise
            ``None``.  On ``None`` check :meth:`error` for a summary and
            :meth:`last_results` for what did get extracted.
        """
        self._error = None
        self._last_results = None

        try:
            self._validate(selectors, html, target)
        except InvalidInputError as exc:
            logger.debug("extract() rejected its arguments: %s", exc)
            self._error = str(exc)
            return None

        soup = BeautifulSoup(html, "lxml")

        failed = 0
        for name in sorted(selectors):
            try:
                value = self._extract_one(soup, name, selectors[name])
            except ExtractTextError as exc:
                message = _message(exc)
                logger.debug("Selector %r (%r) failed: %s", name, selectors[name], message)
                self._error = f"ERROR: [{name}]: {message}"
                value = f"ERROR: {message}"
                failed += 1
            selectors[name] = value

        if target is not None:
            for name in sorted(selectors):
                getattr(target, name)(selectors[name])

        self._last_results = selectors
        logger.debug("Extracted %d selector(s), %d failed", len(selectors), failed)

        if failed:
            return None
        return selectors

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _validate(self, selectors: Any, html: Any, target: Any) -> None:
        if not isinstance(selectors, MutableMapping):
            raise InvalidInputError("First argument to extract() must be a mapping")
        for name in selectors:
            if not isinstance(name, str):
                raise InvalidInputError(
                    f"Selector names must be strings, got {type(name).__name__} {name!r}",
                )

        if html is None:
            raise InvalidInputError("Second argument to extract() is None, expected HTML")
        if not isinstance(html, (str, bytes)):
            raise InvalidInputError(
                f"Second argument to extract() must be HTML text, got {type(html).__name__}",
            )

        if target is None:
            return
        if isinstance(target, _PLAIN_TYPES):
            raise InvalidTargetError("Third argument must be an object")
        for name in selectors:
            method = getattr(target, name, None)
            if not callable(method) or not _accepts_one_arg(method):
                raise MissingCapabilityError(name)

    def _extract_one(self, soup: BeautifulSoup, name: str, selector: Any) -> ResultValue:
        try:
            texts = list(self.extract_texts(soup, name, selector))
            if not texts and not self.ignore_not_found:
                raise SelectorNotFoundError(name)

            sep = self.separator
            if sep is not None:
                return sep.join(texts)
            return texts
        except ExtractTextError:
            raise
        except Exception as exc:
            raise SelectorQueryError(name, _message(exc)) from exc
