"""Extractor configuration, validated with pydantic."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from extracttext.errors import InvalidOptionError

DEFAULT_SEPARATOR = "\n"


class ExtractOptions(BaseModel):
    """The two knobs an :class:`~extracttext.extractor.HTMLExtractText` has.

    ``separator`` joins the texts of multiple matches; ``None`` keeps them as
    a list instead.  ``ignore_not_found`` decides whether a selector that
    matches nothing is an error.
    """

    separator: str | None = DEFAULT_SEPARATOR
    ignore_not_found: bool = True

    model_config = {"extra": "forbid", "validate_assignment": True}


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "options"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "Invalid extractor option(s): " + "; ".join(parts)


def build_options(**kwargs: Any) -> ExtractOptions:
    """Build :class:`ExtractOptions`, raising :class:`InvalidOptionError` on bad input."""
    try:
        return ExtractOptions(**kwargs)
    except ValidationError as exc:
        raise InvalidOptionError(_describe(exc)) from exc


def set_option(options: ExtractOptions, name: str, value: Any) -> None:
    """Assign one option in place, with the same validation as construction."""
    try:
        setattr(options, name, value)
    except ValidationError as exc:
        raise InvalidOptionError(_describe(exc)) from exc
