"""Selector maps from files and ``name=selector`` pairs."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from extracttext.errors import InvalidInputError


def load_selectors(path: str | Path) -> dict[str, str]:
    """Load a flat name → selector mapping from a YAML or JSON file.

    ``.json`` files are read with :mod:`json`, anything else with
    ``yaml.safe_load`` (JSON is valid YAML anyway).  An empty file gives ``{}``.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            data: Any = json.loads(text) if text.strip() else None
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise InvalidInputError(f"Could not parse selector file {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidInputError(
            f"Selector file {path} must contain a mapping, got {type(data).__name__}",
        )

    selectors: dict[str, str] = {}
    for name, selector in data.items():
        if not isinstance(name, str) or not isinstance(selector, str):
            raise InvalidInputError(
                f"Selector file {path}: entry {name!r} must map a string name "
                "to a string selector",
            )
        selectors[name] = selector
    return selectors


def parse_selector_args(items: Iterable[str]) -> dict[str, str]:
    """Turn ``["title=h1", "links=a[href]"]`` into a mapping.

    Only the first ``=`` splits, so selectors like ``a[href="x"]`` survive.
    """
    selectors: dict[str, str] = {}
    for item in items:
        name, sep, selector = item.partition("=")
        name = name.strip()
        if not sep or not name:
            raise InvalidInputError(f"Expected NAME=SELECTOR, got {item!r}")
        selectors[name] = selector
    return selectors
