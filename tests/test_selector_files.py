"""Tests for extracttext.selector_files."""

from __future__ import annotations

import pytest

from extracttext import InvalidInputError, load_selectors, parse_selector_args


class TestLoadSelectors:
    def test_yaml(self, tmp_path):
        path = tmp_path / "sel.yaml"
        path.write_text('title: title\nlinks: "a[href]"\n', encoding="utf-8")
        assert load_selectors(path) == {"title": "title", "links": "a[href]"}

    def test_json(self, tmp_path):
        path = tmp_path / "sel.json"
        path.write_text('{"title": "title", "tags": "ul.tags li"}', encoding="utf-8")
        assert load_selectors(str(path)) == {"title": "title", "tags": "ul.tags li"}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "sel.yml"
        path.write_text("", encoding="utf-8")
        assert load_selectors(path) == {}

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "sel.yaml"
        path.write_text("- title\n- h1\n", encoding="utf-8")
        with pytest.raises(InvalidInputError, match="must contain a mapping"):
            load_selectors(path)

    def test_non_string_selector(self, tmp_path):
        path = tmp_path / "sel.yaml"
        path.write_text("title: 5\n", encoding="utf-8")
        with pytest.raises(InvalidInputError, match="title"):
            load_selectors(path)

    def test_broken_json(self, tmp_path):
        path = tmp_path / "sel.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(InvalidInputError, match="Could not parse"):
            load_selectors(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_selectors(tmp_path / "nope.yaml")


class TestParseSelectorArgs:
    def test_pairs(self):
        assert parse_selector_args(["title=title", "h=h1"]) == {"title": "title", "h": "h1"}

    def test_splits_on_first_equals(self):
        assert parse_selector_args(['link=a[href="?x=1"]']) == {"link": 'a[href="?x=1"]'}

    def test_missing_equals(self):
        with pytest.raises(InvalidInputError, match="NAME=SELECTOR"):
            parse_selector_args(["title"])

    def test_empty_name(self):
        with pytest.raises(InvalidInputError):
            parse_selector_args(["=h1"])
