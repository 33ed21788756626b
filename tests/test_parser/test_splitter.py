"""Tests for splitting CSS text into the base region and media blocks."""

import re

import pytest

from cssdedupe.parser import BaseRegionNotFoundError, ParseError
from cssdedupe.parser import splitter
from cssdedupe.parser.splitter import split_stylesheet


class TestBaseRegion:
    def test_no_media_whole_text_is_base(self):
        css = ".a { color: red; }\n.b { margin: 0; }\n"
        result = split_stylesheet(css)
        assert result.base == css
        assert result.media_blocks == []
        assert result.warnings == []

    def test_base_stops_at_first_media(self):
        css = ".a { color: red; }\n@media (x) { .a { color: blue; } }"
        result = split_stylesheet(css)
        assert result.base == ".a { color: red; }\n"

    def test_empty_input(self):
        result = split_stylesheet("")
        assert result.base == ""
        assert result.media_blocks == []

    def test_missing_base_region_raises(self, monkeypatch):
        monkeypatch.setattr(splitter, "_BASE_REGION_RE", re.compile(r"(?!)"))
        with pytest.raises(BaseRegionNotFoundError, match="No match found"):
            split_stylesheet(".a { color: red; }")

    def test_base_region_error_is_parse_error(self):
        assert issubclass(BaseRegionNotFoundError, ParseError)


class TestMediaBlocks:
    def test_header_is_verbatim(self):
        css = "@media (max-width: 600px) { .a { color: red; } }"
        block = split_stylesheet(css).media_blocks[0]
        assert block.header == "@media (max-width: 600px) "

    def test_block_spans_all_inner_rules(self):
        css = "@media (x) {\n  .a { color: red; }\n  .b { margin: 0; }\n}\n"
        result = split_stylesheet(css)
        assert len(result.media_blocks) == 1
        body = result.media_blocks[0].body
        assert ".a { color: red; }" in body
        assert ".b { margin: 0; }" in body
        assert result.warnings == []

    def test_multiple_blocks_in_order(self):
        css = (
            ".a { color: red; }\n"
            "@media (min-width: 600px) { .a { color: blue; } }\n"
            "@media (min-width: 900px) { .a { color: green; } }\n"
        )
        headers = [b.header.strip() for b in split_stylesheet(css).media_blocks]
        assert headers == ["@media (min-width: 600px)", "@media (min-width: 900px)"]

    def test_empty_media_block(self):
        result = split_stylesheet("@media (x){\n\n}")
        assert len(result.media_blocks) == 1
        assert result.media_blocks[0].body == "\n\n"

    def test_text_after_media_is_reported(self):
        css = "@media (x) { .a { color: red; } }\n.late { color: blue; }\n"
        result = split_stylesheet(css)
        assert len(result.media_blocks) == 1
        assert [w.code for w in result.warnings] == ["ignored-text"]
        assert result.warnings[0].fragment == ".late { color: blue; }"

    def test_unbalanced_media_is_reported(self):
        css = "@media (x) { .a { color: red; }\n"
        result = split_stylesheet(css)
        assert result.media_blocks == []
        assert [w.code for w in result.warnings] == ["unmatched-media"]

    def test_nested_media_is_reported_and_next_block_kept(self):
        css = (
            "@media (x) { @supports (y) { .a { color: red; } } }\n"
            "@media (z) { .b { color: blue; } }"
        )
        result = split_stylesheet(css)
        assert [b.header.strip() for b in result.media_blocks] == ["@media (z)"]
        assert result.warnings[0].code == "unmatched-media"
