"""Tests for building the stylesheet model from CSS text."""

from cssdedupe.parser import parse_stylesheet


class TestBaseRules:
    def test_base_only(self):
        result = parse_stylesheet(".a{color:red;font-size:12px}\n#nav { display: flex; }\n")
        model = result.model
        assert model.context_keys == ("base",)
        assert model.selectors("base") == [".a", "#nav"]
        assert model.declarations("base", "#nav") == {"display": "flex"}
        assert result.warnings == []

    def test_universal_selector(self):
        model = parse_stylesheet("* { box-sizing: border-box; }").model
        assert model.declarations("base", "*") == {"box-sizing": "border-box"}

    def test_empty_source(self):
        result = parse_stylesheet("")
        assert result.model.context_keys == ("base",)
        assert result.model.selectors("base") == []


class TestMediaContexts:
    CSS = (
        ".a { color: red; }\n"
        "@media (min-width: 600px) {\n"
        "  .a { color: blue; }\n"
        "  .b { margin: 0; }\n"
        "}\n"
        "@media (min-width: 900px) {\n"
        "  .a { color: green; }\n"
        "}\n"
    )

    def test_contexts_in_first_seen_order(self):
        model = parse_stylesheet(self.CSS).model
        assert model.context_keys == (
            "base",
            "@media (min-width: 600px)",
            "@media (min-width: 900px)",
        )

    def test_every_inner_rule_is_parsed(self):
        model = parse_stylesheet(self.CSS).model
        ctx = "@media (min-width: 600px)"
        assert model.selectors(ctx) == [".a", ".b"]
        assert model.declarations(ctx, ".a") == {"color": "blue"}
        assert model.declarations(ctx, ".b") == {"margin": "0"}

    def test_media_rules_do_not_leak_into_base(self):
        model = parse_stylesheet(self.CSS).model
        assert model.selectors("base") == [".a"]
        assert model.declarations("base", ".a") == {"color": "red"}

    def test_empty_media_block_creates_context(self):
        model = parse_stylesheet(".a { color: red; }\n@media print {\n}\n").model
        assert model.media_keys == ("@media print",)
        assert model.selectors("@media print") == []

    def test_repeated_media_query_resets_context(self):
        css = (
            "@media (x) { .a { color: red; } }\n"
            "@media (y) { .a { color: blue; } }\n"
            "@media (x) { .b { margin: 0; } }\n"
        )
        result = parse_stylesheet(css)
        model = result.model
        assert model.media_keys == ("@media (x)", "@media (y)")
        assert model.selectors("@media (x)") == [".b"]
        assert [w.code for w in result.warnings] == ["repeated-context"]

    def test_trailing_whitespace_is_not_part_of_key(self):
        css = "@media (x) { .a { color: red; } }\n@media (x){ .b { margin: 0; } }\n"
        result = parse_stylesheet(css)
        assert result.model.media_keys == ("@media (x)",)
        assert result.model.selectors("@media (x)") == [".b"]
        assert [w.code for w in result.warnings] == ["repeated-context"]

    def test_internal_whitespace_is_kept(self):
        css = "@media  (x) { .a { color: red; } }\n@media (x) { .a { color: blue; } }\n"
        model = parse_stylesheet(css).model
        assert model.media_keys == ("@media  (x)", "@media (x)")


class TestWarningsCollected:
    def test_warnings_from_all_stages(self):
        css = (
            ".a { color red; }\n"
            "@media (x) { .b { margin: 0; } }\n"
            ".late { color: blue; }\n"
        )
        codes = [w.code for w in parse_stylesheet(css).warnings]
        assert "ignored-text" in codes
        assert "malformed-declaration" in codes
