"""Render a StylesheetModel back to CSS text."""

from __future__ import annotations

from cssdedupe.model.stylesheet import BASE_CONTEXT, StylesheetModel

INDENT = "    "


def render_rule(selector: str, declarations: dict[str, str], indent: str = "") -> str:
    lines = [f"{indent}{selector} {{"]
    lines.extend(f"{INDENT}{prop}: {value};" for prop, value in declarations.items())
    lines.append(f"{INDENT}}}")
    return "\n".join(lines)


def render_context(model: StylesheetModel, context: str) -> str:
    """Render one context; media contexts are wrapped in their header."""
    indent = "" if context == BASE_CONTEXT else INDENT
    rules = "\n\n".join(
        render_rule(selector, model.declarations(context, selector) or {}, indent)
        for selector in model.selectors(context)
    )
    if context == BASE_CONTEXT:
        return rules
    return f"{context.strip()}{{\n{rules}\n}}"


def serialize(model: StylesheetModel) -> str:
    """Produce CSS text: base rules first, then each media block in order."""
    sections = [render_context(model, context) for context in model.context_keys]
    if not sections[0]:
        sections = sections[1:]
    return "\n\n".join(sections) + "\n"
