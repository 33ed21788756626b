"""Rule parser: ``selector { prop: value; ... }`` -> model entry."""

from __future__ import annotations

from cssdedupe.model.diagnostic import ParseWarning
from cssdedupe.model.stylesheet import StylesheetModel

__all__ = ["parse_declarations", "parse_rule", "split_base_rules"]


def split_base_rules(base: str) -> list[str]:
    """Cut the base region into one raw block per top-level rule.

    The text is split at every ``}`` and the brace is re-appended, so the
    trailing fragment after the last rule comes back as bare ``}`` residue.
    """
    return [fragment + "}" for fragment in base.split("}")]


def parse_declarations(
    body: str, context: str | None = None, selector: str | None = None
) -> tuple[dict[str, str], list[ParseWarning]]:
    """Parse ``prop: value; ...`` into an ordered property dictionary.

    Only the first ``:`` of a declaration separates property from value, so
    values like ``url(http://example.com/a.png)`` survive intact.
    """
    declarations: dict[str, str] = {}
    warnings: list[ParseWarning] = []
    for segment in body.split(";"):
        if not segment.strip():
            continue
        prop, sep, value = segment.partition(":")
        prop = prop.strip()
        value = value.strip()
        if not sep or not prop or not value:
            warnings.append(
                ParseWarning(
                    code="malformed-declaration",
                    message=f"declaration {segment.strip()!r} has no 'property: value' pair; dropped",
                    context=context,
                    selector=selector,
                    fragment=segment,
                )
            )
            continue
        declarations[prop] = value
    return declarations, warnings


def parse_rule(block: str, context: str, model: StylesheetModel) -> list[ParseWarning]:
    """Parse one raw rule *block* and store it in *model* under *context*.

    Blocks that do not split into a selector and a non-empty body are
    skipped.  Whitespace-only residue from splitting is skipped quietly;
    anything else is reported in the returned warnings.
    """
    residue = block.strip()
    if residue in ("", "}"):
        return []

    parts = block.split("{")
    if len(parts) != 2:
        return [
            ParseWarning(
                code="malformed-rule",
                message="rule is not a flat 'selector { declarations }' block; dropped",
                context=context,
                fragment=residue,
            )
        ]

    name = parts[0].strip()
    body = parts[1].strip().removesuffix("}").strip()
    if not name or not body:
        return [
            ParseWarning(
                code="malformed-rule",
                message="rule has an empty selector or an empty body; dropped",
                context=context,
                selector=name or None,
                fragment=residue,
            )
        ]

    declarations, warnings = parse_declarations(body, context=context, selector=name)
    if model.set_rule(context, name, declarations):
        warnings.append(
            ParseWarning(
                code="duplicate-selector",
                message=f"selector {name!r} is defined again; the earlier declarations were replaced",
                context=context,
                selector=name,
            )
        )
    return warnings
