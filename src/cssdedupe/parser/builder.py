"""Model builder: assemble parsed rules into a StylesheetModel."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from cssdedupe.model.diagnostic import ParseWarning
from cssdedupe.model.stylesheet import BASE_CONTEXT, StylesheetModel
from cssdedupe.parser.rules import parse_rule, split_base_rules
from cssdedupe.parser.splitter import split_stylesheet

__all__ = ["ParseResult", "parse_stylesheet"]

# A flat rule inside a media block: selector { declarations }
_INNER_RULE_RE = re.compile(r"[^{}]+\{[^{}]*\}")


@dataclass
class ParseResult:
    """The parsed model plus every warning raised while building it."""

    model: StylesheetModel
    warnings: list[ParseWarning] = field(default_factory=list)


def parse_stylesheet(css: str) -> ParseResult:
    """Parse CSS text into a :class:`StylesheetModel`.

    Base rules are read from the text before the first ``@media``; each media
    block becomes its own context keyed by its header (trailing whitespace
    removed, internal whitespace kept verbatim).  Raises
    :class:`~cssdedupe.parser.errors.BaseRegionNotFoundError` when the base
    region cannot be located.
    """
    split = split_stylesheet(css)
    model = StylesheetModel()
    warnings: list[ParseWarning] = list(split.warnings)

    for block in split_base_rules(split.base):
        warnings.extend(parse_rule(block, BASE_CONTEXT, model))

    for media in split.media_blocks:
        context = media.header.rstrip()
        if model.add_context(context):
            warnings.append(
                ParseWarning(
                    code="repeated-context",
                    message="media query appears again; rules from its earlier block were discarded",
                    context=context,
                )
            )
        for rule in _INNER_RULE_RE.finditer(media.body):
            warnings.extend(parse_rule(rule.group(0), context, model))

    return ParseResult(model=model, warnings=warnings)
