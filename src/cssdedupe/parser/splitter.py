"""Pattern-based splitting of CSS text into a base region and media blocks.

This is not a CSS grammar.  It assumes flat rules (no nesting beyond a single
``@media`` level), no comments and no braces inside strings:

    .card { color: red; }
    @media (max-width: 600px) {
        .card { color: blue; }
    }
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from cssdedupe.model.diagnostic import ParseWarning
from cssdedupe.parser.errors import BaseRegionNotFoundError

__all__ = ["MediaBlock", "SplitResult", "split_stylesheet"]

# Everything up to the first @media, or the whole text when there is none.
_BASE_REGION_RE = re.compile(r"(?P<base>.*?)(?=@media|\Z)", re.DOTALL)

# A media block whose inner rules are flat: header { rule { } rule { } }
_MEDIA_BLOCK_RE = re.compile(
    r"""
    (?P<header>@media[^{]+)              # query header up to its opening brace
    \{
    (?P<body>
        (?:[^{}]*\{[^{}]*\})*            # inner selector { declarations } rules
        [^{}]*                           # trailing whitespace before the close
    )
    \}
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class MediaBlock:
    """One ``@media`` block: verbatim header and raw interior text."""

    header: str
    body: str


@dataclass
class SplitResult:
    base: str
    media_blocks: list[MediaBlock] = field(default_factory=list)
    warnings: list[ParseWarning] = field(default_factory=list)


def _gap_warning(text: str) -> ParseWarning | None:
    """Describe non-whitespace text left between or after media blocks."""
    stripped = text.strip()
    if not stripped:
        return None
    if "@media" in stripped:
        return ParseWarning(
            code="unmatched-media",
            message="@media block could not be isolated (nested or unbalanced braces); dropped",
            fragment=stripped,
        )
    return ParseWarning(
        code="ignored-text",
        message="top-level text after the first @media block is not part of the base rules; dropped",
        fragment=stripped,
    )


def split_stylesheet(css: str) -> SplitResult:
    """Split *css* into the base region and its ``@media`` blocks.

    Raises :class:`BaseRegionNotFoundError` if the base region cannot be
    located at all.
    """
    match = _BASE_REGION_RE.match(css)
    if match is None:
        raise BaseRegionNotFoundError("No match found for text before @media queries.")

    result = SplitResult(base=match.group("base"))
    cursor = match.end()
    for media in _MEDIA_BLOCK_RE.finditer(css, cursor):
        warning = _gap_warning(css[cursor:media.start()])
        if warning is not None:
            result.warnings.append(warning)
        result.media_blocks.append(
            MediaBlock(header=media.group("header"), body=media.group("body"))
        )
        cursor = media.end()

    warning = _gap_warning(css[cursor:])
    if warning is not None:
        result.warnings.append(warning)
    return result
