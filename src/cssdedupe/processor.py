"""Pipeline: read a stylesheet, remove cascade duplicates, write it back."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from cssdedupe.config import DedupeConfig
from cssdedupe.model.diagnostic import ParseWarning, Removal
from cssdedupe.model.stylesheet import BASE_CONTEXT, StylesheetModel
from cssdedupe.parser import BaseRegionNotFoundError, parse_stylesheet
from cssdedupe.serializer import serialize
from cssdedupe.transforms import apply_transforms

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Outcome of one run: the final CSS plus what was dropped on the way."""

    css: str
    model: StylesheetModel
    warnings: list[ParseWarning] = field(default_factory=list)
    removals: list[Removal] = field(default_factory=list)

    @property
    def duplicate_count(self) -> int:
        return sum(1 for r in self.removals if r.property is not None)

    @property
    def pruned_count(self) -> int:
        return sum(1 for r in self.removals if r.property is None)


def process_css(source: str) -> ProcessResult:
    """Parse *source*, eliminate duplicates, prune and serialize.

    Raises :class:`BaseRegionNotFoundError` when the base rules cannot be
    located; nothing is produced in that case.
    """
    try:
        parsed = parse_stylesheet(source)
    except BaseRegionNotFoundError as exc:
        logger.error("%s", exc)
        raise

    for warning in parsed.warnings:
        logger.warning("%s", warning)

    model = parsed.model
    logger.info(
        "Parsed %d context(s): %d base selector(s), %d media block(s)",
        len(model),
        len(model.selectors(BASE_CONTEXT)),
        len(model.media_keys),
    )

    removals = apply_transforms(model)
    result = ProcessResult(
        css=serialize(model),
        model=model,
        warnings=parsed.warnings,
        removals=removals,
    )
    logger.info(
        "Removed %d duplicate declaration(s) and %d empty selector(s)",
        result.duplicate_count,
        result.pruned_count,
    )
    return result


class CssProcessor:
    """Whole-file transform bound to one stylesheet path.

    Call :meth:`process` and then :meth:`write`.  Writing overwrites the
    input (unless ``config.output_path`` is set) and keeps no backup.
    """

    def __init__(self, css_path: str | Path, config: DedupeConfig | None = None) -> None:
        self.css_path = Path(css_path)
        self.config = config or DedupeConfig()
        self.result: ProcessResult | None = None

    @property
    def output_path(self) -> Path:
        if self.config.output_path:
            return Path(self.config.output_path)
        return self.css_path

    def process(self) -> ProcessResult:
        source = self.css_path.read_text(encoding=self.config.encoding)
        logger.info("Processing %s (%d chars)", self.css_path, len(source))
        self.result = process_css(source)
        return self.result

    def write(self, result: ProcessResult | None = None) -> Path | None:
        """Write the processed CSS.  Returns the path written, or None on dry run."""
        result = result or self.result
        if result is None:
            raise RuntimeError("process() must be called before write()")
        if self.config.dry_run:
            logger.info("Dry run: not writing %s", self.output_path)
            return None
        self.output_path.write_text(result.css, encoding=self.config.encoding)
        logger.info("Modified CSS has been written back to the file successfully.")
        return self.output_path
