"""cssdedupe: remove media-query declarations that restate inherited values."""
from __future__ import annotations

from cssdedupe.config import DedupeConfig
from cssdedupe.model import ParseWarning, Removal, StylesheetModel
from cssdedupe.parser import BaseRegionNotFoundError, ParseError, parse_stylesheet
from cssdedupe.processor import CssProcessor, ProcessResult, process_css
from cssdedupe.serializer import serialize

__version__ = "0.1.0"

__all__ = [
    "BaseRegionNotFoundError",
    "CssProcessor",
    "DedupeConfig",
    "ParseError",
    "ParseWarning",
    "ProcessResult",
    "Removal",
    "StylesheetModel",
    "parse_stylesheet",
    "process_css",
    "serialize",
]
