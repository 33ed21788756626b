from cssdedupe.parser.builder import ParseResult, parse_stylesheet
from cssdedupe.parser.errors import BaseRegionNotFoundError, ParseError

__all__ = ["BaseRegionNotFoundError", "ParseError", "ParseResult", "parse_stylesheet"]
