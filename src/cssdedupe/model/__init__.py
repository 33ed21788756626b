from cssdedupe.model.diagnostic import ParseWarning, Removal
from cssdedupe.model.stylesheet import BASE_CONTEXT, StylesheetModel

__all__ = ["BASE_CONTEXT", "ParseWarning", "Removal", "StylesheetModel"]
