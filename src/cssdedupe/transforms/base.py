"""Base protocol for stylesheet transforms."""

from __future__ import annotations

from typing import Protocol

from cssdedupe.model.diagnostic import Removal
from cssdedupe.model.stylesheet import StylesheetModel


class Transform(Protocol):
    """An in-place model transformation that reports what it removed."""

    def apply(self, model: StylesheetModel) -> list[Removal]: ...
