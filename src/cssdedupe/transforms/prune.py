"""Drop selectors left without declarations."""

from __future__ import annotations

from cssdedupe.model.diagnostic import Removal
from cssdedupe.model.stylesheet import StylesheetModel


class PruneEmptySelectorsTransform:
    """Delete every selector whose declaration set is empty.

    Contexts themselves are kept even when all their selectors go away.
    """

    def apply(self, model: StylesheetModel) -> list[Removal]:
        removed: list[Removal] = []
        for context in model.context_keys:
            for selector in model.selectors(context):
                if not model.declarations(context, selector):
                    model.remove_selector(context, selector)
                    removed.append(Removal(context=context, selector=selector, reason="empty"))
        return removed
