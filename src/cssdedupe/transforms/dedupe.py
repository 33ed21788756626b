"""Cascade-aware duplicate elimination across media contexts."""

from __future__ import annotations

from cssdedupe.model.diagnostic import Removal
from cssdedupe.model.stylesheet import BASE_CONTEXT, StylesheetModel


def _remove_matching(
    model: StylesheetModel,
    context: str,
    selector: str,
    other: dict[str, str],
    reason: str,
) -> list[Removal]:
    """Drop every declaration of *selector* whose value equals *other*'s."""
    removed: list[Removal] = []
    current = model.declarations(context, selector) or {}
    for prop, value in current.items():
        if other.get(prop) == value:
            model.discard(context, selector, prop)
            removed.append(
                Removal(
                    context=context,
                    selector=selector,
                    reason=reason,
                    property=prop,
                    value=value,
                )
            )
    return removed


class DuplicateEliminationTransform:
    """Remove media-query declarations that restate an inherited value.

    Contexts are walked in first-seen order ``[base, m1, m2, ...]``:

    - the first media context is compared against ``base``;
    - every media context is compared against the context right before it.

    Comparison is exact string equality per property.  Removals are applied
    in place as the walk proceeds, so ``m2`` is compared against what is left
    of ``m1`` after ``m1`` was itself deduplicated.

    Later media contexts are not compared against ``base`` directly.
    """

    def apply(self, model: StylesheetModel) -> list[Removal]:
        keys = model.context_keys
        removed: list[Removal] = []
        for index, context in enumerate(keys):
            if context == BASE_CONTEXT:
                continue
            previous = keys[index - 1]
            for selector in model.selectors(context):
                base_decls = model.declarations(BASE_CONTEXT, selector)
                if base_decls is not None and index - 1 == 0:
                    removed.extend(
                        _remove_matching(model, context, selector, base_decls, "base")
                    )
                previous_decls = model.declarations(previous, selector)
                if previous_decls is not None:
                    removed.extend(
                        _remove_matching(model, context, selector, previous_decls, "previous")
                    )
        return removed
