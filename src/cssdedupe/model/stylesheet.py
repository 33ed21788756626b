"""Stylesheet model: ordered contexts of selector -> declaration mappings."""

from __future__ import annotations

from collections.abc import Iterator

BASE_CONTEXT = "base"


class StylesheetModel:
    """Nested mapping of context -> selector -> property -> value.

    Contexts are kept as an explicit list of keys in first-seen order, paired
    with a lookup mapping.  ``"base"`` is always present and always first;
    media contexts are keyed by their verbatim ``@media ...`` header.

    Readers only ever get copies of the inner mappings.  All mutation goes
    through :meth:`add_context`, :meth:`set_rule`, :meth:`discard` and
    :meth:`remove_selector`.
    """

    def __init__(self) -> None:
        self._order: list[str] = [BASE_CONTEXT]
        self._contexts: dict[str, dict[str, dict[str, str]]] = {BASE_CONTEXT: {}}

    # --- contexts ------------------------------------------------------------

    @property
    def context_keys(self) -> tuple[str, ...]:
        return tuple(self._order)

    @property
    def media_keys(self) -> tuple[str, ...]:
        return tuple(self._order[1:])

    def has_context(self, context: str) -> bool:
        return context in self._contexts

    def add_context(self, context: str) -> bool:
        """Start an empty selector block for *context*.

        A context seen before is reset to empty but keeps its original
        position.  Returns True when the context already existed.
        """
        existed = context in self._contexts
        if not existed:
            self._order.append(context)
        self._contexts[context] = {}
        return existed

    # --- selectors -----------------------------------------------------------

    def selectors(self, context: str) -> list[str]:
        return list(self._contexts[context])

    def has_selector(self, context: str, selector: str) -> bool:
        return selector in self._contexts.get(context, {})

    def declarations(self, context: str, selector: str) -> dict[str, str] | None:
        """Return a copy of the declarations for *selector*, or None."""
        decls = self._contexts.get(context, {}).get(selector)
        if decls is None:
            return None
        return dict(decls)

    def set_rule(self, context: str, selector: str, declarations: dict[str, str]) -> bool:
        """Store *declarations* for *selector*, replacing any earlier rule.

        Returns True when an earlier rule for the same selector was replaced.
        """
        block = self._contexts[context]
        replaced = selector in block
        block[selector] = dict(declarations)
        return replaced

    def discard(self, context: str, selector: str, prop: str) -> None:
        self._contexts[context][selector].pop(prop, None)

    def remove_selector(self, context: str, selector: str) -> None:
        del self._contexts[context][selector]

    # --- views ---------------------------------------------------------------

    def as_dict(self) -> dict[str, dict[str, dict[str, str]]]:
        """Deep copy of the model as plain dicts, in context order."""
        return {
            key: {sel: dict(decls) for sel, decls in self._contexts[key].items()}
            for key in self._order
        }

    def __iter__(self) -> Iterator[str]:
        return iter(self.context_keys)

    def __len__(self) -> int:
        return len(self._order)

    def __repr__(self) -> str:
        return f"StylesheetModel(contexts={self._order!r})"
