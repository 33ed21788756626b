"""Diagnostic records: parse warnings and removed declarations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseWarning:
    """A fragment of the source that the parser had to drop or override.

    Attributes:
        code: Identifier for the kind of problem (e.g. ``malformed-rule``).
        message: Human-readable description of the problem.
        context: The context key being parsed, if applicable.
        selector: The selector involved, if applicable.
        fragment: The offending raw text, if available.
    """

    code: str
    message: str
    context: str | None = None
    selector: str | None = None
    fragment: str | None = None

    def __str__(self) -> str:
        location = ""
        if self.context and self.selector:
            location = f" [{self.context.strip()} > {self.selector}]"
        elif self.context:
            location = f" [{self.context.strip()}]"
        return f"WARNING {self.code}{location}: {self.message}"


@dataclass(frozen=True)
class Removal:
    """A declaration (or a whole selector) deleted by a transform.

    ``reason`` is ``"base"`` or ``"previous"`` for duplicate declarations and
    ``"empty"`` for selectors pruned after losing all their declarations, in
    which case ``property`` and ``value`` are None.
    """

    context: str
    selector: str
    reason: str
    property: str | None = None
    value: str | None = None

    def __str__(self) -> str:
        where = f"{self.context.strip()} > {self.selector}"
        if self.property is None:
            return f"{where}: removed empty selector"
        return f"{where}: removed {self.property}: {self.value} (same as {self.reason})"
