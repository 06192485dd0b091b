"""Per-field match predicate — case-insensitive substring logic."""

from typing import Sequence

from mdgallery.models import LogicMode


def evaluate_field(value: str | Sequence[str], terms: Sequence[str], mode: LogicMode) -> bool:
    """True if the field's value(s) satisfy the terms under the given mode.

    or:  some term occurs in some value
    and: every term occurs in at least one value
    not: no term occurs in any value

    A scalar value is treated as a one-element sequence. With no terms, every
    active mode is vacuously true.
    """
    if mode is LogicMode.DISABLED or not terms:
        return True

    values = [value.lower()] if isinstance(value, str) else [v.lower() for v in value]
    terms_lower = [t.lower() for t in terms]

    def found(term: str) -> bool:
        return any(term in v for v in values)

    if mode is LogicMode.OR:
        return any(found(t) for t in terms_lower)
    if mode is LogicMode.AND:
        return all(found(t) for t in terms_lower)
    if mode is LogicMode.NOT:
        return not any(found(t) for t in terms_lower)

    raise ValueError(f"Unsupported logic mode: {mode!r}")
