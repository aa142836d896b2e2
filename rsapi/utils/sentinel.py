"""Helpers for the web services' ``-1`` means "unranked" convention."""

from __future__ import annotations

from typing import Final

UNRANKED: Final[int] = -1

# Ranks, levels and activity scores are 32-bit on the wire; experience is 64-bit.
MAX_INT: Final[int] = 2**31 - 1
MAX_LONG: Final[int] = 2**63 - 1


def check_raw(raw: int, field: str) -> int:
    """Return ``raw`` unchanged, rejecting anything below the sentinel.

    A value of ``-2`` or lower never comes from the hiscores and points at a
    broken fetch, so it is refused here rather than stored.
    """
    if raw < UNRANKED:
        raise ValueError(f"{field} must be {UNRANKED} (unranked) or non-negative, got {raw}")
    return raw


def as_optional(raw: int) -> int | None:
    """Map the sentinel to ``None`` and pass every other value through."""
    return None if raw == UNRANKED else raw