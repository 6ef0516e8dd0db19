"""Shortcut suggestions.

Fuzzy "did you mean" lookup over the shortcuts a registry knows, used when a
lookup misses. Candidates are scored with RapidFuzz WRatio; best score wins
and ties keep registration order.
"""

from __future__ import annotations
from typing import Iterable

try:
    from rapidfuzz import fuzz, process
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e


def closest_shortcuts(
    query: str,
    candidates: Iterable[str],
    limit: int = 3,
    threshold: float = 60.0,
) -> list[str]:
    """Return registered shortcuts that look like query.

    Args:
        query: Shortcut that was not found
        candidates: Registered shortcuts
        limit: Maximum number of suggestions (default: 3)
        threshold: Minimum WRatio score, 0-100 (default: 60)

    Returns:
        Up to ``limit`` shortcuts ordered by descending score. Empty when
        query is empty or nothing scores at least ``threshold``.

    Examples:
        >>> closest_shortcuts("prev weak", ["prev week", "prev year", "this day"])
        ['prev week', ...]
    """
    if not query or not str(query).strip() or limit <= 0:
        return []

    choices = list(candidates)
    if not choices:
        return []

    matches = process.extract(
        str(query),
        choices,
        scorer=fuzz.WRatio,
        limit=limit,
        score_cutoff=threshold,
    )
    return [choice for choice, _score, _index in matches]


__all__ = ["closest_shortcuts"]
