"""Short-circuit results shared by every algorithm.

Each metric asks the resolver first and only runs its own logic when the
resolver has no opinion, i.e. when both strings are non-empty and differ.
``None`` is treated as the empty string.
"""

from typing import Optional

from fuzzystring._utils import ensure_text


def trivial_similarity(source: Optional[str], target: Optional[str]) -> Optional[float]:
    """Resolve the similarity of empty or equal strings.

    Returns:
        1.0 when both are empty or the strings are equal, 0.0 when exactly one
        is empty, otherwise None.

    Example:
        >>> trivial_similarity("", "")
        1.0
        >>> trivial_similarity("abc", "")
        0.0
        >>> trivial_similarity("abc", "abd") is None
        True
    """
    source = ensure_text(source, "source")
    target = ensure_text(target, "target")

    if not source:
        return 1.0 if not target else 0.0
    if not target:
        return 0.0
    if source == target:
        return 1.0
    return None


def trivial_distance(source: Optional[str], target: Optional[str]) -> Optional[float]:
    """Resolve the distance of empty strings.

    Returns:
        0.0 when both are empty, the length of the other string when exactly
        one is empty, otherwise None.
    """
    source = ensure_text(source, "source")
    target = ensure_text(target, "target")

    if not source:
        return float(len(target))
    if not target:
        return float(len(source))
    return None


__all__ = ["trivial_similarity", "trivial_distance"]
