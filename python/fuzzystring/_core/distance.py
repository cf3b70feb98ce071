"""Distance primitives.

All distances are returned as floats so they divide cleanly into the derived
similarities.
"""

from typing import Optional

from fuzzystring._core.trivial import trivial_distance


def edit_distance(source: Optional[str], target: Optional[str]) -> float:
    """
    Compute a cheap edit distance: positional Hamming over the shorter length
    plus the difference in lengths.

    Unlike Levenshtein this does not search for an optimal alignment, so an
    insertion near the start of a string counts every shifted character.

    Complexity:
        Time: O(min(m, n)).

    Example:
        >>> edit_distance("beauties", "beautiful")
        3.0
    """
    trivial = trivial_distance(source, target)
    if trivial is not None:
        return trivial

    mismatches = sum(1 for s, t in zip(source, target) if s != t)
    return float(mismatches + abs(len(source) - len(target)))


def hamming_distance(source: Optional[str], target: Optional[str]) -> float:
    """
    Compute the Hamming distance, the number of positions at which two strings
    differ.

    Strings of different lengths are not an error: they are treated as
    maximally dissimilar and the distance is the longer length.

    Example:
        >>> hamming_distance("karolin", "kathrin")
        3.0
        >>> hamming_distance("abc", "ab")
        3.0
    """
    trivial = trivial_distance(source, target)
    if trivial is not None:
        return trivial

    if len(source) != len(target):
        return float(max(len(source), len(target)))
    return float(sum(1 for s, t in zip(source, target) if s != t))


def levenshtein_distance(source: Optional[str], target: Optional[str]) -> float:
    """
    Compute the minimum number of single-character insertions, deletions and
    substitutions needed to turn source into target.

    Complexity:
        Time: O(m*n) where m, n are string lengths.
        Space: O(n) using two rows of the DP table.

    Example:
        >>> levenshtein_distance("kitten", "sitting")
        3.0
    """
    trivial = trivial_distance(source, target)
    if trivial is not None:
        return trivial

    # previous[j] holds d[i-1][j], current[j] holds d[i][j]
    previous = list(range(len(target) + 1))
    for i, s in enumerate(source, start=1):
        current = [i]
        for j, t in enumerate(target, start=1):
            cost = 0 if s == t else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current

    return float(previous[-1])


__all__ = ["edit_distance", "hamming_distance", "levenshtein_distance"]
