"""Similarities derived from distances, and multiset coefficients.

The coefficients count shared characters as bags: a character that appears
twice in both strings counts twice.
"""

from collections import Counter
from typing import Optional

from fuzzystring._core.distance import edit_distance, hamming_distance, levenshtein_distance
from fuzzystring._core.trivial import trivial_similarity


def edit_similarity(source: Optional[str], target: Optional[str]) -> float:
    """
    Compute the 1's complement of the edit distance relative to the longer
    length.

    Example:
        >>> edit_similarity("beauties", "beautiful")
        0.6666666666666667
    """
    trivial = trivial_similarity(source, target)
    if trivial is not None:
        return trivial
    return 1.0 - edit_distance(source, target) / max(len(source), len(target))


def hamming_similarity(source: Optional[str], target: Optional[str]) -> float:
    """
    Compute the 1's complement of the Hamming distance relative to the string
    length.

    Strings of different lengths are incomparable and score 0.0, whatever
    their content.

    Example:
        >>> hamming_similarity("abc", "axc")
        0.6666666666666667
        >>> hamming_similarity("abc", "abcd")
        0.0
    """
    trivial = trivial_similarity(source, target)
    if trivial is not None:
        return trivial
    if len(source) != len(target):
        return 0.0
    return 1.0 - hamming_distance(source, target) / len(source)


def levenshtein_similarity(source: Optional[str], target: Optional[str]) -> float:
    """
    Compute the 1's complement of the Levenshtein distance relative to the
    longer length.

    Example:
        >>> levenshtein_similarity("kitten", "sitting")
        0.5714285714285714
    """
    trivial = trivial_similarity(source, target)
    if trivial is not None:
        return trivial
    return 1.0 - levenshtein_distance(source, target) / max(len(source), len(target))


def intersection_size(source: str, target: str) -> int:
    """Size of the multiset intersection of the characters of two strings."""
    return sum((Counter(source) & Counter(target)).values())


def jaccard_index(source: Optional[str], target: Optional[str]) -> float:
    """
    Compute the Jaccard index: shared characters over the size of the union.

    Example:
        >>> jaccard_index("night", "nacht")
        0.42857142857142855
    """
    trivial = trivial_similarity(source, target)
    if trivial is not None:
        return trivial
    shared = intersection_size(source, target)
    return shared / (len(source) + len(target) - shared)


def sorensen_dice_coefficient(source: Optional[str], target: Optional[str]) -> float:
    """
    Compute the Sorensen-Dice coefficient: twice the shared characters over
    the total length. Always equal to ``2J / (J + 1)`` for Jaccard index J.
    """
    trivial = trivial_similarity(source, target)
    if trivial is not None:
        return trivial
    return 2.0 * intersection_size(source, target) / (len(source) + len(target))


def overlap_coefficient(source: Optional[str], target: Optional[str]) -> float:
    """
    Compute the overlap (Szymkiewicz-Simpson) coefficient: shared characters
    over the shorter length.
    """
    trivial = trivial_similarity(source, target)
    if trivial is not None:
        return trivial
    return intersection_size(source, target) / min(len(source), len(target))


__all__ = [
    "edit_similarity",
    "hamming_similarity",
    "levenshtein_similarity",
    "intersection_size",
    "jaccard_index",
    "sorensen_dice_coefficient",
    "overlap_coefficient",
]
