"""Aggregate similarity over a selection of algorithms."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from fuzzystring._core.alignment import (
    jaro_winkler_similarity,
    lcs_similarity,
    lcsubstring_similarity,
    ratcliff_obershelp_similarity,
)
from fuzzystring._core.exceptions import ValidationError
from fuzzystring._core.similarity import (
    edit_similarity,
    hamming_similarity,
    jaccard_index,
    levenshtein_similarity,
    overlap_coefficient,
    sorensen_dice_coefficient,
)
from fuzzystring._utils import clamp, ensure_text, upper_same_length
from fuzzystring.enums import Algorithm
from fuzzystring.options import ComparisonOptions

if TYPE_CHECKING:
    from fuzzystring.options import OptionsLike

logger = logging.getLogger(__name__)

SimilarityFunc = Callable[[str, str], float]

ALGORITHM_FUNCTIONS: dict[Algorithm, SimilarityFunc] = {
    Algorithm.EDIT: edit_similarity,
    Algorithm.HAMMING: hamming_similarity,
    Algorithm.JACCARD: jaccard_index,
    Algorithm.JARO_WINKLER: jaro_winkler_similarity,
    Algorithm.LEVENSHTEIN: levenshtein_similarity,
    Algorithm.LCS: lcs_similarity,
    Algorithm.LCSUBSTRING: lcsubstring_similarity,
    Algorithm.OVERLAP: overlap_coefficient,
    Algorithm.RATCLIFF_OBERSHELP: ratcliff_obershelp_similarity,
    Algorithm.SORENSEN_DICE: sorensen_dice_coefficient,
}

MIN_THRESHOLD = 0.01


def compare_algorithms(
    source: Optional[str],
    target: Optional[str],
    options: OptionsLike = ComparisonOptions.ALL,
) -> dict[Algorithm, float]:
    """
    Compute each selected similarity separately.

    Args:
        source: The source string.
        target: The target string.
        options: Algorithms to run and whether to ignore case
            (default: every algorithm, case-sensitive).

    Returns:
        Scores keyed by algorithm, in evaluation order.

    Raises:
        ValidationError: If options select no algorithm.

    Example:
        >>> scores = compare_algorithms("beauties", "beautiful", ["levenshtein", "lcs"])
        >>> {a.value: round(s, 4) for a, s in scores.items()}
        {'levenshtein': 0.6667, 'lcs': 0.75}
    """
    options = ComparisonOptions.coerce(options)
    selected = options.selected()
    if not selected:
        raise ValidationError("at least one comparison algorithm must be selected")

    source = ensure_text(source, "source")
    target = ensure_text(target, "target")
    if options.case_insensitive:
        source = upper_same_length(source)
        target = upper_same_length(target)

    return {algorithm: ALGORITHM_FUNCTIONS[algorithm](source, target) for algorithm in selected}


def similarity_score(
    source: Optional[str],
    target: Optional[str],
    options: OptionsLike = ComparisonOptions.ALL,
) -> float:
    """
    Compute the mean of the selected similarity algorithms.

    Args:
        source: The source string.
        target: The target string.
        options: Algorithms to average and whether to ignore case
            (default: every algorithm, case-sensitive).

    Returns:
        Arithmetic mean of the selected similarities (0.0 to 1.0).

    Raises:
        ValidationError: If options select no algorithm.

    Example:
        >>> similarity_score("Hello", "hello", ComparisonOptions.ALL | ComparisonOptions.CASE_INSENSITIVE)
        1.0
    """
    scores = compare_algorithms(source, target, options)
    score = sum(scores.values()) / len(scores)
    logger.debug("similarity_score(%r, %r) = %f over %d algorithms", source, target, score, len(scores))
    return score


def approximately_equals(
    source: Optional[str],
    target: Optional[str],
    options: OptionsLike = ComparisonOptions.ALL,
    threshold: float = 0.75,
) -> bool:
    """
    Determine whether two strings are similar, based on their similarity score.

    Args:
        source: The source string.
        target: The target string.
        options: Algorithms and flags to use in the comparison.
        threshold: Score to reach to consider the strings similar, clamped to
            [0.01, 1.0] (default 0.75).

    Raises:
        ValidationError: If options select no algorithm.
    """
    threshold = clamp(threshold, MIN_THRESHOLD, 1.0)
    return similarity_score(source, target, options) >= threshold


__all__ = [
    "ALGORITHM_FUNCTIONS",
    "compare_algorithms",
    "similarity_score",
    "approximately_equals",
]
