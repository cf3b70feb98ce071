"""Core algorithms of fuzzystring.

Every public name is re-exported from the top-level package; import from
there rather than from this subpackage.
"""

from fuzzystring._core.alignment import (
    common_substrings,
    jaro_similarity,
    jaro_winkler_similarity,
    lcs_similarity,
    lcsubstring_similarity,
    longest_common_subsequence,
    longest_common_substring,
    ratcliff_obershelp_similarity,
)
from fuzzystring._core.distance import edit_distance, hamming_distance, levenshtein_distance
from fuzzystring._core.exceptions import AlgorithmError, FuzzyStringError, ValidationError
from fuzzystring._core.matching import best_match, matches
from fuzzystring._core.results import MatchResult
from fuzzystring._core.scoring import (
    ALGORITHM_FUNCTIONS,
    approximately_equals,
    compare_algorithms,
    similarity_score,
)
from fuzzystring._core.similarity import (
    edit_similarity,
    hamming_similarity,
    intersection_size,
    jaccard_index,
    levenshtein_similarity,
    overlap_coefficient,
    sorensen_dice_coefficient,
)
from fuzzystring._core.trivial import trivial_distance, trivial_similarity

__all__ = [
    "ALGORITHM_FUNCTIONS",
    "AlgorithmError",
    "FuzzyStringError",
    "MatchResult",
    "ValidationError",
    "approximately_equals",
    "best_match",
    "common_substrings",
    "compare_algorithms",
    "edit_distance",
    "edit_similarity",
    "hamming_distance",
    "hamming_similarity",
    "intersection_size",
    "jaccard_index",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "lcs_similarity",
    "lcsubstring_similarity",
    "levenshtein_distance",
    "levenshtein_similarity",
    "longest_common_subsequence",
    "longest_common_substring",
    "matches",
    "overlap_coefficient",
    "ratcliff_obershelp_similarity",
    "similarity_score",
    "sorensen_dice_coefficient",
    "trivial_distance",
    "trivial_similarity",
]
