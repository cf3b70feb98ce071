"""
fuzzystring - Approximate string comparison

A pure Python library of normalized string similarity and distance measures
(edit-based, set-based and alignment-based) that can be combined into one
aggregate score and used to pick the best match from a list of candidates.

Strings are measured in Python code points: a character outside the Basic
Multilingual Plane, such as an emoji, counts as one character, not as a
UTF-16 surrogate pair. Case-insensitive comparison upper-cases one character
at a time and leaves characters whose upper case is longer (such as "ß")
unchanged.

Example usage:
    >>> import fuzzystring as fs

    # Simple similarity
    >>> round(fs.jaro_winkler_similarity("MARTHA", "MARHTA"), 4)
    0.9611

    # Aggregate score over a selection of algorithms
    >>> options = fs.ComparisonOptions.of(fs.Algorithm.JACCARD, fs.Algorithm.LCS)
    >>> round(fs.similarity_score("beauties", "beautiful", options), 4)
    0.6477

    # Best match (returns a MatchResult, or None for an empty list)
    >>> match = fs.best_match("Present Address Street", ["Present Address Street 1", "Sex"])
    >>> match.index, match.target
    (0, 'Present Address Street 1')
"""

from importlib.metadata import version as _get_version

# Register the .fuzzy expression namespace
import fuzzystring.expr  # noqa: F401
from fuzzystring import batch
from fuzzystring._core import (
    # Custom exceptions
    AlgorithmError,
    FuzzyStringError,
    # Result types
    MatchResult,
    ValidationError,
    # Aggregation and matching
    approximately_equals,
    best_match,
    common_substrings,
    compare_algorithms,
    # Distance functions
    edit_distance,
    # Similarity functions
    edit_similarity,
    hamming_distance,
    hamming_similarity,
    jaccard_index,
    jaro_similarity,
    jaro_winkler_similarity,
    lcs_similarity,
    lcsubstring_similarity,
    levenshtein_distance,
    levenshtein_similarity,
    longest_common_subsequence,
    longest_common_substring,
    matches,
    overlap_coefficient,
    ratcliff_obershelp_similarity,
    similarity_score,
    sorensen_dice_coefficient,
)
from fuzzystring.enums import Algorithm
from fuzzystring.options import ComparisonOptions

# -----------------------------------------------------------------------------
# Polars Integration - Batch API (polars_api)
# -----------------------------------------------------------------------------
# Series-level helpers; the .fuzzy expression namespace lives in fuzzystring.expr.
from fuzzystring.polars_api import batch_best_match, batch_similarity

__version__ = _get_version("fuzzystring")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "FuzzyStringError",
    "ValidationError",
    "AlgorithmError",
    # Result types
    "MatchResult",
    # Enums and options
    "Algorithm",
    "ComparisonOptions",
    # Distance functions
    "edit_distance",
    "hamming_distance",
    "levenshtein_distance",
    # Substring helpers
    "longest_common_subsequence",
    "longest_common_substring",
    "common_substrings",
    # Similarity functions
    "edit_similarity",
    "hamming_similarity",
    "levenshtein_similarity",
    "jaccard_index",
    "sorensen_dice_coefficient",
    "overlap_coefficient",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "lcs_similarity",
    "lcsubstring_similarity",
    "ratcliff_obershelp_similarity",
    # Aggregation and matching
    "similarity_score",
    "compare_algorithms",
    "approximately_equals",
    "matches",
    "best_match",
    # Batch processing
    "batch",
    # Polars Integration - Batch API (polars_api)
    "batch_similarity",
    "batch_best_match",
]


# Convenience aliases
similarity = similarity_score
