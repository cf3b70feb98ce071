"""Internal utilities for fuzzystring."""

import math
from typing import Optional, Union

from fuzzystring._core.exceptions import AlgorithmError, ValidationError
from fuzzystring.enums import Algorithm

# Valid algorithm names (lowercase)
VALID_ALGORITHMS = frozenset(a.value for a in Algorithm)

# Common spellings mapped onto the canonical names
_ALIASES = {
    "jaro-winkler": "jaro_winkler",
    "jarowinkler": "jaro_winkler",
    "jaccard_index": "jaccard",
    "overlap_coefficient": "overlap",
    "sorensen_dice_coefficient": "sorensen_dice",
    "dice": "sorensen_dice",
    "ratcliff": "ratcliff_obershelp",
    "longest_common_subsequence": "lcs",
    "longest_common_substring": "lcsubstring",
}


def normalize_algorithm(algorithm: Union[str, Algorithm]) -> Algorithm:
    """Convert an algorithm name to its Algorithm member.

    Args:
        algorithm: Either an Algorithm enum value or a string algorithm name.

    Returns:
        The matching Algorithm member.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.

    Example:
        >>> normalize_algorithm("Jaro_Winkler")
        <Algorithm.JARO_WINKLER: 'jaro_winkler'>
    """
    if isinstance(algorithm, Algorithm):
        return algorithm

    if isinstance(algorithm, str):
        algo_lower = algorithm.strip().lower()
        algo_lower = _ALIASES.get(algo_lower, algo_lower)
        if algo_lower in VALID_ALGORITHMS:
            return Algorithm(algo_lower)
        raise AlgorithmError(
            f"Unknown algorithm: '{algorithm}'. Valid options: {sorted(VALID_ALGORITHMS)}"
        )

    raise TypeError(
        f"algorithm must be str or Algorithm enum, got {type(algorithm).__name__}"
    )


def ensure_text(value: Optional[str], name: str) -> str:
    """Return value as a string, mapping None to the empty string.

    Raises:
        TypeError: If value is neither a string nor None.
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str or None, got {type(value).__name__}")
    return value


def upper_same_length(value: str) -> str:
    """Upper-case each character whose upper case is a single character.

    Characters such as "ß" (upper case "SS") are kept as they are, so the
    result always has the length of the input.

    Example:
        >>> upper_same_length("straße")
        'STRAßE'
    """
    return "".join(c.upper() if len(c.upper()) == 1 else c for c in value)


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value to [lower, upper]."""
    return max(lower, min(value, upper))


def validate_min_similarity(min_similarity: float) -> None:
    """Raise ValidationError unless min_similarity is a finite value in [0, 1]."""
    if math.isnan(min_similarity) or not 0.0 <= min_similarity <= 1.0:
        raise ValidationError(
            f"min_similarity must be in range [0.0, 1.0], got {min_similarity}"
        )


__all__ = [
    "normalize_algorithm",
    "ensure_text",
    "clamp",
    "upper_same_length",
    "validate_min_similarity",
    "VALID_ALGORITHMS",
]
