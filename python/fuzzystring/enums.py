"""Enums for fuzzystring API."""

from enum import Enum


class Algorithm(str, Enum):
    """Available similarity algorithms.

    Each member selects one similarity measure for the aggregate score. The
    declaration order is the order in which the aggregator evaluates them.
    String values are accepted wherever an Algorithm is expected.

    Example:
        >>> from fuzzystring import Algorithm, ComparisonOptions, similarity_score
        >>> options = ComparisonOptions.of(Algorithm.JARO_WINKLER, Algorithm.LEVENSHTEIN)
        >>> round(similarity_score("Present Address Street", "Present Address Street 1", options), 2)
        0.95
    """

    EDIT = "edit"
    """Positional mismatches over the common prefix plus the length difference"""

    HAMMING = "hamming"
    """Hamming similarity (0.0 for strings of different lengths)"""

    JACCARD = "jaccard"
    """Jaccard index over the multiset of characters"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro-Winkler similarity with prefix weighting, excellent for names"""

    LEVENSHTEIN = "levenshtein"
    """Classic edit distance (insertions, deletions, substitutions)"""

    LCS = "lcs"
    """Longest Common Subsequence similarity"""

    LCSUBSTRING = "lcsubstring"
    """Longest Common Substring similarity"""

    OVERLAP = "overlap"
    """Overlap (Szymkiewicz-Simpson) coefficient over the multiset of characters"""

    RATCLIFF_OBERSHELP = "ratcliff_obershelp"
    """Ratcliff-Obershelp (gestalt pattern matching) similarity"""

    SORENSEN_DICE = "sorensen_dice"
    """Sorensen-Dice coefficient over the multiset of characters"""

    def __or__(self, other):
        """Combine with another algorithm or options into ComparisonOptions.

        Example:
            >>> (Algorithm.JACCARD | Algorithm.LCS).selected()
            [<Algorithm.JACCARD: 'jaccard'>, <Algorithm.LCS: 'lcs'>]
        """
        from fuzzystring.options import ComparisonOptions

        return ComparisonOptions.of(self) | other

    __ror__ = __or__


__all__ = ["Algorithm"]
