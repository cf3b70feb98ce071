"""Batch operations API for fuzzystring.

This module provides a consolidated API for list-based batch operations on
strings. Every function scores pairs with the aggregate similarity of
:func:`fuzzystring.similarity_score` under the given comparison options.

Example usage:
    >>> import fuzzystring.batch as batch

    # Compute similarity of query against all strings
    >>> results = batch.similarity(["hello", "hallo", "world"], "helo")
    >>> [(r.index, r.target) for r in results]
    [(0, 'hello'), (1, 'hallo'), (2, 'world')]

    # Find top N best matches
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
    >>> [m.target for m in matches]
    ['apple', 'apply']

    # Pairwise similarity between aligned lists
    >>> scores = batch.pairwise(["hello", "world"], ["hello", "word"])
    >>> scores[0]
    1.0

    # Full similarity matrix
    >>> matrix = batch.similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
    >>> # matrix[0] = similarities of "hello" with each choice
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fuzzystring._core.exceptions import ValidationError
from fuzzystring._core.matching import matches as _matches
from fuzzystring._core.results import MatchResult
from fuzzystring._core.scoring import similarity_score as _similarity_score
from fuzzystring._utils import validate_min_similarity
from fuzzystring.options import ComparisonOptions

if TYPE_CHECKING:
    from fuzzystring.options import OptionsLike

__all__ = [
    "similarity",
    "best_matches",
    "pairwise",
    "similarity_matrix",
]

logger = logging.getLogger(__name__)


def similarity(
    strings: list[str],
    query: str,
    options: OptionsLike = ComparisonOptions.DEFAULT,
) -> list[MatchResult]:
    """Compute similarity of a query against all strings.

    Args:
        strings: List of strings to compare against the query.
        query: The query string to match.
        options: Algorithms and flags to use (default: Jaro-Winkler and
            Levenshtein).

    Returns:
        List of MatchResult objects in the same order as input strings, with
        the query as ``source`` and ``index`` the position in ``strings``.
        An empty input gives an empty list.

    Raises:
        ValidationError: If options select no algorithm.
    """
    options = ComparisonOptions.coerce(options)
    if not options.algorithms:
        raise ValidationError("at least one comparison algorithm must be selected")
    return _matches(query, strings, options) or []


def best_matches(
    strings: list[str],
    query: str,
    options: OptionsLike = ComparisonOptions.DEFAULT,
    limit: int = 5,
    min_similarity: float = 0.0,
) -> list[MatchResult]:
    """Find top N best matches for a query from a list of strings.

    Computes similarity scores for all strings against the query, filters
    by minimum similarity, sorts by score descending, and returns the top
    matches up to the specified limit. Strings with equal scores keep their
    input order.

    Args:
        strings: List of strings to search.
        query: The query string to match.
        options: Algorithms and flags to use (default: Jaro-Winkler and
            Levenshtein).
        limit: Maximum number of results to return (default: 5).
        min_similarity: Minimum similarity score to include in results
            (default: 0.0, meaning all results are included).

    Returns:
        List of MatchResult objects sorted by score descending.

    Raises:
        ValidationError: If limit is below 1, min_similarity is outside
            [0.0, 1.0], or options select no algorithm.

    Example:
        >>> matches = best_matches(["apple", "apply", "banana"], "appel", limit=2)
        >>> [m.target for m in matches]
        ['apple', 'apply']
    """
    if limit < 1:
        raise ValidationError(f"limit must be at least 1, got {limit}")
    validate_min_similarity(min_similarity)

    results = [r for r in similarity(strings, query, options) if r.similarity >= min_similarity]
    # sorted() is stable, so ties stay in input order
    results = sorted(results, key=lambda r: r.similarity, reverse=True)
    logger.debug("best_matches for %r: %d of %d above %s", query, len(results), len(strings), min_similarity)
    return results[:limit]


def pairwise(
    left: list[str],
    right: list[str],
    options: OptionsLike = ComparisonOptions.DEFAULT,
) -> list[float]:
    """Compute pairwise similarity between two equal-length lists.

    Takes two lists of strings and computes the similarity for each
    corresponding pair (left[i], right[i]).

    Args:
        left: First list of strings.
        right: Second list of strings (must be same length as left).
        options: Algorithms and flags to use (default: Jaro-Winkler and
            Levenshtein).

    Returns:
        List of similarity scores (0.0 to 1.0), one for each pair.

    Raises:
        ValidationError: If left and right have different lengths.

    Example:
        >>> pairwise(["hello", "world"], ["hello", ""])
        [1.0, 0.0]
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have equal length, got {len(left)} and {len(right)}"
        )
    options = ComparisonOptions.coerce(options)
    return [_similarity_score(a, b, options) for a, b in zip(left, right)]


def similarity_matrix(
    queries: list[str],
    choices: list[str],
    options: OptionsLike = ComparisonOptions.DEFAULT,
) -> list[list[float]]:
    """Compute similarity matrix between all queries and all choices.

    Similar to scipy.spatial.distance.cdist, this function computes the
    similarity between every pair of strings from queries and choices,
    returning a 2D matrix.

    Args:
        queries: First list of strings (rows of output matrix).
        choices: Second list of strings (columns of output matrix).
        options: Algorithms and flags to use (default: Jaro-Winkler and
            Levenshtein).

    Returns:
        2D list where result[i][j] is the similarity between queries[i]
        and choices[j].

    Example:
        >>> matrix = similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
        >>> len(matrix)
        2
        >>> len(matrix[0])
        3
    """
    options = ComparisonOptions.coerce(options)
    return [[_similarity_score(q, c, options) for c in choices] for q in queries]

