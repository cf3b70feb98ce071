"""Batch Polars API for fuzzy matching on Series.

This module applies the aggregate similarity of
:func:`fuzzystring.similarity_score` to Polars Series, handling nulls the way
Polars users expect: a null on either side gives a null result.

Functions in This Module
------------------------
- ``batch_similarity()``: Compute similarity between two aligned Series
- ``batch_best_match()``: Find the best target for each query in a Series

Example Usage
-------------
>>> import polars as pl
>>> import fuzzystring as fs
>>>
>>> df = pl.DataFrame({"a": ["hello", "world"], "b": ["hallo", "word"]})
>>> df = df.with_columns(score=fs.batch_similarity(df["a"], df["b"]))
>>>
>>> categories = ["Electronics", "Clothing", "Food", "Home"]
>>> raw = pl.Series(["electronic", "clothes", None])
>>> fs.batch_best_match(raw, categories, fs.ComparisonOptions.DEFAULT | fs.ComparisonOptions.CASE_INSENSITIVE)

See Also
--------
- ``fuzzystring.expr``: Polars expression namespace for column operations
- ``fuzzystring.batch``: The same operations on plain lists
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import polars as pl

from fuzzystring._core.exceptions import ValidationError
from fuzzystring._core.matching import best_match
from fuzzystring._core.scoring import similarity_score
from fuzzystring._utils import validate_min_similarity
from fuzzystring.options import ComparisonOptions

if TYPE_CHECKING:
    from fuzzystring.options import OptionsLike


def batch_similarity(
    left: pl.Series,
    right: pl.Series,
    options: OptionsLike = ComparisonOptions.DEFAULT,
) -> pl.Series:
    """
    Compute similarity between two Series row by row.

    Args:
        left: First string Series
        right: Second string Series (must be same length as left)
        options: Algorithms and flags to use (default: Jaro-Winkler and
            Levenshtein)

    Returns:
        Float64 Series named "similarity" with scores (0.0 to 1.0), null
        where either input is null

    Raises:
        ValidationError: If the Series have different lengths or options
            select no algorithm.

    Example:
        >>> df = pl.DataFrame({"a": ["hello", "world"], "b": ["hallo", "word"]})
        >>> df = df.with_columns(score=batch_similarity(df["a"], df["b"]))

    See Also:
        batch_best_match: Find best match from a list of choices
        similarity_score: Single-pair similarity computation
    """
    if len(left) != len(right):
        raise ValidationError("Series must have equal length")

    options = ComparisonOptions.coerce(options)
    scores = [
        None if a is None or b is None else similarity_score(str(a), str(b), options)
        for a, b in zip(left.to_list(), right.to_list())
    ]
    return pl.Series("similarity", scores, dtype=pl.Float64)


def batch_best_match(
    queries: pl.Series,
    targets: Sequence[str],
    options: OptionsLike = ComparisonOptions.DEFAULT,
    min_similarity: float = 0.0,
) -> pl.Series:
    """
    Find the best matching target for each query.

    Args:
        queries: Series of query strings
        targets: List of target strings to match against
        options: Algorithms and flags to use (default: Jaro-Winkler and
            Levenshtein)
        min_similarity: Minimum similarity threshold (0.0 to 1.0)

    Returns:
        Utf8 Series named "best_match" holding the best target, or null when
        the query is null, there are no targets, or the best score is below
        min_similarity. Ties go to the first target.

    Example:
        >>> categories = ["Electronics", "Clothing", "Food", "Home"]
        >>> df = df.with_columns(
        ...     category=batch_best_match(df["raw_category"], categories)
        ... )
    """
    validate_min_similarity(min_similarity)
    options = ComparisonOptions.coerce(options)

    best = []
    for query in queries.to_list():
        match = None if query is None else best_match(str(query), targets, options)
        if match is None or match.similarity < min_similarity:
            best.append(None)
        else:
            best.append(match.target)

    return pl.Series("best_match", best, dtype=pl.Utf8)


__all__ = ["batch_similarity", "batch_best_match"]
