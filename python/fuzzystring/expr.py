"""Polars expression namespace for fuzzy string matching.

This module registers a `.fuzzy` namespace on Polars expressions,
enabling chainable fuzzy matching operations directly in Polars
expression contexts. Scores are the aggregate similarity of
:func:`fuzzystring.similarity_score` under the given comparison options.

Warning:
    Each row is scored in Python through map_elements. For large datasets
    prefer the Series helpers in ``fuzzystring.polars_api``.

Example:
    >>> import polars as pl
    >>> import fuzzystring  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
    >>> df.with_columns(
    ...     is_similar=pl.col("name").fuzzy.is_similar("John", min_similarity=0.8)
    ... )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

import polars as pl

from fuzzystring._core.matching import best_match as _best_match
from fuzzystring._core.scoring import similarity_score
from fuzzystring._utils import validate_min_similarity
from fuzzystring.options import ComparisonOptions

if TYPE_CHECKING:
    from fuzzystring.options import OptionsLike


@pl.api.register_expr_namespace("fuzzy")
class FuzzyExprNamespace:
    """
    Fuzzy string matching namespace for Polars expressions.

    Provides chainable methods for fuzzy matching directly on columns.
    Access via `.fuzzy` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def similarity(
        self,
        other: Union[str, pl.Expr],
        options: OptionsLike = ComparisonOptions.DEFAULT,
    ) -> pl.Expr:
        """
        Calculate similarity score between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            options: Algorithms and flags to use (default: Jaro-Winkler and
                Levenshtein)

        Returns:
            Expression producing similarity scores (0.0 to 1.0)

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name").fuzzy.similarity("John")
            ... )
            >>> df.with_columns(
            ...     score=pl.col("name1").fuzzy.similarity(pl.col("name2"))
            ... )
        """
        options = ComparisonOptions.coerce(options)

        if isinstance(other, str):
            return self._expr.map_elements(
                lambda s: similarity_score(s, other, options),
                return_dtype=pl.Float64,
            )

        # Compare against another column; a null on either side gives null
        def score_row(row):
            if row["_left"] is None or row["_right"] is None:
                return None
            return similarity_score(row["_left"], row["_right"], options)

        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            score_row,
            return_dtype=pl.Float64,
        )

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: float = 0.8,
        options: OptionsLike = ComparisonOptions.DEFAULT,
    ) -> pl.Expr:
        """
        Check if values are similar to another value/column above a threshold.

        Args:
            other: String literal or column expression to compare against
            min_similarity: Minimum similarity score to return True (0.0 to 1.0)
            options: Algorithms and flags to use

        Returns:
            Boolean expression

        Example:
            >>> df.filter(pl.col("name").fuzzy.is_similar("John", min_similarity=0.85))
        """
        validate_min_similarity(min_similarity)
        return self.similarity(other, options=options) >= min_similarity

    def best_match(
        self,
        choices: list[str],
        options: OptionsLike = ComparisonOptions.DEFAULT,
        min_similarity: float = 0.0,
    ) -> pl.Expr:
        """
        Find the best matching string from a list of choices.

        Args:
            choices: List of strings to match against
            options: Algorithms and flags to use
            min_similarity: Minimum score to return a match (otherwise null)

        Returns:
            Expression with the best matching string (or null)

        Example:
            >>> categories = ["Electronics", "Clothing", "Food"]
            >>> df.with_columns(
            ...     category=pl.col("raw_category").fuzzy.best_match(categories)
            ... )
        """
        validate_min_similarity(min_similarity)
        options = ComparisonOptions.coerce(options)

        def find_best(value):
            match = _best_match(value, choices, options)
            if match is None or match.similarity < min_similarity:
                return None
            return match.target

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8)

    def best_match_score(
        self,
        choices: list[str],
        options: OptionsLike = ComparisonOptions.DEFAULT,
        min_similarity: float = 0.0,
    ) -> pl.Expr:
        """
        Get both the best match and its score as a struct.

        Args:
            choices: List of strings to match against
            options: Algorithms and flags to use
            min_similarity: Minimum score to return a match

        Returns:
            Struct expression with fields 'match' and 'score'

        Example:
            >>> df.with_columns(
            ...     result=pl.col("name").fuzzy.best_match_score(candidates)
            ... ).select(
            ...     pl.col("result").struct.field("match"),
            ...     pl.col("result").struct.field("score"),
            ... )
        """
        validate_min_similarity(min_similarity)
        options = ComparisonOptions.coerce(options)

        def find_best_with_score(value):
            match = _best_match(value, choices, options)
            if match is None or match.similarity < min_similarity:
                return {"match": None, "score": None}
            return {"match": match.target, "score": match.similarity}

        return self._expr.map_elements(
            find_best_with_score,
            return_dtype=pl.Struct({"match": pl.Utf8, "score": pl.Float64}),
        )


__all__ = ["FuzzyExprNamespace"]
