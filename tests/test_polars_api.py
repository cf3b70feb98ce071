"""Tests for the Polars Series API (polars_api.py)."""

import polars as pl
import pytest

import fuzzystring as fs
from fuzzystring.polars_api import batch_best_match, batch_similarity


class TestBatchSimilarity:
    """Tests for batch_similarity function."""

    def test_basic_similarity(self):
        left = pl.Series(["hello", "world", "test"])
        right = pl.Series(["hallo", "word", "test"])

        result = batch_similarity(left, right)

        assert len(result) == 3
        assert result.name == "similarity"
        assert result.dtype == pl.Float64
        assert result[0] == pytest.approx(fs.similarity_score("hello", "hallo", fs.ComparisonOptions.DEFAULT))
        assert result[2] == 1.0, f"Expected 1.0 for test vs test, got {result[2]}"

    def test_with_options(self):
        left = pl.Series(["kitten", "beauties"])
        right = pl.Series(["sitting", "beautiful"])
        result = batch_similarity(left, right, "levenshtein")
        assert result.to_list() == pytest.approx([4 / 7, 2 / 3])

    def test_null_handling(self):
        left = pl.Series(["hello", None, "test"])
        right = pl.Series(["hello", "world", None])
        result = batch_similarity(left, right)
        assert result.to_list() == [1.0, None, None]

    def test_length_mismatch(self):
        with pytest.raises(fs.ValidationError, match="equal length"):
            batch_similarity(pl.Series(["a", "b"]), pl.Series(["a"]))

    def test_no_algorithm(self):
        with pytest.raises(fs.ValidationError):
            batch_similarity(pl.Series(["a"]), pl.Series(["b"]), [])

    def test_empty_series(self):
        result = batch_similarity(pl.Series([], dtype=pl.Utf8), pl.Series([], dtype=pl.Utf8))
        assert len(result) == 0
        assert result.dtype == pl.Float64

    def test_in_dataframe(self):
        df = pl.DataFrame({"a": ["hello", "world"], "b": ["hello", ""]})
        df = df.with_columns(score=batch_similarity(df["a"], df["b"]))
        assert df["score"].to_list() == [1.0, 0.0]


class TestBatchBestMatch:
    """Tests for batch_best_match function."""

    def test_basic_best_match(self):
        categories = ["Electronics", "Clothing", "Food", "Home"]
        queries = pl.Series(["Electronic", "Clothng", "Fod"])
        result = batch_best_match(queries, categories)
        assert result.name == "best_match"
        assert result.to_list() == ["Electronics", "Clothing", "Food"]

    def test_case_insensitive(self):
        options = fs.ComparisonOptions.DEFAULT | fs.ComparisonOptions.CASE_INSENSITIVE
        result = batch_best_match(pl.Series(["HOME"]), ["Food", "Home"], options)
        assert result.to_list() == ["Home"]

    def test_null_query(self):
        result = batch_best_match(pl.Series(["Food", None]), ["Food", "Home"])
        assert result.to_list() == ["Food", None]

    def test_min_similarity(self):
        result = batch_best_match(pl.Series(["Food", "xyzzy"]), ["Food", "Home"], min_similarity=0.8)
        assert result.to_list() == ["Food", None]

    def test_no_targets(self):
        result = batch_best_match(pl.Series(["Food"]), [])
        assert result.to_list() == [None]
        assert result.dtype == pl.Utf8

    def test_tie_keeps_first_target(self):
        result = batch_best_match(pl.Series(["abc"]), ["abe", "abd"])
        assert result.to_list() == ["abe"]

    def test_invalid_min_similarity(self):
        with pytest.raises(fs.ValidationError, match="min_similarity"):
            batch_best_match(pl.Series(["a"]), ["a"], min_similarity=-0.1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
