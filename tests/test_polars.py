"""Tests for the .fuzzy Polars expression namespace."""

import polars as pl
import pytest

import fuzzystring as fs


@pytest.fixture
def names_df():
    return pl.DataFrame({"name": ["John", "Jon", "Jane", None]})


class TestFuzzyExprSimilarity:
    """Tests for .fuzzy.similarity and .fuzzy.is_similar."""

    def test_similarity_with_literal(self, names_df):
        result = names_df.with_columns(score=pl.col("name").fuzzy.similarity("John"))
        scores = result["score"].to_list()
        assert scores[0] == 1.0
        assert scores[1] == pytest.approx(fs.similarity_score("Jon", "John", fs.ComparisonOptions.DEFAULT))
        assert scores[3] is None

    def test_similarity_between_columns(self):
        df = pl.DataFrame({"a": ["hello", "world", None], "b": ["hello", "", "x"]})
        result = df.with_columns(score=pl.col("a").fuzzy.similarity(pl.col("b")))
        assert result["score"].to_list() == [1.0, 0.0, None]

    def test_similarity_with_options(self):
        df = pl.DataFrame({"a": ["beauties"]})
        result = df.select(pl.col("a").fuzzy.similarity("beautiful", options="lcs"))
        assert result["a"].to_list() == [0.75]

    def test_case_insensitive(self):
        df = pl.DataFrame({"a": ["HELLO"]})
        options = fs.ComparisonOptions.DEFAULT | fs.ComparisonOptions.CASE_INSENSITIVE
        result = df.select(pl.col("a").fuzzy.similarity("hello", options=options))
        assert result["a"].to_list() == [1.0]

    def test_is_similar(self, names_df):
        result = names_df.filter(pl.col("name").fuzzy.is_similar("John", min_similarity=0.8))
        assert "John" in result["name"].to_list()
        assert "Jane" not in result["name"].to_list()

    def test_is_similar_invalid_threshold(self):
        with pytest.raises(fs.ValidationError):
            pl.col("name").fuzzy.is_similar("John", min_similarity=2.0)


class TestFuzzyExprBestMatch:
    """Tests for .fuzzy.best_match and .fuzzy.best_match_score."""

    def test_best_match(self):
        df = pl.DataFrame({"raw": ["Electronic", "Clothng", None]})
        categories = ["Electronics", "Clothing", "Food"]
        result = df.with_columns(category=pl.col("raw").fuzzy.best_match(categories))
        assert result["category"].to_list() == ["Electronics", "Clothing", None]

    def test_best_match_min_similarity(self):
        df = pl.DataFrame({"raw": ["Food", "xyzzy"]})
        result = df.with_columns(
            category=pl.col("raw").fuzzy.best_match(["Food", "Home"], min_similarity=0.8)
        )
        assert result["category"].to_list() == ["Food", None]

    def test_best_match_score(self):
        df = pl.DataFrame({"raw": ["Food", "Fod"]})
        result = df.with_columns(
            result=pl.col("raw").fuzzy.best_match_score(["Food", "Home"])
        ).select(
            pl.col("result").struct.field("match"),
            pl.col("result").struct.field("score"),
        )
        assert result["match"].to_list() == ["Food", "Food"]
        assert result["score"][0] == 1.0
        assert result["score"][1] == pytest.approx(
            fs.similarity_score("Fod", "Food", fs.ComparisonOptions.DEFAULT)
        )

    def test_best_match_score_below_threshold(self):
        df = pl.DataFrame({"raw": ["xyzzy"]})
        result = df.select(
            pl.col("raw").fuzzy.best_match_score(["Food"], min_similarity=0.9).alias("result")
        ).unnest("result")
        assert result["match"].to_list() == [None]
        assert result["score"].to_list() == [None]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
