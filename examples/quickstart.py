# %% [markdown]
# # fuzzystring: Quickstart
#
# **Which of these strings did you mean?**
#
# ---
#
# ## The Problem
#
# Column headers drift between spreadsheet versions. Someone adds a number,
# fixes a typo, wraps a label in brackets, leaves a trailing space:
#
# ```
# "Present Address Street"  vs  "Present Address Street 1"
# "Indicator if Retired?"   vs  "[Indicator if Retired?]"
# "Present Other Financing" vs  "Present Other Financning (P&I)"
# ```
#
# **fuzzystring** scores how alike two strings are with a family of classic
# measures, averages the ones you pick, and finds the best candidate in a list.
#
# ---
#
# ## Table of Contents
#
# | Part | Topic | Description |
# |------|-------|-------------|
# | 1 | The Hook | Best match in a list of headers |
# | 2 | Similarity Fundamentals | Individual measures on one pair |
# | 3 | Comparison Options | Picking algorithms, ignoring case |
# | 4 | Batch & Polars | Lists, Series and the `.fuzzy` namespace |

# %%
import polars as pl

import fuzzystring as fs
from fuzzystring import Algorithm, ComparisonOptions

# %% [markdown]
# ---
# ## Part 1: The Hook
#
# Map headers from a new spreadsheet onto the ones you already know.

# %%
known_headers = [
    "First Name",
    "Last Name",
    "Present Address Street 1",
    "Present Address Street 2",
    "Present Address City",
    "Present Other Financning (P&I)",
    "[Indicator if Retired?]",
    "Email ",
]

incoming = ["Present Address Street", "Indicator if Retired?", "E-mail", "Lastname"]

print("Header mapping:")
for header in incoming:
    match = fs.best_match(header, known_headers)
    print(f"  [{match.similarity:.0%}] {header!r} -> {match.target!r}")

# %% [markdown]
# Ties go to the first candidate, so "Street" maps to "Street 1".
# An empty candidate list gives `None`, not an error:

# %%
print(fs.best_match("anything", []))

# %% [markdown]
# ---
# ## Part 2: Similarity Fundamentals
#
# Every measure returns a score between 0.0 and 1.0. Two empty strings are
# identical; an empty string against a non-empty one shares nothing.

# %%
a, b = "beauties", "beautiful"

print(f"Comparing {a!r} and {b!r}")
print(f"  Levenshtein distance:   {fs.levenshtein_distance(a, b):.0f}")
print(f"  Edit distance:          {fs.edit_distance(a, b):.0f}")
print(f"  Longest common subseq:  {fs.longest_common_subsequence(a, b)!r}")
print(f"  Longest common substr:  {fs.longest_common_substring(a, b)!r}")
print()
for algorithm, score in fs.compare_algorithms(a, b).items():
    print(f"  {algorithm.value:<20} {score:.4f}")

# %% [markdown]
# Hamming similarity only compares strings of equal length:

# %%
print(fs.hamming_similarity("karolin", "kathrin"))  # 4/7
print(fs.hamming_similarity("karolin", "kathrine"))  # 0.0

# %% [markdown]
# Jaro-Winkler rewards a shared prefix. The boost per agreeing prefix
# character is capped at 0.25:

# %%
print(fs.jaro_similarity("MARTHA", "MARHTA"))
print(fs.jaro_winkler_similarity("MARTHA", "MARHTA"))
print(fs.jaro_winkler_similarity("MARTHA", "MARHTA", prefix_scale=0.25))

# %% [markdown]
# ---
# ## Part 3: Comparison Options
#
# `similarity_score` averages the algorithms you select. Options combine
# with `|`:

# %%
options = ComparisonOptions.of(Algorithm.JACCARD, Algorithm.LCS)
print(fs.similarity_score(a, b, options))

options = ComparisonOptions.DEFAULT | Algorithm.RATCLIFF_OBERSHELP | ComparisonOptions.CASE_INSENSITIVE
print(options)
print(fs.similarity_score("HELLO world", "hello World", options))

# %% [markdown]
# Names work anywhere options are accepted:

# %%
print(fs.similarity_score(a, b, ["levenshtein", "jaro-winkler"]))
print(fs.approximately_equals(a, b, "lcs", threshold=0.75))

# %% [markdown]
# Selecting nothing is an error:

# %%
try:
    fs.similarity_score(a, b, ComparisonOptions.CASE_INSENSITIVE)
except fs.ValidationError as e:
    print(f"ValidationError: {e}")

# %% [markdown]
# ---
# ## Part 4: Batch & Polars

# %%
movies = ["The Godfather", "Pulp Fiction", "Fight Club", "Inception", "The Matrix"]
for m in fs.batch.best_matches(movies, "pulp ficton", limit=2):
    print(f"  [{m.similarity:.0%}] {m.target}")

# %%
df = pl.DataFrame(
    {
        "raw": ["Electronic", "clothes", None, "fod"],
        "expected": ["Electronics", "Clothing", "Home", "Food"],
    }
)
categories = ["Electronics", "Clothing", "Food", "Home"]
ci = ComparisonOptions.DEFAULT | ComparisonOptions.CASE_INSENSITIVE

df = df.with_columns(
    score=fs.batch_similarity(df["raw"], df["expected"], ci),
    category=pl.col("raw").fuzzy.best_match(categories, options=ci),
    close=pl.col("raw").fuzzy.is_similar(pl.col("expected"), min_similarity=0.8, options=ci),
)
print(df)
