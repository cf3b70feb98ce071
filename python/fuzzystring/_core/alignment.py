"""Alignment-based metrics: Jaro, Jaro-Winkler, LCS, longest common substring
and Ratcliff-Obershelp.

References:
    https://en.wikipedia.org/wiki/Jaro%E2%80%93Winkler_distance
    https://en.wikipedia.org/wiki/Longest_common_subsequence_problem
    https://en.wikipedia.org/wiki/Longest_common_substring
    https://en.wikipedia.org/wiki/Gestalt_pattern_matching
"""

from typing import List, Optional

from fuzzystring._core.trivial import trivial_similarity
from fuzzystring._utils import clamp, ensure_text

# Winkler only boosts scores above this value
WINKLER_THRESHOLD = 0.7
MAX_PREFIX_LENGTH = 4
MAX_PREFIX_SCALE = 0.25


def jaro_similarity(source: Optional[str], target: Optional[str]) -> float:
    """
    Compute Jaro similarity (0.0 to 1.0).

    Characters match when they are equal and no further apart than half the
    longer length minus one. Each character is matched at most once on each
    side, claiming the first free candidate in its window.

    Complexity:
        Time: O(m*n) worst case, typically O(m+n) for similar strings.
        Space: O(m+n) for matching character tracking.

    Example:
        >>> round(jaro_similarity("MARTHA", "MARHTA"), 4)
        0.9444
    """
    trivial = trivial_similarity(source, target)
    if trivial is not None:
        return trivial

    sl = len(source)
    tl = len(target)
    window = max(0, max(sl, tl) // 2 - 1)

    source_matched = [False] * sl
    target_matched = [False] * tl
    matches = 0

    for i, s in enumerate(source):
        for j in range(max(0, i - window), min(i + window + 1, tl)):
            if target_matched[j] or target[j] != s:
                continue
            source_matched[i] = True
            target_matched[j] = True
            matches += 1
            break

    if matches < 1:
        return 0.0

    source_chars = [c for c, matched in zip(source, source_matched) if matched]
    target_chars = [c for c, matched in zip(target, target_matched) if matched]
    transpositions = sum(1 for s, t in zip(source_chars, target_chars) if s != t) / 2

    return (matches / sl + matches / tl + (matches - transpositions) / matches) / 3


def jaro_winkler_similarity(
    source: Optional[str],
    target: Optional[str],
    prefix_scale: float = 0.1,
) -> float:
    """
    Compute Jaro-Winkler similarity (0.0 to 1.0).

    Extends Jaro similarity by giving extra weight to strings that agree at
    the start. Only Jaro scores above 0.7 are boosted, and only the first four
    positions are considered.

    Args:
        source: First string
        target: Second string
        prefix_scale: Weight given to each agreeing prefix position, clamped
            to [0.0, 0.25] (default 0.1)

    Example:
        >>> round(jaro_winkler_similarity("MARTHA", "MARHTA"), 4)
        0.9611
    """
    similarity = jaro_similarity(source, target)
    if similarity <= WINKLER_THRESHOLD or similarity == 1.0:
        return similarity

    prefix_scale = clamp(prefix_scale, 0.0, MAX_PREFIX_SCALE)
    prefix = min(MAX_PREFIX_LENGTH, len(source), len(target))
    agreeing = sum(1 for s, t in zip(source[:prefix], target[:prefix]) if s == t)

    return similarity + agreeing * prefix_scale * (1 - similarity)


def longest_common_subsequence(source: Optional[str], target: Optional[str]) -> str:
    """
    Get one Longest Common Subsequence of two strings.

    When two paths through the table keep the same length, the walk back
    steps along the target first, so later source characters are preferred.

    Complexity:
        Time: O(m*n) where m, n are string lengths.
        Space: O(m*n) for the backtracking table.

    Example:
        >>> longest_common_subsequence("ABCDGH", "AEDFHR")
        'ADH'
    """
    source = ensure_text(source, "source")
    target = ensure_text(target, "target")
    if not source or not target:
        return ""

    m = len(source)
    n = len(target)
    table = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        row, above = table[i], table[i - 1]
        for j in range(1, n + 1):
            if source[i - 1] == target[j - 1]:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(row[j - 1], above[j])

    chars = []
    i, j = m, n
    while i > 0 and j > 0:
        if source[i - 1] == target[j - 1]:
            chars.append(source[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] >= table[i - 1][j]:
            j -= 1
        else:
            i -= 1

    chars.reverse()
    return "".join(chars)


def longest_common_substring(source: Optional[str], target: Optional[str]) -> str:
    """
    Get the longest common contiguous substring.

    Runs are scanned row by row over the source. A later run only replaces
    the tracked substring when it is strictly longer, so among runs of equal
    length the one ending first in the source wins. A longer run that starts
    where the tracked run starts extends it.

    Complexity:
        Time: O(m*n) where m, n are string lengths.
        Space: O(n) using two rows of the DP table.

    Example:
        >>> longest_common_substring("abcdef", "zbcdf")
        'bcd'
    """
    source = ensure_text(source, "source")
    target = ensure_text(target, "target")
    if not source or not target:
        return ""

    longest = 0
    start = 0
    previous = [0] * (len(target) + 1)

    for i, s in enumerate(source):
        current = [0] * (len(target) + 1)
        for j, t in enumerate(target):
            if s != t:
                continue
            run = previous[j] + 1
            current[j + 1] = run
            if run > longest:
                longest = run
                start = i - run + 1
        previous = current

    return source[start:start + longest]


def lcs_similarity(source: Optional[str], target: Optional[str]) -> float:
    """
    Compute LCS-based similarity: LCS length over the shorter length.

    Example:
        >>> lcs_similarity("ABCDGH", "AEDFHR")
        0.5
    """
    trivial = trivial_similarity(source, target)
    if trivial is not None:
        return trivial
    return len(longest_common_subsequence(source, target)) / min(len(source), len(target))


def lcsubstring_similarity(source: Optional[str], target: Optional[str]) -> float:
    """Compute longest common substring length over the shorter length."""
    trivial = trivial_similarity(source, target)
    if trivial is not None:
        return trivial
    return len(longest_common_substring(source, target)) / min(len(source), len(target))


def common_substrings(source: Optional[str], target: Optional[str]) -> List[str]:
    """
    Decompose two strings into their common substrings, in the order found.

    Repeatedly takes the longest common substring and removes every
    occurrence of it from both strings, until nothing is shared. Removal can
    join characters into a new, longer shared run, so later substrings are
    not necessarily shorter. Each round shortens both strings, so at most
    min(m, n) rounds run.

    Example:
        >>> common_substrings("beauties", "beautiful")
        ['beauti']
    """
    source = ensure_text(source, "source")
    target = ensure_text(target, "target")

    found = []
    substring = longest_common_substring(source, target)
    while substring:
        found.append(substring)
        source = source.replace(substring, "")
        target = target.replace(substring, "")
        substring = longest_common_substring(source, target)
    return found


def ratcliff_obershelp_similarity(source: Optional[str], target: Optional[str]) -> float:
    """
    Compute Ratcliff-Obershelp similarity: twice the number of characters in
    common substrings over the total length.

    Example:
        >>> ratcliff_obershelp_similarity("beauties", "beautiful")
        0.7058823529411765
    """
    trivial = trivial_similarity(source, target)
    if trivial is not None:
        return trivial
    shared = sum(len(s) for s in common_substrings(source, target))
    return 2.0 * shared / (len(source) + len(target))


__all__ = [
    "jaro_similarity",
    "jaro_winkler_similarity",
    "longest_common_subsequence",
    "longest_common_substring",
    "lcs_similarity",
    "lcsubstring_similarity",
    "common_substrings",
    "ratcliff_obershelp_similarity",
]
