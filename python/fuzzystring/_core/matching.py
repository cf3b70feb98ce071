"""Match a source string against candidate targets."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import reduce
from typing import TYPE_CHECKING, List, Optional

from fuzzystring._core.results import MatchResult
from fuzzystring._core.scoring import similarity_score
from fuzzystring._utils import ensure_text
from fuzzystring.options import ComparisonOptions

if TYPE_CHECKING:
    from fuzzystring.options import OptionsLike

logger = logging.getLogger(__name__)


def matches(
    source: Optional[str],
    targets: Optional[Sequence[str]],
    options: OptionsLike = ComparisonOptions.DEFAULT,
) -> Optional[List[MatchResult]]:
    """
    Score a source string against every target.

    Args:
        source: The source string.
        targets: Candidate strings.
        options: Algorithms and flags to use in the comparison
            (default: Jaro-Winkler and Levenshtein).

    Returns:
        One MatchResult per target, in input order, with ``index`` set to the
        target's position. None when targets is None or empty, meaning there
        was nothing to compare.

    Raises:
        ValidationError: If options select no algorithm.

    Example:
        >>> [round(m.similarity, 2) for m in matches("hello", ["hallo", "world"])]
        [0.85, 0.33]
    """
    if targets is None or len(targets) == 0:
        return None

    options = ComparisonOptions.coerce(options)
    source = ensure_text(source, "source")

    results = []
    for index, target in enumerate(targets):
        similarity = similarity_score(source, target, options)
        results.append(MatchResult(index, similarity, source, target))

    logger.debug("matched %r against %d targets", source, len(results))
    return results


def best_match(
    source: Optional[str],
    targets: Optional[Sequence[str]],
    options: OptionsLike = ComparisonOptions.DEFAULT,
) -> Optional[MatchResult]:
    """
    Find the target most similar to the source.

    When several targets share the highest similarity, the first one in input
    order wins.

    Returns:
        The best MatchResult, or None when targets is None or empty.

    Raises:
        ValidationError: If options select no algorithm.

    Example:
        >>> best_match("Present Address Street", ["Present Address Street 1", "Present Address Street 2"]).index
        0
    """
    results = matches(source, targets, options)
    if results is None:
        return None
    return reduce(lambda best, other: other if other.similarity > best.similarity else best, results)


__all__ = ["matches", "best_match"]
