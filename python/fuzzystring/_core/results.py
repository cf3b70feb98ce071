"""Result types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchResult:
    """
    Result from matches, best_match and batch operations.

    Attributes:
        index: Zero-based position of the target in the list passed to the call
        similarity: Aggregate similarity between source and target (0.0-1.0)
        source: The string compared to the target
        target: The candidate string

    Supports equality comparison and hashing for use in sets and as dict keys.
    """

    index: int
    similarity: float
    source: str
    target: str


__all__ = ["MatchResult"]
