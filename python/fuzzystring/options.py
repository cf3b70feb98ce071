"""Comparison options for the aggregate similarity score.

A ComparisonOptions value is an immutable set of selected algorithms plus a
case-insensitivity flag. Values combine with ``|`` and test membership with
``in``:

    >>> from fuzzystring import Algorithm, ComparisonOptions
    >>> options = ComparisonOptions.DEFAULT | Algorithm.JACCARD | ComparisonOptions.CASE_INSENSITIVE
    >>> Algorithm.JACCARD in options, options.case_insensitive
    (True, True)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Union

from fuzzystring._utils import normalize_algorithm
from fuzzystring.enums import Algorithm

if TYPE_CHECKING:
    OptionsLike = Union["ComparisonOptions", Algorithm, str, Iterable[Union[Algorithm, str]]]


@dataclass(frozen=True)
class ComparisonOptions:
    """Algorithms and flags to use in a comparison.

    Attributes:
        algorithms: The selected similarity algorithms.
        case_insensitive: Upper-case both strings before any algorithm runs.
            Characters whose upper case is longer (such as "ß") are left
            unchanged, so string lengths never change.
    """

    algorithms: frozenset[Algorithm] = frozenset()
    case_insensitive: bool = False

    DEFAULT: ClassVar[ComparisonOptions]
    ALL: ClassVar[ComparisonOptions]
    CASE_INSENSITIVE: ClassVar[ComparisonOptions]

    def __post_init__(self) -> None:
        # Accept any iterable of names or members and store canonical members
        normalized = frozenset(normalize_algorithm(a) for a in self.algorithms)
        object.__setattr__(self, "algorithms", normalized)

    @classmethod
    def of(cls, *algorithms: Algorithm | str, case_insensitive: bool = False) -> ComparisonOptions:
        """Build options from algorithm members or names.

        Example:
            >>> ComparisonOptions.of("jaccard", Algorithm.OVERLAP).selected()
            [<Algorithm.JACCARD: 'jaccard'>, <Algorithm.OVERLAP: 'overlap'>]
        """
        return cls(frozenset(algorithms), case_insensitive)

    @classmethod
    def coerce(cls, options: OptionsLike) -> ComparisonOptions:
        """Normalize anything accepted as options into a ComparisonOptions.

        Accepts a ComparisonOptions, a single Algorithm or algorithm name, or an
        iterable of algorithms and names.

        Raises:
            TypeError: If options is none of the accepted shapes.
            AlgorithmError: If a name is not a known algorithm.
        """
        if isinstance(options, ComparisonOptions):
            return options
        if isinstance(options, (Algorithm, str)):
            return cls.of(options)
        if isinstance(options, Iterable):
            return cls(frozenset(options))
        raise TypeError(
            "options must be ComparisonOptions, Algorithm, str or an iterable of those, "
            f"got {type(options).__name__}"
        )

    def selected(self) -> list[Algorithm]:
        """Selected algorithms in evaluation order."""
        return [a for a in Algorithm if a in self.algorithms]

    def __contains__(self, algorithm: object) -> bool:
        if isinstance(algorithm, (Algorithm, str)):
            return normalize_algorithm(algorithm) in self.algorithms
        return False

    def __or__(self, other: OptionsLike) -> ComparisonOptions:
        if not isinstance(other, (ComparisonOptions, Algorithm, str, Iterable)):
            return NotImplemented
        other = ComparisonOptions.coerce(other)
        return ComparisonOptions(
            self.algorithms | other.algorithms,
            self.case_insensitive or other.case_insensitive,
        )

    __ror__ = __or__

    def __repr__(self) -> str:
        names = ", ".join(a.value for a in self.selected())
        return f"ComparisonOptions({{{names}}}, case_insensitive={self.case_insensitive})"


ComparisonOptions.DEFAULT = ComparisonOptions.of(Algorithm.JARO_WINKLER, Algorithm.LEVENSHTEIN)
ComparisonOptions.ALL = ComparisonOptions(frozenset(Algorithm))
ComparisonOptions.CASE_INSENSITIVE = ComparisonOptions(case_insensitive=True)


__all__ = ["ComparisonOptions"]
