"""
Module: weights

Purpose:
    Provides the WeightSpec dataclass - the ordered relative sizes of the
    rows or columns along one axis. A bare count N is shorthand for N
    equal weights.

Key Functions:
    - WeightSpec.uniform(n): N equal divisions
    - WeightSpec.parse(value): Normalize CLI-style input
    - parse_weights(value): Module-level alias of WeightSpec.parse

Dependencies:
    - dataclasses (std)
    - splix.errors: InvalidSpecificationError

Used By:
    - splix.config.SplitConfig
    - splix.slicing.partition
    - splix.cli
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate
from typing import Sequence, Union

from splix.errors import InvalidSpecificationError

WeightInput = Union[int, str, Sequence[Union[int, str]]]


@dataclass(frozen=True, slots=True)
class WeightSpec:
    """
    Relative sizes of the divisions along one axis.

    Attributes:
        weights: Positive integer weights in axis order.

    Invariants:
        - len(weights) >= 1
        - every weight is an int > 0

    Example:
        >>> WeightSpec.parse("2,3,1,5").total
        11
        >>> WeightSpec.parse(4).weights
        (1, 1, 1, 1)
    """

    weights: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate weights on construction."""
        if not self.weights:
            raise InvalidSpecificationError("weights must not be empty")
        for weight in self.weights:
            if isinstance(weight, bool) or not isinstance(weight, int):
                raise InvalidSpecificationError(f"weight must be an integer: {weight!r}")
            if weight <= 0:
                raise InvalidSpecificationError(f"weight must be > 0: {weight}")

    @classmethod
    def uniform(cls, count: int) -> WeightSpec:
        """Create a spec of ``count`` equal divisions."""
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidSpecificationError(f"count must be an integer: {count!r}")
        if count <= 0:
            raise InvalidSpecificationError(f"count must be > 0: {count}")
        return cls((1,) * count)

    @classmethod
    def parse(cls, value: WeightInput) -> WeightSpec:
        """
        Normalize a row/column argument into a WeightSpec.

        A single integer (or a single token such as ``["4"]``) is a count
        of equal divisions. Two or more tokens are taken as weights
        verbatim. Strings are split on commas.

        Args:
            value: int, comma-separated string, or sequence of ints/strings.

        Returns:
            WeightSpec for the value.

        Raises:
            InvalidSpecificationError: If the value is empty, contains a
                non-positive number, or a token that is not an integer.

        Example:
            >>> WeightSpec.parse(["2", "3", "1", "5"]).weights
            (2, 3, 1, 5)
        """
        if isinstance(value, str):
            tokens: Sequence[Union[int, str]] = value.split(",")
        elif isinstance(value, int):
            tokens = [value]
        else:
            tokens = list(value)

        numbers = [_parse_token(token) for token in tokens]
        if not numbers:
            raise InvalidSpecificationError("specification must not be empty")
        if len(numbers) == 1:
            return cls.uniform(numbers[0])
        return cls(tuple(numbers))

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def total(self) -> int:
        """Sum of all weights."""
        return sum(self.weights)

    @property
    def count(self) -> int:
        """Number of divisions."""
        return len(self.weights)

    @property
    def is_uniform(self) -> bool:
        """True when every division has the same weight."""
        return len(set(self.weights)) == 1

    def cumulative(self) -> tuple[int, ...]:
        """Running weight totals, starting at 0 and ending at ``total``."""
        return (0, *accumulate(self.weights))

    def __len__(self) -> int:
        return len(self.weights)

    def __str__(self) -> str:
        if self.is_uniform and self.weights[0] == 1:
            return str(self.count)
        return ",".join(str(w) for w in self.weights)


def _parse_token(token: Union[int, str]) -> int:
    if isinstance(token, bool):
        raise InvalidSpecificationError(f"not an integer: {token!r}")
    if isinstance(token, int):
        return token
    text = str(token).strip()
    try:
        return int(text)
    except ValueError:
        raise InvalidSpecificationError(f"not an integer: {text!r}") from None


def parse_weights(value: WeightInput) -> WeightSpec:
    """Parse a row/column argument. See WeightSpec.parse."""
    return WeightSpec.parse(value)
