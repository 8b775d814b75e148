"""Asset domain model."""

from dataclasses import dataclass
from fractions import Fraction

from rebalancer.core.exceptions import InvalidInputError
from rebalancer.core.numeric import RationalLike, parse_rational


@dataclass(frozen=True)
class Asset:
    """
    A single holding tracked by the allocation policy.

    - name: ticker symbol, unique within a Portfolio
    - target_fraction: intended share of total value, in [0, 1]
    - value: current dollar value held (never negative)

    Numeric fields are coerced to Fraction on construction.
    """

    name: str
    target_fraction: Fraction
    value: Fraction

    def __post_init__(self) -> None:
        object.__setattr__(self, "target_fraction", parse_rational(self.target_fraction))
        object.__setattr__(self, "value", parse_rational(self.value))
        if self.value < 0:
            raise InvalidInputError(f"Value of {self.name} must not be negative: {self.value}")

    @classmethod
    def new(cls, name: str, target_fraction: RationalLike, value: RationalLike) -> "Asset":
        """Construct an Asset from loosely typed numeric inputs."""
        return cls(name=name, target_fraction=target_fraction, value=value)

    def with_value(self, value: RationalLike) -> "Asset":
        """Return a copy of this asset holding a different dollar value."""
        return Asset(name=self.name, target_fraction=self.target_fraction, value=value)
