"""Number and Board models."""

from typing import Iterator

from pydantic import BaseModel, Field, model_validator

DEFAULT_SIZE = 100


class Number(BaseModel, frozen=True):
    """Single number on the board."""

    value: int
    crossed: bool = False


class Board(BaseModel, frozen=True):
    """The numbers 1..size, each either open or crossed off.

    Only the crossed values are stored; every board holds exactly ``size``
    numbers, so two boards with the same crossed values are equal.
    """

    size: int = Field(default=DEFAULT_SIZE, ge=1)
    crossed: frozenset[int] = frozenset()

    @model_validator(mode="after")
    def _check_crossed_range(self) -> "Board":
        outside = [v for v in self.crossed if not 1 <= v <= self.size]
        if outside:
            raise ValueError(f"Crossed values outside 1-{self.size}: {sorted(outside)}")
        return self

    @property
    def numbers(self) -> list[Number]:
        """Get all numbers in value order."""
        return [Number(value=v, crossed=v in self.crossed) for v in self.values()]

    def values(self) -> range:
        """Get the range of values on the board."""
        return range(1, self.size + 1)

    def contains(self, value: int) -> bool:
        """Check if value is on the board."""
        return 1 <= value <= self.size

    def is_crossed(self, value: int) -> bool:
        """Check if value has been crossed off."""
        return value in self.crossed

    def uncrossed(self) -> Iterator[int]:
        """Iterate over values not yet crossed, in ascending order."""
        return (v for v in self.values() if v not in self.crossed)

    def cross(self, value: int) -> "Board":
        """Return a copy of this board with value crossed off.

        Args:
            value: Value to cross off.

        Returns:
            New Board. This board is left unchanged.
        """
        if not self.contains(value):
            raise ValueError(f"{value} is not on the board (1-{self.size})")
        return self.model_copy(update={"crossed": self.crossed | {value}})

    def __getitem__(self, value: int) -> Number:
        if not self.contains(value):
            raise KeyError(value)
        return Number(value=value, crossed=value in self.crossed)

    def __len__(self) -> int:
        return self.size

    def __str__(self) -> str:
        return f"Board({self.size - len(self.crossed)}/{self.size} open)"
