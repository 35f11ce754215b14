"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class Date:
    """Day/month/year stamp.

    No calendar validation is performed; the values are kept as given.
    """

    day: int
    month: int
    year: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse the ``"dd mm yyyy"`` form."""
        parts = value.split()
        if len(parts) != 3:
            raise ValueError("Date must have exactly three parts: day month year")
        day, month, year = (int(part) for part in parts)
        return cls(day=day, month=month, year=year)

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


@dataclass(frozen=True)
class Money:
    """Price in the smallest currency unit."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return str(self.amount)
