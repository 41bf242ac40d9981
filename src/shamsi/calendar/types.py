from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class ShamsiDate:
    """
    A Solar Hijri (Shamsi) calendar date.

    Ordering is lexicographic on (year, month, day).  Instances never compare
    equal to, or order against, a GregorianDate with the same fields.
    """

    year: int
    month: int
    day: int

    def as_tuple(self) -> tuple[int, int, int]:
        return self.year, self.month, self.day


@dataclass(frozen=True, slots=True, order=True)
class GregorianDate:
    """A proleptic Gregorian calendar date."""

    year: int
    month: int
    day: int

    def as_tuple(self) -> tuple[int, int, int]:
        return self.year, self.month, self.day


def ensure_shamsi(value: object) -> ShamsiDate:
    if not isinstance(value, ShamsiDate):
        raise TypeError(
            f"Expected a ShamsiDate, got {type(value).__name__}; "
            "convert explicitly with gregorian_to_shamsi()."
        )
    return value


def ensure_gregorian(value: object) -> GregorianDate:
    if not isinstance(value, GregorianDate):
        raise TypeError(
            f"Expected a GregorianDate, got {type(value).__name__}; "
            "convert explicitly with shamsi_to_gregorian()."
        )
    return value
