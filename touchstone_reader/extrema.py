"""Running min/max of frequency and first-pair components."""

from __future__ import annotations

from typing import Iterable, Optional

from .datapoint import DataPoint
from .errors import EmptyDataset


class Extrema:
    def __init__(self) -> None:
        self._min_freq: Optional[float] = None
        self._max_freq: Optional[float] = None
        self._min_lhs: Optional[float] = None
        self._max_lhs: Optional[float] = None
        self._min_rhs: Optional[float] = None
        self._max_rhs: Optional[float] = None

    @classmethod
    def from_points(cls, points: Iterable[DataPoint]) -> "Extrema":
        extrema = cls()
        for point in points:
            extrema.update(point)
        return extrema

    @property
    def seeded(self) -> bool:
        return self._min_freq is not None

    def update(self, point: DataPoint) -> None:
        """Fold one point in; values are compared in the file's own unit and format."""
        freq = point.frequency
        first = point.pairs[0]
        if not self.seeded:
            self._min_freq = self._max_freq = freq
            self._min_lhs = self._max_lhs = first.lhs
            self._min_rhs = self._max_rhs = first.rhs
            return

        if freq < self._min_freq:
            self._min_freq = freq
        if freq > self._max_freq:
            self._max_freq = freq
        if first.lhs < self._min_lhs:
            self._min_lhs = first.lhs
        if first.lhs > self._max_lhs:
            self._max_lhs = first.lhs
        if first.rhs < self._min_rhs:
            self._min_rhs = first.rhs
        if first.rhs > self._max_rhs:
            self._max_rhs = first.rhs

    def _get(self, value: Optional[float]) -> float:
        if value is None:
            raise EmptyDataset("No data points loaded; extrema are undefined.")
        return value

    @property
    def min_freq(self) -> float:
        return self._get(self._min_freq)

    @property
    def max_freq(self) -> float:
        return self._get(self._max_freq)

    @property
    def min_lhs(self) -> float:
        return self._get(self._min_lhs)

    @property
    def max_lhs(self) -> float:
        return self._get(self._max_lhs)

    @property
    def min_rhs(self) -> float:
        return self._get(self._min_rhs)

    @property
    def max_rhs(self) -> float:
        return self._get(self._max_rhs)

    def __repr__(self) -> str:
        if not self.seeded:
            return "Extrema(<empty>)"
        return (
            f"Extrema(freq=[{self._min_freq}, {self._max_freq}], "
            f"lhs=[{self._min_lhs}, {self._max_lhs}], rhs=[{self._min_rhs}, {self._max_rhs}])"
        )
