"""Per-frequency records and conversions between pair representations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
import numpy as np

from .options import Options, ParameterFormat


class Side(Enum):
    """Component of a complementary pair: (MAG, ANGLE), (DB, ANGLE) or (REAL, IMAG)."""
    LHS = "lhs"
    RHS = "rhs"


@dataclass(frozen=True)
class MeasurementPair:
    lhs: float
    rhs: float

    def component(self, side: Side) -> float:
        if side is Side.LHS:
            return self.lhs
        if side is Side.RHS:
            return self.rhs
        raise TypeError(f"side must be Side.LHS or Side.RHS, got {side!r}")

    def to_complex(self, fmt: ParameterFormat) -> complex:
        return complex(_to_complex(fmt, np.asarray(self.lhs), np.asarray(self.rhs)))


@dataclass(frozen=True)
class DataPoint:
    frequency: float
    pairs: Tuple[MeasurementPair, ...]

    def frequency_hz(self, options: Options) -> float:
        return self.frequency * options.frequency_unit.scale

    @property
    def num_ports(self) -> Optional[int]:
        """Port count implied by the pair count, or None if it is not a square."""
        root = math.isqrt(len(self.pairs))
        return root if root * root == len(self.pairs) and root > 0 else None

    def to_complex(self, fmt: ParameterFormat) -> np.ndarray:
        lhs = np.array([p.lhs for p in self.pairs], dtype=float)
        rhs = np.array([p.rhs for p in self.pairs], dtype=float)
        return _to_complex(fmt, lhs, rhs)


def _to_complex(fmt: ParameterFormat, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """ Convert (a,b) values into complex numbers based on the format:
        RI: a=real, b=imag; MA: a=mag, b=angle deg; DB: a=dB, b=angle deg."""
    if fmt is ParameterFormat.RI:
        return a + 1j * b
    if fmt is ParameterFormat.MA:
        return a * np.exp(1j * np.deg2rad(b))
    if fmt is ParameterFormat.DB:
        mag = 10 ** (a / 20.0)
        return mag * np.exp(1j * np.deg2rad(b))
    raise ValueError(f"Unsupported format: {fmt}")


def _from_complex(fmt: ParameterFormat, value: complex) -> MeasurementPair:
    if fmt is ParameterFormat.RI:
        return MeasurementPair(float(value.real), float(value.imag))
    mag = abs(value)
    angle = float(np.rad2deg(np.angle(value)))
    if fmt is ParameterFormat.MA:
        return MeasurementPair(float(mag), angle)
    if fmt is ParameterFormat.DB:
        # A zero magnitude has no finite dB value.
        db = 20.0 * math.log10(mag) if mag > 0 else -math.inf
        return MeasurementPair(db, angle)
    raise ValueError(f"Unsupported format: {fmt}")


def convert_pair(
    pair: MeasurementPair,
    source: ParameterFormat,
    target: ParameterFormat,
) -> MeasurementPair:
    """Re-express a pair read in `source` format in the `target` format."""
    if source is target:
        return pair
    if {source, target} == {ParameterFormat.MA, ParameterFormat.DB}:
        # Angle carries over unchanged between the two polar forms.
        if target is ParameterFormat.DB:
            db = 20.0 * math.log10(pair.lhs) if pair.lhs > 0 else -math.inf
            return MeasurementPair(db, pair.rhs)
        return MeasurementPair(10 ** (pair.lhs / 20.0), pair.rhs)
    return _from_complex(target, pair.to_complex(source))
