"""Touchstone file facade: owns the parsed points, options and extrema."""

from __future__ import annotations

import logging
from typing import Optional, Tuple
import numpy as np

from .config import Config
from .datapoint import DataPoint, Side
from .errors import FileError, InconsistentPairCount, IndexOutOfRange, ParamOutOfRange
from .extrema import Extrema
from .options import Options
from .parser import parse, ports_from_extension

logger = logging.getLogger(__name__)


class TouchstoneFile:
    """Read-only view of one Touchstone file.

    A fresh instance holds default options and no points. Each successful
    `open` replaces the whole dataset; a failed one leaves it as it was.
    """

    def __init__(self, path: Optional[str] = None, config: Optional[Config] = None) -> None:
        self.config = config or Config()
        self._path: Optional[str] = None
        self._options = Options()
        self._points: Tuple[DataPoint, ...] = ()
        self._extrema = Extrema()
        self._num_ports: Optional[int] = None
        if path is not None:
            self.open(path)

    def open(self, path: str) -> None:
        """Parse `path` and swap in its contents."""
        path = str(path)
        num_ports = self.config.num_ports
        if num_ports is None and self.config.infer_ports_from_extension:
            num_ports = ports_from_extension(path)

        try:
            with open(path, "r", encoding=self.config.encoding) as handle:
                options, points = parse(handle, self.config, num_ports=num_ports)
        except (OSError, UnicodeDecodeError) as exc:
            raise FileError(path, str(exc)) from exc

        extrema = Extrema.from_points(points)
        if num_ports is None and points:
            num_ports = points[0].num_ports

        self._path = path
        self._options = options
        self._points = tuple(points)
        self._extrema = extrema
        self._num_ports = num_ports
        logger.info("Loaded %d points from %s (%s)", len(points), path, options)

    @property
    def path(self) -> Optional[str]:
        return self._path

    @property
    def options(self) -> Options:
        return self._options

    @property
    def points(self) -> Tuple[DataPoint, ...]:
        return self._points

    @property
    def num_ports(self) -> Optional[int]:
        return self._num_ports

    def __len__(self) -> int:
        return len(self._points)

    def get_num_points(self) -> int:
        return len(self._points)

    def point(self, index: int) -> DataPoint:
        if index < 0 or index >= len(self._points):
            raise IndexOutOfRange(
                f"Point index {index} out of range for {len(self._points)} points.")
        return self._points[index]

    def at(self, index: int, side: Side, param: int) -> Tuple[float, float]:
        """ Pair `param` of point `index`, ordered with the chosen side first:
            LHS -> (lhs, rhs), RHS -> (rhs, lhs)."""
        if not isinstance(side, Side):
            raise TypeError(f"side must be Side.LHS or Side.RHS, got {side!r}")
        point = self.point(index)
        if param < 0 or param >= len(point.pairs):
            raise ParamOutOfRange(
                f"Parameter {param} out of range for {len(point.pairs)} pairs at index {index}.")
        pair = point.pairs[param]
        other = Side.RHS if side is Side.LHS else Side.LHS
        return pair.component(side), pair.component(other)

    def get_max_freq(self) -> float:
        return self._extrema.max_freq

    def get_min_freq(self) -> float:
        return self._extrema.min_freq

    def get_max_lhs(self) -> float:
        return self._extrema.max_lhs

    def get_min_lhs(self) -> float:
        return self._extrema.min_lhs

    def get_max_rhs(self) -> float:
        return self._extrema.max_rhs

    def get_min_rhs(self) -> float:
        return self._extrema.min_rhs

    def frequencies(self, hz: bool = False) -> np.ndarray:
        """Frequencies in file order; in the file's unit unless `hz` is set."""
        freq = np.array([p.frequency for p in self._points], dtype=float)
        return freq * self._options.frequency_unit.scale if hz else freq

    def to_complex(self) -> np.ndarray:
        """Complex values with shape [n_points, n_pairs]. Every point must
        hold the same number of pairs."""
        if not self._points:
            return np.zeros((0, 0), dtype=complex)
        counts = sorted({len(p.pairs) for p in self._points})
        if len(counts) > 1:
            raise InconsistentPairCount(
                f"Points hold differing pair counts {counts}; no rectangular array exists.")
        fmt = self._options.parameter_format
        return np.array([p.to_complex(fmt) for p in self._points])

    def network_matrix(self, index: int) -> np.ndarray:
        """ N x N complex matrix for point `index`.
            2-port rows are N11 N21 N12 N22 (column order); larger files are row order."""
        point = self.point(index)
        ports = point.num_ports
        if ports is None:
            raise InconsistentPairCount(
                f"{len(point.pairs)} pairs at index {index} do not form a square matrix.")
        values = point.to_complex(self._options.parameter_format).reshape(ports, ports)
        return values.T if ports == 2 else values

    def __repr__(self) -> str:
        path = self._path or "<unopened>"
        return f"<TouchstoneFile {path} · {len(self._points)} pts · {self._options}>"
