"""Line-by-line Touchstone reader: option line first, then data records."""

from __future__ import annotations

import logging
import math
import re
from typing import Iterable, List, Optional, Tuple

from .config import Config
from .datapoint import DataPoint, MeasurementPair
from .errors import (
    InvalidNumericToken,
    MalformedDataLine,
    MalformedOptionToken,
    MissingOptionLine,
)
from .options import NUMBER_RE, Options, parse_option_line

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"\S+")
_EXTENSION_RE = re.compile(r"\.s(\d+)p$", re.IGNORECASE)


def ports_from_extension(path: str) -> Optional[int]:
    """Port count encoded in a ".sNp" file name, or None."""
    match = _EXTENSION_RE.search(str(path))
    if not match:
        return None
    ports = int(match.group(1))
    return ports if ports > 0 else None


def _tokenize(line: str, line_number: int, text: str) -> List[float]:
    values: List[float] = []
    for match in _TOKEN_RE.finditer(line):
        token = match.group()
        value = float(token) if NUMBER_RE.fullmatch(token) else math.nan
        # Overflowing exponents ("1e999") parse to inf and are rejected too.
        if not math.isfinite(value):
            raise InvalidNumericToken(token, match.start() + 1, line_number, text)
        values.append(value)
    return values


class _RecordBuilder:
    """Groups numeric rows into DataPoints, following wrapped rows when the port
    count allows it."""

    def __init__(self, num_ports: Optional[int], config: Config) -> None:
        self.expected_pairs = num_ports * num_ports if num_ports else None
        self.check = config.check_port_count
        self.wrap = config.allow_wrapped_rows and num_ports is not None and num_ports >= 3
        self._frequency = 0.0
        self._values: List[float] = []
        self._start: Optional[Tuple[int, str]] = None

    def feed(self, values: List[float], line_number: int, text: str) -> Optional[DataPoint]:
        if self._start is not None:
            if len(values) % 2 != 0:
                raise MalformedDataLine(
                    f"record started on line {self._start[0]} has {len(self._values) // 2} of "
                    f"{self.expected_pairs} pairs", line_number, text)
            self._values.extend(values)
        else:
            if len(values) < 3 or len(values) % 2 == 0:
                raise MalformedDataLine(
                    f"expected a frequency followed by value pairs, got {len(values)} tokens",
                    line_number, text)
            if values[0] < 0:
                raise MalformedDataLine(f"negative frequency {values[0]:g}", line_number, text)
            self._frequency = values[0]
            self._values = values[1:]
            self._start = (line_number, text)

        pairs = len(self._values) // 2
        if self.wrap and pairs < self.expected_pairs:
            return None
        if self.check:
            if self.expected_pairs is None:
                self.expected_pairs = pairs
            elif pairs != self.expected_pairs:
                start_line, start_text = self._start
                raise MalformedDataLine(
                    f"expected {self.expected_pairs} value pairs, got {pairs}",
                    start_line, start_text)
        return self._emit()

    def _emit(self) -> DataPoint:
        v = self._values
        point = DataPoint(
            frequency=self._frequency,
            pairs=tuple(MeasurementPair(v[i], v[i + 1]) for i in range(0, len(v), 2)),
        )
        self._values = []
        self._start = None
        return point

    def finish(self) -> None:
        if self._start is not None:
            start_line, start_text = self._start
            raise MalformedDataLine(
                f"data ended inside a record "
                f"({len(self._values) // 2} of {self.expected_pairs} pairs)",
                start_line, start_text)


def parse(
    stream: Iterable[str],
    config: Optional[Config] = None,
    num_ports: Optional[int] = None,
) -> Tuple[Options, List[DataPoint]]:
    """Parse Touchstone text into its options and the data points in file order.

    `stream` is any iterable of lines. `num_ports` overrides the configured
    port count; when neither is set, the first record fixes the pair count.
    """
    config = config or Config()
    if num_ports is None:
        num_ports = config.num_ports
    builder = _RecordBuilder(num_ports, config)

    options: Optional[Options] = None
    points: List[DataPoint] = []
    for line_number, raw in enumerate(stream, start=1):
        raw = raw.rstrip("\r\n")
        content = raw.split("!", 1)[0]
        stripped = content.strip()
        if not stripped:
            continue

        if stripped.startswith("#"):
            if options is None:
                options = parse_option_line(raw, line_number)
            elif config.strict_option_line:
                raise MalformedOptionToken(stripped.split()[0], 0, line_number, raw,
                                           detail="option line after the first one")
            else:
                logger.warning("Ignoring repeated option line %d: %s", line_number, stripped)
            continue

        if options is None:
            if config.strict_option_line:
                raise MissingOptionLine("data line before any option line", line_number, raw)
            logger.warning("No option line before line %d; assuming %s", line_number, Options())
            options = Options()

        point = builder.feed(_tokenize(content, line_number, raw), line_number, raw)
        if point is not None:
            points.append(point)

    builder.finish()
    if options is None:
        options = Options()
    logger.debug("Parsed %d data points with options %s", len(points), options)
    return options, points
