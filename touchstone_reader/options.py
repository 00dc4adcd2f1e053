"""Option line model: frequency unit, parameter type, format and reference resistance."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .errors import MalformedOptionToken

logger = logging.getLogger(__name__)


class FrequencyUnit(Enum):
    HZ = "HZ"
    KHZ = "KHZ"
    MHZ = "MHZ"
    GHZ = "GHZ"

    @property
    def scale(self) -> float:
        """Multiplier converting a value in this unit to Hz."""
        return _UNIT_SCALE[self]


_UNIT_SCALE = {
    FrequencyUnit.HZ: 1.0,
    FrequencyUnit.KHZ: 1e3,
    FrequencyUnit.MHZ: 1e6,
    FrequencyUnit.GHZ: 1e9,
}


class ParameterType(Enum):
    S = "S"
    Y = "Y"
    Z = "Z"
    H = "H"
    G = "G"


class ParameterFormat(Enum):
    """ MA: magnitude / angle (deg); DB: 20*log10 magnitude / angle (deg);
        RI: real / imaginary."""
    MA = "MA"
    DB = "DB"
    RI = "RI"


DEFAULT_RESISTANCE = 50.0


@dataclass(frozen=True)
class Options:
    frequency_unit: FrequencyUnit = FrequencyUnit.GHZ
    parameter_type: ParameterType = ParameterType.S
    parameter_format: ParameterFormat = ParameterFormat.MA
    reference_resistance: float = DEFAULT_RESISTANCE

    def __str__(self) -> str:
        return (
            f"# {self.frequency_unit.value} {self.parameter_type.value} "
            f"{self.parameter_format.value} R {self.reference_resistance:g}"
        )


# Upper-cased token -> (field name, category rank, enum member).
# The rank fixes the order in which categories may appear on the line.
_TOKENS: Dict[str, Tuple[str, int, Enum]] = {
    member.value: (field_name, rank, member)
    for rank, (enum_cls, field_name) in enumerate((
        (FrequencyUnit, "frequency_unit"),
        (ParameterType, "parameter_type"),
        (ParameterFormat, "parameter_format"),
    ))
    for member in enum_cls
}

# Decimal literal with optional exponent; no nan, inf or "_" separators.
NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_RESISTANCE_MARKER = "R"
_RESISTANCE_RANK = 3


def parse_option_line(line: str, line_number: Optional[int] = None) -> Options:
    """ Parse "# <freq_unit> <param_type> <format> R <resistance>".
        Tokens are case-insensitive; any of them may be left out, but those
        present must keep this order. Omitted options keep their defaults."""
    body = line.split("!", 1)[0].strip()
    if body.startswith("#"):
        body = body[1:]
    tokens = body.split()

    values: Dict[str, object] = {}
    last_rank = -1
    position = 0
    while position < len(tokens):
        token = tokens[position]
        key = token.upper()
        if key == _RESISTANCE_MARKER:
            rank = _RESISTANCE_RANK
        elif key in _TOKENS:
            rank = _TOKENS[key][1]
        else:
            raise MalformedOptionToken(token, position + 1, line_number, line)

        if rank <= last_rank:
            raise MalformedOptionToken(
                token, position + 1, line_number, line, detail="out-of-order option token")
        last_rank = rank

        if rank == _RESISTANCE_RANK:
            values["reference_resistance"] = _parse_resistance(tokens, position, line_number, line)
            position += 2
            continue

        field_name, _, member = _TOKENS[key]
        values[field_name] = member
        position += 1

    options = Options(**values)
    logger.debug("Parsed option line %r as %s", line.strip(), options)
    return options


def _parse_resistance(tokens, position: int, line_number: Optional[int], line: str) -> float:
    if position + 1 >= len(tokens):
        raise MalformedOptionToken(
            tokens[position], position + 1, line_number, line,
            detail="missing reference resistance after")
    raw = tokens[position + 1]
    if not NUMBER_RE.fullmatch(raw):
        raise MalformedOptionToken(
            raw, position + 2, line_number, line, detail="invalid reference resistance")
    value = float(raw)
    if not value > 0:
        raise MalformedOptionToken(
            raw, position + 2, line_number, line, detail="non-positive reference resistance")
    return value
