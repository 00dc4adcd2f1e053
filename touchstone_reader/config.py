"""Parser configuration loading and validation (JSON + keyword overrides)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


DEFAULTS: Dict[str, Any] = {
    "strict_option_line": False,
    "num_ports": None,
    "infer_ports_from_extension": True,
    "check_port_count": True,
    "allow_wrapped_rows": True,
    "encoding": "utf-8",
}


@dataclass
class Config:
    data: Dict[str, Any] = field(default_factory=lambda: dict(DEFAULTS))

    @property
    def strict_option_line(self) -> bool:
        return bool(self.data["strict_option_line"])

    @property
    def num_ports(self) -> Optional[int]:
        value = self.data["num_ports"]
        return None if value is None else int(value)

    @property
    def infer_ports_from_extension(self) -> bool:
        return bool(self.data["infer_ports_from_extension"])

    @property
    def check_port_count(self) -> bool:
        return bool(self.data["check_port_count"])

    @property
    def allow_wrapped_rows(self) -> bool:
        return bool(self.data["allow_wrapped_rows"])

    @property
    def encoding(self) -> str:
        return str(self.data["encoding"])


_FLAGS = (
    "strict_option_line",
    "infer_ports_from_extension",
    "check_port_count",
    "allow_wrapped_rows",
)


def load_config(
    json_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Config:
    data = dict(DEFAULTS)
    if json_path:
        with open(json_path, "r") as handle:
            payload = json.load(handle)
        if not isinstance(payload, dict):
            raise ValueError(f"{json_path} must hold a JSON object.")
        data.update(payload)
    if overrides:
        data.update(overrides)

    _validate(data)
    return Config(data=data)


def _validate(data: Dict[str, Any]) -> None:
    unknown = sorted(set(data) - set(DEFAULTS))
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")
    for key in _FLAGS:
        if not isinstance(data[key], bool):
            raise ValueError(f"{key} must be true or false.")
    ports = data["num_ports"]
    if ports is not None and (isinstance(ports, bool) or not isinstance(ports, int) or ports < 1):
        raise ValueError("num_ports must be a positive integer or null.")
    if not isinstance(data["encoding"], str) or not data["encoding"]:
        raise ValueError("encoding must be a non-empty string.")
