"""Shared fixtures: small Touchstone files written into a temporary directory."""

from __future__ import annotations

import pathlib

import pytest


EXAMPLE_S1P = """! two-point example
# GHZ S MA R 50
1.0 0.5 -10.0
2.0 0.8 -15.0
"""

EXAMPLE_S2P = """! 2-port in real/imaginary, MHz
# MHZ S RI R 75
100 0.1 0.2 0.3 0.4 0.5 0.6 0.7 0.8
200 0.2 0.3 0.4 0.5 0.6 0.7 0.8 0.9
300 0.3 -0.4 0.5 0.6 0.7 0.8 0.9 1.0
"""


@pytest.fixture()
def write_touchstone(tmp_path: pathlib.Path):
    """Factory writing `content` to `tmp_path / name` and returning the path."""

    def _write(content: str, name: str = "sample.s1p") -> pathlib.Path:
        fp = tmp_path / name
        fp.write_text(content)
        return fp

    return _write


@pytest.fixture()
def s1p_file(write_touchstone) -> pathlib.Path:
    return write_touchstone(EXAMPLE_S1P, "example.s1p")


@pytest.fixture()
def s2p_file(write_touchstone) -> pathlib.Path:
    return write_touchstone(EXAMPLE_S2P, "example.s2p")
