"""Reading triangle lists from Wavefront OBJ text."""

from __future__ import annotations

import re
from os import PathLike
from typing import Iterable

Vertex = tuple[float, float, float]

_INDEX = re.compile(r"[+-]?\d+")


def _parse_position(text: str) -> Vertex:
    values = []
    for token in text.split()[:3]:
        try:
            values.append(float(token))
        except ValueError:
            break
    values.extend([0.0] * (3 - len(values)))
    return values[0], values[1], values[2]


def _position_index(token: str) -> int:
    first = token.split("/", 1)[0].strip()
    match = _INDEX.match(first)
    return int(match.group()) if match else 0


def parse_obj(lines: Iterable[str] | str) -> list[Vertex]:
    """Return the vertex positions of every face, in face order.

    Each face contributes one position per index; index 0 or a missing
    index is skipped. An index outside the vertex list raises ValueError.
    """
    if isinstance(lines, str):
        lines = lines.splitlines()
    positions: list[Vertex] = []
    result: list[Vertex] = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.startswith("v "):
            positions.append(_parse_position(line[2:]))
        elif line.startswith("f "):
            for token in line[2:].split(" "):
                index = _position_index(token)
                if index == 0:
                    continue
                if not 0 < index <= len(positions):
                    raise ValueError(f"face index {index} out of range")
                result.append(positions[index - 1])
    return result


def read_obj(filename: str | PathLike[str]) -> list[Vertex]:
    """Read an OBJ file and return its face vertex positions."""
    with open(filename, encoding="utf-8", errors="replace") as stream:
        return parse_obj(stream)