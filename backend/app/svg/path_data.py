"""Path data tokenizer and bounding-box reducer.

Only the commands that move the pen along straight runs (M, L, H, V) plus the
end point of cubic curves (C) contribute coordinates. Control points are not
recorded, so the box of a curved path can be smaller than what is drawn.
Every other command letter is tokenized and then ignored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

import numpy as np

from app.utils.geometry import bbox

COMMAND_LETTERS = "MmLlHhVvCcSsQqTtAaZz"

_COMMAND_RE = re.compile(rf"[{COMMAND_LETTERS}][^{COMMAND_LETTERS}]*")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass
class PathCommand:
    kind: str
    operands: list[float] = field(default_factory=list)

    @property
    def is_relative(self) -> bool:
        return self.kind.islower()


def tokenize_path(d: str) -> list[PathCommand]:
    """Split path data into commands. Text before the first command letter is dropped."""
    commands: list[PathCommand] = []
    for run in _COMMAND_RE.findall(d or ""):
        operands = [float(n) for n in _NUMBER_RE.findall(run[1:])]
        commands.append(PathCommand(kind=run[0], operands=operands))
    return commands


def trace_points(commands: list[PathCommand]) -> list[tuple[float, float]]:
    """Replay commands from (0, 0) and return every cursor position they record."""
    x = y = 0.0
    points: list[tuple[float, float]] = []

    for cmd in commands:
        kind = cmd.kind.upper()
        nums = cmd.operands
        rel = cmd.is_relative

        if kind in ("M", "L"):
            if len(nums) < 2:
                continue
            x = x + nums[0] if rel else nums[0]
            y = y + nums[1] if rel else nums[1]
        elif kind == "H":
            if len(nums) < 1:
                continue
            x = x + nums[0] if rel else nums[0]
        elif kind == "V":
            if len(nums) < 1:
                continue
            y = y + nums[0] if rel else nums[0]
        elif kind == "C":
            if len(nums) < 6:
                continue
            x = x + nums[4] if rel else nums[4]
            y = y + nums[5] if rel else nums[5]
        else:
            # Z plus S, Q, T, A: no coordinate effect
            continue

        points.append((x, y))

    return points


def path_bbox(d: str) -> tuple[float, float, float, float] | None:
    """Bounding box of path data as (x, y, width, height), or None if nothing was drawn."""
    points = trace_points(tokenize_path(d))
    if not points:
        return None
    xmin, ymin, xmax, ymax = bbox(np.array(points, dtype=np.float64))
    return (xmin, ymin, xmax - xmin, ymax - ymin)
