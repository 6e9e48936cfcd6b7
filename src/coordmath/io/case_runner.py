"""
Executes the steps of a case against its named coordinates.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List
import logging
import math

from ..config.schemas import CaseConfig, StepConfig
from ..geometry.primitives import (
    Coord,
    Coord2D,
    vector_cross,
    vector_dot,
)

logger = logging.getLogger(__name__)

MUTATING_OPERATIONS = (
    "set",
    "add",
    "sub",
    "multiply_scalar",
    "normalize",
    "set_length",
    "offset",
    "rotate",
)


@dataclass
class StepResult:
    """
    Outcome of one step.

    Attributes:
        op: Operation name
        target: Name of the point the step was applied to
        value: Snapshot of the target after a mutating step, otherwise the
            query result (float, bool, Coord or Coord2D)
    """
    op: str
    target: str
    value: Any

    def __str__(self) -> str:
        return f"{self.op}({self.target}) -> {self.value}"


class CaseRunner:
    """Applies case steps in order; mutations are visible to later steps."""

    def __init__(self, points: Dict[str, Coord], config: CaseConfig):
        self.points = points
        self.config = config

    def run(self) -> List[StepResult]:
        results = []
        for step in self.config.steps:
            result = self.run_step(step)
            logger.debug("%s", result)
            results.append(result)
        return results

    def run_step(self, step: StepConfig) -> StepResult:
        target = self.points[step.target]
        value = self._apply(step, target)
        if step.op in MUTATING_OPERATIONS:
            value = target.clone()
        return StepResult(op=step.op, target=step.target, value=value)

    def _point(self, name: str | None) -> Coord:
        if name is None:
            return Coord(0.0, 0.0, 0.0)
        return self.points[name]

    def _apply(self, step: StepConfig, target: Coord) -> Any:
        op = step.op
        other = self.points.get(step.other) if step.other is not None else None

        if op == "set":
            return target.set(*step.components)
        if op == "add":
            return target.add(other)
        if op == "sub":
            return target.sub(other)
        if op == "multiply_scalar":
            return target.multiply_scalar(step.value)
        if op == "normalize":
            return target.normalize()
        if op == "set_length":
            return target.set_length(step.value)
        if op == "offset":
            return target.offset(other, step.value)
        if op == "rotate":
            return target.rotate(
                self._point(step.axis),
                math.radians(step.angle_deg),
                self._point(step.origin)
            )
        if op == "length":
            return target.length()
        if op == "distance_to":
            return target.distance_to(other)
        if op == "angle_to":
            return target.angle_to(other)
        if op == "is_equal":
            return target.is_equal_with_eps(other, self.config.tolerance)
        if op == "is_collinear_with":
            return target.is_collinear_with(other)
        if op == "is_perpendicular_with":
            return target.is_perpendicular_with(other)
        if op == "to_coord2d":
            return target.to_coord2d(self._point(step.normal))
        if op == "dot":
            return vector_dot(target, other)
        if op == "cross":
            return vector_cross(target, other)

        raise ValueError(f"Unknown operation: {op}")


def format_value(value: Any) -> str:
    """Human-readable rendering of a step value."""
    if isinstance(value, (Coord, Coord2D)):
        return value.to_string()
    if isinstance(value, float):
        return f"{value:.6f}"
    return str(value)
