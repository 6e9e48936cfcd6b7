"""
Pydantic schemas for case file validation.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Dict, List, Optional, Tuple, Literal

from ..geometry.tolerance import EPS


StepOperation = Literal[
    "set",
    "add",
    "sub",
    "multiply_scalar",
    "normalize",
    "set_length",
    "offset",
    "rotate",
    "length",
    "distance_to",
    "angle_to",
    "is_equal",
    "is_collinear_with",
    "is_perpendicular_with",
    "to_coord2d",
    "dot",
    "cross",
]

# Fields each operation needs besides 'target'
REQUIRED_FIELDS: Dict[str, Tuple[str, ...]] = {
    "set": ("components",),
    "add": ("other",),
    "sub": ("other",),
    "multiply_scalar": ("value",),
    "normalize": (),
    "set_length": ("value",),
    "offset": ("other", "value"),
    "rotate": ("axis", "angle_deg"),
    "length": (),
    "distance_to": ("other",),
    "angle_to": ("other",),
    "is_equal": ("other",),
    "is_collinear_with": ("other",),
    "is_perpendicular_with": ("other",),
    "to_coord2d": ("normal",),
    "dot": ("other",),
    "cross": ("other",),
}


class StepConfig(BaseModel):
    """A single operation applied to a named point."""
    op: StepOperation = Field(..., description="Operation name")
    target: str = Field(..., description="Point the operation is applied to")
    other: Optional[str] = Field(
        default=None,
        description="Second operand (point name); direction for 'offset'"
    )
    axis: Optional[str] = Field(default=None, description="Rotation axis (point name)")
    origin: Optional[str] = Field(
        default=None,
        description="Point on the rotation axis (defaults to the global origin)"
    )
    normal: Optional[str] = Field(default=None, description="Plane normal (point name)")
    value: Optional[float] = Field(
        default=None,
        description="Scalar argument (factor, length or distance)"
    )
    angle_deg: Optional[float] = Field(default=None, description="Rotation angle in degrees")
    components: Optional[Tuple[float, float, float]] = Field(
        default=None,
        description="New (x, y, z) for 'set'"
    )

    @model_validator(mode="after")
    def check_required_fields(self):
        """Each operation must carry the arguments it uses."""
        missing = [name for name in REQUIRED_FIELDS[self.op] if getattr(self, name) is None]
        if missing:
            raise ValueError(f"Operation '{self.op}' requires: {', '.join(missing)}")
        return self

    def referenced_points(self) -> List[str]:
        """Names of all points this step reads or writes."""
        names = [self.target, self.other, self.axis, self.origin, self.normal]
        return [name for name in names if name is not None]


class CaseConfig(BaseModel):
    """Top-level case configuration."""
    name: str = Field(..., description="Case name")
    description: str = Field(default="", description="Case description")
    tolerance: float = Field(
        default=EPS,
        gt=0,
        description="Tolerance for 'is_equal' steps"
    )
    points: Dict[str, Tuple[float, float, float]] = Field(
        ...,
        min_length=1,
        description="Named coordinates, each [x, y, z]"
    )
    steps: List[StepConfig] = Field(
        default_factory=list,
        description="Operations, applied in order"
    )

    class Config:
        """Pydantic config."""
        extra = "forbid"  # Catch typos in YAML
        validate_assignment = True

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError("Case name cannot be empty")
        return v.strip()

    @model_validator(mode="after")
    def check_point_references(self):
        """Every step must refer to defined points."""
        for index, step in enumerate(self.steps):
            unknown = [name for name in step.referenced_points() if name not in self.points]
            if unknown:
                raise ValueError(
                    f"Step {index} ({step.op}) references undefined points: {unknown}"
                )
        return self
