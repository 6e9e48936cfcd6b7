"""Configuration schemas for validation."""

from .schemas import StepOperation, StepConfig, CaseConfig

__all__ = [
    "StepOperation",
    "StepConfig",
    "CaseConfig",
]
