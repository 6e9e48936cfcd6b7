"""IO utilities: case loader and runner."""

from .case_loader import CaseLoader
from .case_runner import CaseRunner, StepResult, format_value

__all__ = [
    "CaseLoader",
    "CaseRunner",
    "StepResult",
    "format_value",
]
