"""
YAML case file loader with validation.
"""

from pathlib import Path
from typing import Dict
import logging
import yaml

from ..config.schemas import CaseConfig
from ..geometry.primitives import Coord

logger = logging.getLogger(__name__)


class CaseLoader:
    """Load and validate coordinate cases from YAML files."""

    @staticmethod
    def load(filepath: str | Path) -> tuple[Dict[str, Coord], CaseConfig]:
        """
        Load case file and build its named coordinates.

        Args:
            filepath: Path to YAML case file

        Returns:
            Tuple of (name -> Coord mapping, validated config)
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"Case file not found: {filepath}")

        with open(filepath, 'r') as f:
            raw_config = yaml.safe_load(f)

        config = CaseConfig(**raw_config)
        points = CaseLoader.build_points(config)

        logger.info(
            "Loaded case '%s': %d points, %d steps",
            config.name, len(points), len(config.steps)
        )
        return points, config

    @staticmethod
    def build_points(config: CaseConfig) -> Dict[str, Coord]:
        """Create a fresh Coord for every named point in config."""
        return {name: Coord.from_array(xyz) for name, xyz in config.points.items()}

    @staticmethod
    def validate(filepath: str | Path) -> bool:
        """
        Validate case file without building points.

        Returns:
            True if valid, raises ValidationError otherwise
        """
        filepath = Path(filepath)

        with open(filepath, 'r') as f:
            raw_config = yaml.safe_load(f)

        # This will raise ValidationError if invalid
        CaseConfig(**raw_config)

        return True
