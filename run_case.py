"""
Run a coordinate case defined by a YAML config file.
"""

import sys
import argparse
import logging
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from coordmath import __version__
from coordmath.io import CaseLoader, CaseRunner, format_value
from coordmath.logging_config import setup_logging
from coordmath.utils import message


def main():
    parser = argparse.ArgumentParser(description="Run a coordmath case")
    parser.add_argument("case_file", type=str, help="Path to YAML case file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, default=None, help="Also write log to this file")
    args = parser.parse_args()

    setup_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_file=args.log_file
    )
    message(f"version {__version__}")

    case_path = Path(args.case_file).resolve()
    if not case_path.exists():
        print(f"Error: Case file not found: {case_path}")
        sys.exit(1)

    print(f"Loading case: {case_path.name}")
    try:
        points, config = CaseLoader.load(case_path)
    except Exception as e:
        print(f"Error loading case: {e}")
        sys.exit(1)

    print(f"Case '{config.name}' loaded successfully.")
    if config.description:
        print(f"  {config.description}")

    print("Points:")
    for name, coord in points.items():
        print(f"  {name} = {coord}")

    print("Steps:")
    runner = CaseRunner(points, config)
    for index, result in enumerate(runner.run()):
        print(f"  [{index}] {result.op}({result.target}) -> {format_value(result.value)}")

    print("Done.")


if __name__ == "__main__":
    main()
