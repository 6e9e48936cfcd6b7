"""
Test helper utilities and logging setup.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from coordmath.logging_config import setup_logging
from coordmath.utils import (
    random_number,
    random_int,
    random_boolean,
    seeded_random_int,
    value_or_default,
    prev_index,
    next_index,
    copy_object_properties,
    get_object_property,
    message,
)


class TestRandom:
    """Test random helpers stay within bounds."""

    def test_random_number_range(self):
        for _ in range(200):
            value = random_number(-2.0, 3.0)
            assert -2.0 <= value < 3.0

    def test_random_int_inclusive(self):
        seen = {random_int(1, 3) for _ in range(500)}
        assert seen <= {1, 2, 3}
        assert len(seen) == 3

    def test_random_boolean(self):
        assert isinstance(random_boolean(), bool)

    def test_seeded_random_int(self):
        assert seeded_random_int(0, 10, 1) == seeded_random_int(0, 10, 1)
        assert seeded_random_int(0, 10, 1) == 2
        for seed in range(100):
            assert 0 <= seeded_random_int(0, 10, seed) <= 10


class TestValues:
    """Test default-value, index and property helpers."""

    def test_value_or_default(self):
        assert value_or_default(None, 5) == 5
        assert value_or_default(0, 5) == 0
        assert value_or_default("x", 5) == "x"

    def test_circular_indices(self):
        assert prev_index(0, 5) == 4
        assert prev_index(3, 5) == 2
        assert next_index(4, 5) == 0
        assert next_index(1, 5) == 2

    def test_copy_dict_properties(self):
        source = {"a": 1, "b": 2}
        target = {"a": 10, "c": None}
        copy_object_properties(source, target, overwrite=False)
        assert target == {"a": 10, "b": 2, "c": None}

        copy_object_properties(source, target, overwrite=True)
        assert target["a"] == 1

    def test_copy_object_attributes(self):
        class Options:
            def __init__(self, **kwargs):
                self.__dict__.update(kwargs)

        target = Options(colour=None, width=3)
        copy_object_properties({"colour": "red", "width": 9}, target, overwrite=False)
        assert target.colour == "red"
        assert target.width == 3

    def test_copy_none_is_noop(self):
        target = {"a": 1}
        copy_object_properties(None, target, overwrite=True)
        copy_object_properties({"a": 2}, None, overwrite=True)
        assert target == {"a": 1}

    def test_get_object_property(self):
        assert get_object_property({"a": 1}, "a", 0) == 1
        assert get_object_property({"a": None}, "a", 0) == 0
        assert get_object_property(None, "a", 7) == 7
        assert get_object_property(object(), "missing", "d") == "d"


class TestLogging:
    """Test message helper and logger setup."""

    def test_message(self, caplog):
        caplog.set_level(logging.INFO, logger="coordmath")
        message("hello")
        assert "coordmath: hello" in caplog.text

    def test_setup_logging_writes_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = logging.getLogger("coordmath")
        try:
            setup_logging(level=logging.INFO, log_file=str(log_file))
            assert len(logger.handlers) == 2
            message("to file")
        finally:
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

        assert "coordmath: to file" in log_file.read_text(encoding="utf-8")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
