"""Tests for JSON utility functions."""

from __future__ import annotations

import pytest

from easelut.core.utils.json import read_json, write_json


@pytest.fixture
def temp_json_file(tmp_path):
    """Create a temporary JSON file path."""
    return tmp_path / "test.json"


def test_write_and_read_json(temp_json_file):
    """Test writing and reading JSON files."""
    data = {
        "strategy": "lut",
        "control": {"x0": 0.42, "y0": 0.0, "x1": 0.58, "y1": 1.0},
        "samples": [{"x": 0, "y": 0}, {"x": 65535, "y": 65535}],
    }

    write_json(temp_json_file, data)

    assert read_json(temp_json_file) == data


def test_write_json_creates_parent_dirs(tmp_path):
    """Test that write_json creates parent directories."""
    nested_path = tmp_path / "subdir" / "nested" / "test.json"
    data = {"test": "value"}

    # Parent directories don't exist yet
    assert not nested_path.parent.exists()

    write_json(nested_path, data)

    assert nested_path.exists()
    assert read_json(nested_path) == data


def test_write_json_with_string_path(temp_json_file):
    """Test write_json with string path."""
    data = {"test": "value"}

    write_json(str(temp_json_file), data)

    assert read_json(str(temp_json_file)) == data


def test_write_json_ends_with_newline(temp_json_file):
    """Test that the file is newline-terminated and indented."""
    write_json(temp_json_file, {"a": 1})

    text = temp_json_file.read_text()
    assert text == '{\n  "a": 1\n}\n'
