"""Tests for configuration loading."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError
import pytest

from easelut.core.config.loader import (
    CONFIG_ENV_VAR,
    detect_format,
    load_config,
    load_ease_config,
)
from easelut.core.config.models import EaseConfig


class TestDetectFormat:
    """Tests for extension-based format detection."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("ease.json", "json"), ("ease.yaml", "yaml"), ("ease.YML", "yaml")],
    )
    def test_known_formats(self, name: str, expected: str) -> None:
        """JSON and both YAML spellings are recognized."""
        assert detect_format(name) == expected

    def test_unknown_format(self) -> None:
        """Other extensions raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported config format"):
            detect_format("ease.toml")


class TestLoadConfig:
    """Tests for raw config loading."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_json(self, tmp_path: Path) -> None:
        """JSON files load as dictionaries."""
        path = tmp_path / "ease.json"
        path.write_text(json.dumps({"default_steps": 16}))
        assert load_config(path) == {"default_steps": 16}

    def test_yaml(self, tmp_path: Path) -> None:
        """YAML files load as dictionaries."""
        path = tmp_path / "ease.yaml"
        path.write_text("default_steps: 16\nsolver:\n  newton_iterations: 4\n")
        assert load_config(path) == {"default_steps": 16, "solver": {"newton_iterations": 4}}

    def test_empty_yaml(self, tmp_path: Path) -> None:
        """An empty YAML file is an empty mapping."""
        path = tmp_path / "ease.yml"
        path.write_text("")
        assert load_config(path) == {}

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Malformed JSON raises ValueError naming the file."""
        path = tmp_path / "ease.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Malformed YAML raises ValueError naming the file."""
        path = tmp_path / "ease.yaml"
        path.write_text("default_steps: [16\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_yaml_root_must_be_mapping(self, tmp_path: Path) -> None:
        """A YAML list at the root is rejected."""
        path = tmp_path / "ease.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="must be a mapping"):
            load_config(path)


class TestLoadEaseConfig:
    """Tests for validated config loading."""

    def test_defaults_without_path(self) -> None:
        """No path and no environment variable gives the defaults."""
        assert load_ease_config() == EaseConfig()

    def test_from_file(self, tmp_path: Path) -> None:
        """Values from the file override the defaults."""
        path = tmp_path / "ease.yaml"
        path.write_text("default_steps: 16\nsolver:\n  tolerance: 1.0e-12\n")
        config = load_ease_config(path)
        assert config.default_steps == 16
        assert config.solver.tolerance == 1e-12
        assert config.solver.newton_iterations == 8

    def test_from_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """EASELUT_CONFIG is used when no path is given."""
        path = tmp_path / "ease.json"
        path.write_text(json.dumps({"default_steps": 64}))
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_ease_config().default_steps == 64

    def test_invalid_values(self, tmp_path: Path) -> None:
        """Out-of-range values fail validation."""
        path = tmp_path / "ease.json"
        path.write_text(json.dumps({"default_steps": 2}))
        with pytest.raises(ValidationError):
            load_ease_config(path)

    def test_unknown_keys(self, tmp_path: Path) -> None:
        """Unknown keys fail validation."""
        path = tmp_path / "ease.json"
        path.write_text(json.dumps({"steps": 16}))
        with pytest.raises(ValidationError):
            load_ease_config(path)
