"""Tests for the grid configuration system."""

import json
from dataclasses import FrozenInstanceError, replace
from pathlib import Path

import pytest
from dacite import UnexpectedDataError, WrongTypeError

from location_grid.config import (
    ANNOTATION_FIELDS,
    DEFAULT_CONFIG,
    ExperimentConfig,
    GridConfig,
    config_from_dict,
    config_from_json,
    config_hash,
    config_to_dict,
    config_to_json,
    full_config_hash,
    grid_config_hash,
    load_config,
    save_config,
)


class TestDefaults:
    def test_default_config_values(self):
        assert DEFAULT_CONFIG.grid.size == 100
        assert DEFAULT_CONFIG.seed == 42
        assert DEFAULT_CONFIG.description == ""
        assert DEFAULT_CONFIG.tags == ()


class TestConfigImmutability:
    """Frozen dataclasses prevent mutation."""

    def test_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.seed = 99  # type: ignore[misc]

    def test_grid_config_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_CONFIG.grid.size = 5  # type: ignore[misc]


class TestConfigValidation:
    """__post_init__ rejects unusable configs."""

    @pytest.mark.parametrize("size", [0, -3])
    def test_size_must_be_positive(self, size):
        with pytest.raises(ValueError, match="grid size"):
            ExperimentConfig(grid=GridConfig(size=size))

    def test_seed_must_be_non_negative(self):
        with pytest.raises(ValueError, match="seed"):
            ExperimentConfig(seed=-1)

    def test_size_one_is_valid(self):
        assert ExperimentConfig(grid=GridConfig(size=1)).grid.size == 1


class TestConfigRoundTrip:
    """JSON serialization preserves identity."""

    def test_round_trip_hash(self):
        cfg = replace(DEFAULT_CONFIG, tags=("demo", "small"), description="x")
        restored = config_from_json(config_to_json(cfg))
        assert full_config_hash(restored) == full_config_hash(cfg)
        assert restored.tags == ("demo", "small")

    def test_dict_round_trip(self):
        restored = config_from_dict(config_to_dict(DEFAULT_CONFIG))
        assert restored == DEFAULT_CONFIG

    def test_json_is_sorted_and_indented(self):
        text = config_to_json(DEFAULT_CONFIG)
        data = json.loads(text)
        assert list(data) == sorted(data)
        assert "\n  " in text

    def test_missing_sections_use_defaults(self):
        cfg = config_from_json('{"seed": 3}')
        assert cfg.seed == 3
        assert cfg.grid.size == 100

    def test_unknown_key_rejected(self):
        with pytest.raises(UnexpectedDataError):
            config_from_json('{"seed": 3, "colour": "red"}')

    def test_wrong_type_rejected(self):
        with pytest.raises(WrongTypeError):
            config_from_json('{"grid": {"size": "big"}}')

    def test_invalid_size_in_json_rejected(self):
        with pytest.raises(ValueError):
            config_from_json('{"grid": {"size": 0}}')


class TestConfigHashing:
    """Deterministic hashes with field exclusion."""

    def test_hash_is_stable(self):
        assert config_hash(DEFAULT_CONFIG) == config_hash(ExperimentConfig())
        assert len(config_hash(DEFAULT_CONFIG)) == 16

    def test_grid_hash_ignores_seed(self):
        other = replace(DEFAULT_CONFIG, seed=7)
        assert grid_config_hash(other) == grid_config_hash(DEFAULT_CONFIG)
        assert full_config_hash(other) != full_config_hash(DEFAULT_CONFIG)

    def test_grid_hash_tracks_size(self):
        other = replace(DEFAULT_CONFIG, grid=GridConfig(size=101))
        assert grid_config_hash(other) != grid_config_hash(DEFAULT_CONFIG)

    def test_exclude_fields(self):
        a = replace(DEFAULT_CONFIG, description="one")
        b = replace(DEFAULT_CONFIG, description="two")
        assert config_hash(a) != config_hash(b)
        assert config_hash(a, exclude_fields=["description"]) == config_hash(
            b, exclude_fields=["description"]
        )

    def test_exclude_nested_field(self):
        a = replace(DEFAULT_CONFIG, grid=GridConfig(size=5))
        assert config_hash(a, exclude_fields=["grid.size"]) == config_hash(
            DEFAULT_CONFIG, exclude_fields=["grid.size"]
        )

    def test_exclude_missing_path_is_ignored(self):
        assert config_hash(DEFAULT_CONFIG, exclude_fields=["nope.size"]) == (
            config_hash(DEFAULT_CONFIG)
        )

    def test_annotations_do_not_change_run_or_grid_hash(self):
        annotated = replace(DEFAULT_CONFIG, description="note", tags=("a",))
        assert full_config_hash(annotated) == full_config_hash(DEFAULT_CONFIG)
        assert grid_config_hash(annotated) == grid_config_hash(DEFAULT_CONFIG)
        assert config_hash(annotated) != config_hash(DEFAULT_CONFIG)

    def test_run_hash_excludes_only_annotations(self):
        assert full_config_hash(DEFAULT_CONFIG) == config_hash(
            DEFAULT_CONFIG, exclude_fields=list(ANNOTATION_FIELDS)
        )


class TestConfigFiles:
    """save_config / load_config read and write JSON files."""

    def test_file_round_trip(self, tmp_path: Path):
        cfg = replace(DEFAULT_CONFIG, seed=11, tags=("x",))
        path = save_config(cfg, tmp_path / "nested" / "config.json")
        assert path.exists()
        assert load_config(path) == cfg

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.json")

    @pytest.mark.parametrize("text", ["[1, 2]", "7", '"grid"'])
    def test_non_object_json_rejected(self, text):
        with pytest.raises(ValueError, match="JSON object"):
            config_from_json(text)

    def test_malformed_json_is_a_value_error(self):
        with pytest.raises(ValueError):
            config_from_json('{"seed": ')
