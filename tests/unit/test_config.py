"""Unit tests for configuration models and loading."""

import json

import pytest
from pydantic import ValidationError

from typofix.cli import create_parser
from typofix.core import Config, ConfigError, EngineConfig, load_config


class TestEngineConfig:
    """Engine configuration validation."""

    def test_defaults(self) -> None:
        """Defaults match the documented policy constants."""
        config = EngineConfig()
        assert (config.max_edit_distance, config.max_candidates, config.min_useful_candidates) == (
            2,
            10,
            3,
        )

    def test_rejects_distance_three(self) -> None:
        """Only distances 1 and 2 are supported."""
        with pytest.raises(ValidationError):
            EngineConfig(max_edit_distance=3)

    def test_rejects_zero_stride(self) -> None:
        """Alphabet strides must be positive."""
        with pytest.raises(ValidationError):
            EngineConfig(second_pass_stride=0)

    def test_rejects_unknown_storage(self) -> None:
        """Node storage is sparse or dense."""
        with pytest.raises(ValidationError):
            EngineConfig(node_storage="array")

    def test_is_immutable(self) -> None:
        """Engine settings cannot change after construction."""
        config = EngineConfig()
        with pytest.raises(ValidationError):
            config.max_candidates = 99


class TestConfig:
    """Host configuration validation."""

    def test_debug_words_from_comma_string(self) -> None:
        """A comma-separated string is split and lowercased."""
        assert Config(debug_words="Teh, hte").debug_words == {"teh", "hte"}

    def test_debug_words_from_list(self) -> None:
        """A list is lowercased into a set."""
        assert Config(debug_words=["The"]).debug_words == {"the"}

    def test_text_and_input_are_exclusive(self) -> None:
        """Inline text and an input file cannot both be given."""
        with pytest.raises(ValidationError):
            Config(text="hello", input="file.txt")

    def test_line_mode_rejects_inline_text(self) -> None:
        """Line mode reads from a file or stdin."""
        with pytest.raises(ValidationError):
            Config(text="hello", lines=True)

    def test_paths_are_expanded(self) -> None:
        """A leading ~ is expanded."""
        assert not Config(dictionary="~/words.txt").dictionary.startswith("~")

    def test_engine_config_carries_settings(self) -> None:
        """Engine settings are copied into the engine configuration."""
        config = Config(max_candidates=7, node_storage="dense", second_pass_stride=4)
        engine = config.engine_config()
        assert (engine.max_candidates, engine.node_storage, engine.second_pass_stride) == (
            7,
            "dense",
            4,
        )


class TestLoadConfig:
    """Merging JSON and CLI settings."""

    def test_cli_overrides_json(self, tmp_path) -> None:
        """Explicit CLI values win over JSON values."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"max_candidates": 20}))
        parser = create_parser()
        args = parser.parse_args(["--max-candidates", "5"])

        config = load_config(str(config_file), args, parser)

        assert config.max_candidates == 5

    def test_json_survives_cli_defaults(self, tmp_path) -> None:
        """Flags left at their default do not override JSON."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"verbose": True, "top_n": 100}))
        parser = create_parser()
        args = parser.parse_args([])

        config = load_config(str(config_file), args, parser)

        assert (config.verbose, config.top_n) == (True, 100)

    def test_nested_scoring_from_json(self, tmp_path) -> None:
        """Scoring weights can be set in JSON."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"scoring": {"common_word_bonus": 0}}))
        parser = create_parser()

        config = load_config(str(config_file), parser.parse_args([]), parser)

        assert config.scoring.common_word_bonus == 0

    def test_without_json(self) -> None:
        """CLI arguments alone produce a config."""
        parser = create_parser()
        args = parser.parse_args(["--text", "hello", "--max-edit-distance", "1"])

        config = load_config(None, args, parser)

        assert (config.text, config.max_edit_distance) == ("hello", 1)

    def test_invalid_json_raises_config_error(self, tmp_path) -> None:
        """Broken JSON is reported as a configuration error."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")
        parser = create_parser()

        with pytest.raises(ConfigError):
            load_config(str(config_file), parser.parse_args([]), parser)

    def test_missing_json_raises_config_error(self, tmp_path) -> None:
        """A missing config file is reported as a configuration error."""
        parser = create_parser()
        with pytest.raises(ConfigError):
            load_config(str(tmp_path / "nope.json"), parser.parse_args([]), parser)

    def test_invalid_values_exit_through_parser(self, tmp_path) -> None:
        """Validation errors are reported through the argument parser."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"max_candidates": 0}))
        parser = create_parser()

        with pytest.raises(SystemExit):
            load_config(str(config_file), parser.parse_args([]), parser)

    def test_invalid_values_raise_without_parser(self, tmp_path) -> None:
        """Without a parser, validation errors raise ConfigError."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"jobs": 0}))
        args = create_parser().parse_args([])

        with pytest.raises(ConfigError):
            load_config(str(config_file), args)
