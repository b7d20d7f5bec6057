"""Configuration models and loading."""

import argparse
import json
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from typofix.core.errors import ConfigError
from typofix.utils.constants import Constants
from typofix.utils.helpers import expand_file_path


class ScoringWeights(BaseModel):
    """Weights of the candidate scoring formula."""

    model_config = ConfigDict(frozen=True)

    same_length_bonus: int = Constants.SAME_LENGTH_BONUS
    length_penalty: int = Field(default=Constants.LENGTH_PENALTY, ge=0)
    common_word_bonus: int = Constants.COMMON_WORD_BONUS


class EngineConfig(BaseModel):
    """Single configuration surface of the correction engine."""

    model_config = ConfigDict(frozen=True)

    max_edit_distance: Literal[1, 2] = Constants.MAX_EDIT_DISTANCE
    max_candidates: int = Field(default=Constants.MAX_CANDIDATES, ge=1)
    min_useful_candidates: int = Field(default=Constants.MIN_USEFUL_CANDIDATES, ge=0)
    first_pass_stride: int = Field(default=Constants.FIRST_PASS_STRIDE, ge=1)
    second_pass_stride: int = Field(default=Constants.SECOND_PASS_STRIDE, ge=1)
    node_storage: Literal["sparse", "dense"] = "sparse"
    scoring: ScoringWeights = Field(default_factory=ScoringWeights)


class Config(BaseModel):
    """Host configuration: word sources, I/O, engine settings and logging."""

    # Word sources
    dictionary: str | None = None
    top_n: int | None = Field(default=None, ge=1)
    english_words: bool = False
    min_dictionary_words: int = Field(default=Constants.MIN_DICTIONARY_WORDS, ge=0)

    # Input / output
    text: str | None = None
    input: str | None = None
    output: str | None = None
    report: str | None = None
    lines: bool = False

    # Engine
    max_edit_distance: Literal[1, 2] = Constants.MAX_EDIT_DISTANCE
    max_candidates: int = Field(default=Constants.MAX_CANDIDATES, ge=1)
    min_useful_candidates: int = Field(default=Constants.MIN_USEFUL_CANDIDATES, ge=0)
    first_pass_stride: int = Field(default=Constants.FIRST_PASS_STRIDE, ge=1)
    second_pass_stride: int = Field(default=Constants.SECOND_PASS_STRIDE, ge=1)
    node_storage: Literal["sparse", "dense"] = "sparse"
    scoring: ScoringWeights = Field(default_factory=ScoringWeights)

    # Execution
    jobs: int = Field(default=1, ge=1)
    verbose: bool = False
    debug: bool = False
    debug_words: set[str] = Field(default_factory=set)

    @field_validator("debug_words", mode="before")
    @classmethod
    def parse_string_set(cls, value):
        """Accept a list, or a comma-separated string, of words."""
        if value is None:
            return set()
        if isinstance(value, str):
            value = value.split(",")
        return {w.strip().lower() for w in value if w.strip()}

    @field_validator("dictionary", "input", "output", "report")
    @classmethod
    def expand_paths(cls, value):
        return expand_file_path(value)

    @model_validator(mode="after")
    def validate_cross_fields(self):
        if self.text is not None and self.input is not None:
            raise ValueError("Specify either text or input, not both")
        if self.lines and self.text is not None:
            raise ValueError("Line mode reads from input or stdin, not inline text")
        return self

    def engine_config(self) -> EngineConfig:
        """Return the engine settings carried by this configuration."""
        return EngineConfig(
            max_edit_distance=self.max_edit_distance,
            max_candidates=self.max_candidates,
            min_useful_candidates=self.min_useful_candidates,
            first_pass_stride=self.first_pass_stride,
            second_pass_stride=self.second_pass_stride,
            node_storage=self.node_storage,
            scoring=self.scoring,
        )


def _read_json_config(path: str) -> dict:
    try:
        with open(expand_file_path(path), "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return data


def load_config(
    json_path: str | None,
    cli_args: argparse.Namespace,
    parser: argparse.ArgumentParser | None = None,
) -> Config:
    """Load configuration from JSON, overlaying CLI arguments that were set.

    CLI values win over JSON values. Unset arguments (None, or False for
    store_true flags) do not override the JSON file.

    Args:
        json_path: Path to a JSON config file, or None
        cli_args: Parsed command-line arguments
        parser: Parser used to report validation errors; if None, errors raise

    Returns:
        Validated Config
    """
    data: dict = _read_json_config(json_path) if json_path else {}

    for key, value in vars(cli_args).items():
        if key == "config" or value is None or value is False:
            continue
        data[key] = value

    try:
        return Config(**data)
    except ValidationError as e:
        if parser is not None:
            parser.error(str(e))
        raise ConfigError(str(e)) from e
