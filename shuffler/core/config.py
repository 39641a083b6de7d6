"""Configuration management for Shuffler."""

from __future__ import annotations

from argparse import ArgumentParser
import json

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from shuffler.utils import expand_file_path


class Config(BaseModel):
    """Configuration for a shuffle run."""

    words: list[str] = Field(default_factory=list, description="Words given directly")
    include: str | None = Field(None, description="Word list file")
    dictionary: str | None = Field(None, description="Substitution dictionary file")
    substitutions: dict[str, list[str]] = Field(
        default_factory=dict, description="Inline substitutions (override file entries)"
    )
    output: str | None = None
    parallel: bool = False
    jobs: int | None = Field(None, ge=1, description="Worker cap (None: one per word)")
    verbose: bool = False
    debug: bool = False
    log_file: str | None = None

    @field_validator("substitutions", mode="before")
    @classmethod
    def parse_substitutions(cls, v):
        """Accept replacement strings ("a@4") as well as lists of characters."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return {
                key: list(value) if isinstance(value, str) else value for key, value in v.items()
            }
        return v

    @field_validator("substitutions")
    @classmethod
    def validate_substitutions(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        """Keys and replacements must be single characters; sets must not be empty."""
        for key, replacements in v.items():
            if len(key) != 1:
                raise ValueError(f"substitution key {key!r} must be a single character")
            if not replacements:
                raise ValueError(f"substitution set for {key!r} must not be empty")
            for replacement in replacements:
                if len(replacement) != 1:
                    raise ValueError(
                        f"replacement {replacement!r} for {key!r} must be a single character"
                    )
        return v

    @model_validator(mode="after")
    def validate_word_source(self):
        """Validate that at least one word source is configured."""
        if not self.words and not self.include:
            raise ValueError("no words given: pass words or an include file")
        return self


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    # Positional words on the command line replace the JSON word list
    config_dict = {
        "words": cli_args.words or json_config.get("words", []),
        "include": get_value("include", None),
        "dictionary": get_value("dictionary", None),
        "substitutions": json_config.get("substitutions", {}),
        "output": get_value("output", None),
        "parallel": cli_args.parallel or json_config.get("parallel", False),
        "jobs": get_value("jobs", None),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
        "log_file": get_value("log_file", None),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
