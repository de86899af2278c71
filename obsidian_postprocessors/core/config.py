"""Configuration for building postprocessor chains."""

from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from obsidian_postprocessors.core.chain import PostprocessorChain
from obsidian_postprocessors.postprocessors.destination import DestinationFromFrontmatter
from obsidian_postprocessors.postprocessors.linebreaks import SoftbreaksToHardbreaks
from obsidian_postprocessors.postprocessors.tags import FilterByTags, RemoveSpecifiedTags


class ConfigError(ValueError):
    """Raised when postprocessor configuration is invalid."""


class PostprocessorConfig(BaseModel):
    """Which built-in postprocessors to run and how they are configured."""

    model_config = ConfigDict(extra="forbid", strict=True)

    hard_linebreaks: bool = False
    destination_from_frontmatter: bool = False
    skip_tags: List[str] = []
    only_tags: List[str] = []
    remove_tags: List[str] = []
    create_missing_tags: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PostprocessorConfig":
        """Build a config from a plain dict.

        Raises:
            ConfigError: on unknown keys or values of the wrong type
        """
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid config: {e}") from e


def load_config(path: Path) -> PostprocessorConfig:
    """Load postprocessor config from a YAML file.

    An empty file yields the default config.

    Raises:
        ConfigError: if the file is not valid YAML or has invalid settings
    """
    path = Path(path)
    try:
        with open(path, encoding='utf-8') as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        return PostprocessorConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"Invalid config in {path}: expected a mapping")

    try:
        return PostprocessorConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e


def build_chain(config: PostprocessorConfig) -> PostprocessorChain:
    """Create a chain running the configured postprocessors.

    Tag filtering runs first so skipped notes never have their images
    copied, and before tag removal so removed tags still count.
    """
    chain = PostprocessorChain()
    if config.skip_tags or config.only_tags:
        chain.append(FilterByTags(skip_tags=list(config.skip_tags), only_tags=list(config.only_tags)))
    if config.remove_tags:
        chain.append(RemoveSpecifiedTags(
            remove=list(config.remove_tags),
            create_missing=config.create_missing_tags,
        ))
    if config.hard_linebreaks:
        chain.append(SoftbreaksToHardbreaks())
    if config.destination_from_frontmatter:
        chain.append(DestinationFromFrontmatter())
    return chain
