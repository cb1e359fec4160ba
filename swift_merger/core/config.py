"""Configuration management for Swift File Merger."""

import json
from pathlib import Path
from typing import Any, Dict, List

import yaml  # type: ignore
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .defaults import DEFAULT_OUTPUT_DIRECTORY, DEFAULT_OUTPUT_FILENAME


class MergerConfig(BaseSettings):
    """Configuration for a single merge run.

    Values not passed explicitly are read from ``SWIFT_MERGER_*`` environment
    variables, e.g. ``SWIFT_MERGER_OUTPUT_DIRECTORY``.
    """

    source_directory: str = Field(..., description="Directory tree holding the Swift sources")
    output_directory: str = Field(
        default=DEFAULT_OUTPUT_DIRECTORY, description="Directory the merged file is written to"
    )
    output_filename: str = Field(default=DEFAULT_OUTPUT_FILENAME, description="Name of the merged file")
    exclude_patterns: List[str] = Field(
        default_factory=list,
        description="Glob patterns (relative POSIX paths) of Swift files to skip",
    )
    verbose: bool = Field(default=False, description="Print source/output details after merging")

    model_config = SettingsConfigDict(
        env_prefix="SWIFT_MERGER_",
        case_sensitive=False,
        extra="forbid",
    )

    @property
    def output_path(self) -> Path:
        """Location of the merged file."""
        return Path(self.output_directory) / self.output_filename

    @classmethod
    def from_file(cls, config_path: str, **overrides) -> "MergerConfig":
        """Load settings from a YAML or JSON file.

        Keyword overrides that are not ``None`` take precedence over the file.
        """
        data = read_config_file(Path(config_path))
        data.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**data)

    def save(self, config_path: str) -> None:
        """Write the settings in the format implied by the file suffix."""
        path = Path(config_path)
        data = self.model_dump()
        if _is_yaml(path):
            text = yaml.safe_dump(data, default_flow_style=False, indent=2)
        else:
            text = json.dumps(data, indent=2) + "\n"
        path.write_text(text, encoding="utf-8")


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in (".yaml", ".yml")


def read_config_file(path: Path) -> Dict[str, Any]:
    """
    Parse a merger config file into a settings mapping.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a mapping at the top level
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    data = yaml.safe_load(text) if _is_yaml(path) else json.loads(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping, got {type(data).__name__}: {path}")
    return data
