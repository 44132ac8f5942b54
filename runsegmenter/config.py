"""Configuration management for the run segmentation pipeline."""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


class SegmentationConfig(BaseModel):
    """Configuration for reading and segmenting records."""

    text_field: str = Field(default="text", description="JSONL key holding the text")
    id_field: str = Field(default="id", description="JSONL key holding the record id")
    workers: int = Field(default=1, ge=1)
    skip_empty: bool = True


class OutputConfig(BaseModel):
    """Configuration for output options."""

    output_dir: Path = Path("data/runs")
    output_name: str = "runs"
    separator: str = Field(default=",", min_length=1, max_length=1)
    include_text: bool = True  # Add the run's own text as a column


class Config(BaseModel):
    """Main configuration for the run segmentation pipeline."""

    input_file: Optional[Path] = None
    input_format: Literal["jsonl", "text"] = "jsonl"
    segmentation: SegmentationConfig = Field(default_factory=SegmentationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("input_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v

    @property
    def output_path(self) -> Path:
        return self.output.output_dir / f"{self.output.output_name}.csv"

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False)
