from __future__ import annotations

from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from libs.common.yaml_config import load_yaml_mapping


class SourceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    env_var: str = Field(..., description="Environment variable holding the browser list JSON")


class OutputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    default_file_name: str = Field(..., description="Used when no file name argument is given")
    extension: str = Field(..., description="Appended to a file name argument that lacks it")


class ResolutionConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    default: str = Field(..., description="Replaces an unsupported resolution argument")
    accepted: List[str] = Field(..., min_length=1)


class CommandConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    executable: str = Field(..., description='e.g. "mvn install"')
    results_dir_prefix: str = Field(..., description="Task index is appended")


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: str = Field(..., description="DEBUG, INFO, WARNING, ERROR")


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: SourceConfig = Field(...)
    output: OutputConfig = Field(...)
    resolution: ResolutionConfig = Field(...)
    command: CommandConfig = Field(...)
    logging: LoggingConfig = Field(...)

    @classmethod
    def from_yaml(cls, path: Path) -> "AppConfig":
        return cls.model_validate(load_yaml_mapping(path))
