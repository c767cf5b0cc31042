"""Configuration model for texdesk."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

ARTIFACT_SUFFIX = ".pdf"


def _default_scratch_dir() -> Path:
    return Path(tempfile.gettempdir()) / "texdesk_build"


class TexdeskConfig(BaseModel):
    """Where and how documents are compiled."""

    compiler: str = Field(default="tectonic", min_length=1)
    scratch_dir: Path = Field(default_factory=_default_scratch_dir)
    aux_dir_name: str = Field(default=".texdesk", min_length=1)
    scratch_source_name: str = Field(default="input.tex", min_length=1)

    @field_validator("aux_dir_name", "scratch_source_name")
    @classmethod
    def validate_single_component(cls, value: str) -> str:
        if value in {".", ".."} or Path(value).name != value:
            raise ValueError(f"'{value}' must be a single path component")
        return value

    @property
    def scratch_source_path(self) -> Path:
        return self.scratch_dir / self.scratch_source_name

    @property
    def scratch_artifact_path(self) -> Path:
        return self.scratch_dir / f"{Path(self.scratch_source_name).stem}{ARTIFACT_SUFFIX}"


def load_config() -> TexdeskConfig:
    """Build a config from TEXDESK_* environment variables (and a .env file, if any)."""

    load_dotenv()

    overrides: dict[str, str] = {}
    for env_name, field_name in (
        ("TEXDESK_COMPILER", "compiler"),
        ("TEXDESK_SCRATCH_DIR", "scratch_dir"),
        ("TEXDESK_AUX_DIR", "aux_dir_name"),
    ):
        value = os.getenv(env_name)
        if value:
            overrides[field_name] = value

    return TexdeskConfig(**overrides)
