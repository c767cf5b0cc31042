"""Domain models used by texdesk."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    ERROR = "error"


class CompilationRequest(BaseModel):
    """Source text to compile and, for saved documents, where it lives."""

    model_config = ConfigDict(frozen=True)

    source_text: str
    source_location: Path | None = None

    @property
    def is_scratch(self) -> bool:
        return self.source_location is None


class WorkspaceLayout(BaseModel):
    """Resolved on-disk paths for a single compilation."""

    source_file_path: Path
    output_directory: Path
    artifact_file_path: Path
    scratch: bool


class CompilerInvocationResult(BaseModel):
    exit_succeeded: bool
    combined_log: str
    return_code: int


class Diagnostic(BaseModel):
    """One compilation problem, addressed by source line (0 when unknown)."""

    line: int = Field(default=0, ge=0)
    message: str
    severity: Severity = Severity.ERROR


class CompilationSuccess(BaseModel):
    kind: Literal["success"] = "success"
    artifact: bytes

    @property
    def ok(self) -> bool:
        return True


class CompilationFailure(BaseModel):
    kind: Literal["failure"] = "failure"
    diagnostics: list[Diagnostic] = Field(min_length=1)

    @property
    def ok(self) -> bool:
        return False


CompilationOutcome = Union[CompilationSuccess, CompilationFailure]
