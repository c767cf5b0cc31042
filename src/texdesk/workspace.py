"""Decide where a compilation reads its source and writes its output."""

from __future__ import annotations

from pathlib import Path

from texdesk.config import ARTIFACT_SUFFIX, TexdeskConfig
from texdesk.errors import RequestValidationError, WorkspaceFilesystemError
from texdesk.models import CompilationRequest, WorkspaceLayout


def _ensure_directory(path: Path, *, parents: bool) -> None:
    try:
        path.mkdir(parents=parents, exist_ok=True)
    except (OSError, ValueError) as exc:
        raise WorkspaceFilesystemError(
            f"Unable to create directory {path}: {exc}", path=path, cause=exc
        ) from exc


def _validated_source(location: Path) -> Path:
    if "\x00" in str(location):
        raise RequestValidationError(
            f"Source location contains a NUL byte: {str(location)!r}", source_location=location
        )
    if location.name in {"", ".", ".."}:
        raise RequestValidationError(
            f"Source location has no file name: '{location}'", source_location=location
        )
    if location.is_dir():
        raise RequestValidationError(
            f"Source location is a directory: '{location}'", source_location=location
        )
    return location


def resolve_workspace(request: CompilationRequest, config: TexdeskConfig) -> WorkspaceLayout:
    """Resolve the layout for request, creating its output directory if absent."""

    if request.source_location is None:
        # Shared across calls and left in place for inspection
        _ensure_directory(config.scratch_dir, parents=False)
        return WorkspaceLayout(
            source_file_path=config.scratch_source_path,
            output_directory=config.scratch_dir,
            artifact_file_path=config.scratch_artifact_path,
            scratch=True,
        )

    source = _validated_source(request.source_location)
    output_directory = source.parent / config.aux_dir_name
    _ensure_directory(output_directory, parents=True)

    return WorkspaceLayout(
        source_file_path=source,
        output_directory=output_directory,
        artifact_file_path=output_directory / f"{source.stem}{ARTIFACT_SUFFIX}",
        scratch=False,
    )
