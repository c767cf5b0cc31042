"""Run Tectonic on a resolved workspace."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path

from texdesk.config import TexdeskConfig
from texdesk.errors import CompilerLaunchError, RequestValidationError, WorkspaceFilesystemError
from texdesk.logger import log_compiler_command
from texdesk.models import CompilerInvocationResult, WorkspaceLayout


def write_source(path: Path, source_text: str) -> None:
    """Write source_text to path and flush it to disk before the compiler reads it.

    The text is encoded before the file is opened, so an unencodable document
    never truncates an existing file.
    """

    try:
        data = source_text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise RequestValidationError(
            f"Source text cannot be encoded as UTF-8: {exc}", source_location=path
        ) from exc

    try:
        with path.open("wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
    except (OSError, ValueError) as exc:
        raise WorkspaceFilesystemError(
            f"Unable to write source file {path}: {exc}", path=path, cause=exc
        ) from exc


def build_command(layout: WorkspaceLayout, compiler: str) -> tuple[list[str], Path | None]:
    """Return the argument list and working directory for layout's mode."""

    if layout.scratch:
        # Output lands beside the input
        return [compiler, str(layout.source_file_path)], layout.output_directory

    command = [
        compiler,
        "-o",
        str(layout.output_directory),
        "--keep-intermediates",
        "--synctex",
        str(layout.source_file_path),
    ]
    return command, None


def run_compiler(
    layout: WorkspaceLayout, source_text: str, config: TexdeskConfig
) -> CompilerInvocationResult:
    """Write the source and run the compiler on it, blocking until it exits."""

    write_source(layout.source_file_path, source_text)

    if shutil.which(config.compiler) is None:
        raise CompilerLaunchError(config.compiler)

    command, cwd = build_command(layout, config.compiler)
    log_compiler_command(command, cwd)
    try:
        process = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise CompilerLaunchError(config.compiler, reason=str(exc)) from exc

    return CompilerInvocationResult(
        exit_succeeded=process.returncode == 0,
        combined_log="\n".join([process.stdout or "", process.stderr or ""]),
        return_code=process.returncode,
    )
