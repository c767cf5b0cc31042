"""Failure taxonomy for compilation, flattened to diagnostics at the boundary."""

from __future__ import annotations

from pathlib import Path

from texdesk.models import Diagnostic


class CompilationError(RuntimeError):
    """Base class for every way a compilation can fail."""

    category = "compilation"

    def to_diagnostics(self) -> list[Diagnostic]:
        return [Diagnostic(line=0, message=str(self))]


class RequestValidationError(CompilationError):
    """Raised when a request cannot be compiled as given."""

    category = "request_validation"

    def __init__(self, message: str, source_location: Path | None = None) -> None:
        super().__init__(message)
        self.source_location = source_location


class WorkspaceFilesystemError(CompilationError):
    """Raised when a directory or file in the workspace cannot be created, written or read."""

    category = "filesystem"

    def __init__(self, message: str, path: Path, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause


class CompilerLaunchError(CompilationError):
    """Raised when the external compiler cannot be started at all."""

    category = "launch"

    def __init__(self, executable: str, reason: str | None = None) -> None:
        message = f"Could not run '{executable}'. Install it and ensure `{executable}` is on PATH."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.executable = executable


class CompilerDiagnosticError(CompilationError):
    """Raised when the compiler ran and reported errors."""

    category = "compiler"

    def __init__(self, diagnostics: list[Diagnostic], log: str) -> None:
        if not diagnostics:
            raise ValueError("CompilerDiagnosticError requires at least one diagnostic")
        super().__init__(diagnostics[0].message)
        self.diagnostics = list(diagnostics)
        self.log = log

    def to_diagnostics(self) -> list[Diagnostic]:
        return list(self.diagnostics)


class ArtifactMissingError(CompilationError):
    """Raised when the compiler exits cleanly but its output file is absent."""

    category = "postcondition"

    def __init__(self, artifact_path: Path) -> None:
        super().__init__(
            f"Compilation reported success, but the output PDF was not found: {artifact_path}"
        )
        self.artifact_path = artifact_path
