"""Main compilation orchestration for texdesk."""

from __future__ import annotations

import asyncio
import os
import threading
import time
from contextlib import contextmanager
from pathlib import Path

from texdesk.compiler import run_compiler
from texdesk.config import TexdeskConfig, load_config
from texdesk.diagnostics import extract_diagnostics
from texdesk.errors import (
    ArtifactMissingError,
    CompilationError,
    CompilerDiagnosticError,
    WorkspaceFilesystemError,
)
from texdesk.logger import (
    log_compilation_failure,
    log_compilation_result,
    log_compilation_start,
    log_compiler_exit,
)
from texdesk.models import (
    CompilationFailure,
    CompilationOutcome,
    CompilationRequest,
    CompilationSuccess,
)
from texdesk.workspace import resolve_workspace


_scratch_locks: dict[Path, threading.Lock] = {}
_scratch_locks_guard = threading.Lock()


def scratch_lock(scratch_dir: Path) -> threading.Lock:
    """Return the lock shared by every compiler using scratch_dir."""

    key = Path(os.path.abspath(scratch_dir))
    with _scratch_locks_guard:
        return _scratch_locks.setdefault(key, threading.Lock())


def _read_artifact(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise WorkspaceFilesystemError(
            f"Unable to read output PDF {path}: {exc}", path=path, cause=exc
        ) from exc


class DocumentCompiler:
    """Compiles scratch and file-backed documents with one external compiler.

    Scratch compilations share fixed paths, so they run one at a time across
    every instance pointed at the same scratch directory. Each file-backed
    document has its own auxiliary directory and is not serialized.
    """

    def __init__(self, config: TexdeskConfig | None = None) -> None:
        self.config = config or TexdeskConfig()

    @contextmanager
    def _guard(self, request: CompilationRequest):
        if not request.is_scratch:
            yield
            return

        with scratch_lock(self.config.scratch_dir):
            yield

    def build(self, request: CompilationRequest) -> bytes:
        """Compile request and return the PDF bytes.

        Raises:
            CompilationError: one of its subclasses, describing why no PDF was produced.
        """

        with self._guard(request):
            layout = resolve_workspace(request, self.config)
            result = run_compiler(layout, request.source_text, self.config)

            if not result.exit_succeeded:
                log_compiler_exit(result.return_code)
                raise CompilerDiagnosticError(
                    extract_diagnostics(result.combined_log), log=result.combined_log
                )

            if not layout.artifact_file_path.exists():
                raise ArtifactMissingError(layout.artifact_file_path)

            return _read_artifact(layout.artifact_file_path)

    def compile(self, request: CompilationRequest) -> CompilationOutcome:
        """Compile request, reporting every failure as a list of diagnostics."""

        document = str(request.source_location) if request.source_location else "<unsaved>"
        log_compilation_start(document, scratch=request.is_scratch)

        start_time = time.time()
        log_text = ""
        try:
            outcome: CompilationOutcome = CompilationSuccess(artifact=self.build(request))
        except CompilationError as exc:
            log_compilation_failure(exc.category)
            if isinstance(exc, CompilerDiagnosticError):
                log_text = exc.log
            outcome = CompilationFailure(diagnostics=exc.to_diagnostics())

        log_compilation_result(document, outcome, time.time() - start_time, log_text=log_text)
        return outcome


_default_compiler: DocumentCompiler | None = None
_default_lock = threading.Lock()


def get_default_compiler() -> DocumentCompiler:
    """Return the process-wide compiler, configured from the environment on first use."""

    global _default_compiler
    with _default_lock:
        if _default_compiler is None:
            _default_compiler = DocumentCompiler(load_config())
        return _default_compiler


def compile_document(
    source_text: str,
    source_location: Path | None = None,
    *,
    compiler: DocumentCompiler | None = None,
) -> CompilationOutcome:
    """Compile source_text, scratch mode when source_location is None."""

    request = CompilationRequest(source_text=source_text, source_location=source_location)
    return (compiler or get_default_compiler()).compile(request)


async def compile_document_async(
    source_text: str,
    source_location: Path | None = None,
    *,
    compiler: DocumentCompiler | None = None,
) -> CompilationOutcome:
    """Like compile_document, but runs the blocking compile in a worker thread."""

    return await asyncio.to_thread(
        compile_document, source_text, source_location, compiler=compiler
    )
