"""
Compilation logger.

Thin loguru wrappers that tag every record with a [compile] prefix.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from texdesk.models import CompilationOutcome

CONTEXT_PREFIX = "[compile]"


def configure_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    """Replace loguru's sinks with a stderr sink (and optionally a file sink)."""
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> {message}")
    if log_file is not None:
        logger.add(log_file, level="DEBUG", enqueue=True)


def _log_info(message: str) -> None:
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_compilation_start(document: str, scratch: bool) -> None:
    mode = "scratch" if scratch else "file-backed"
    _log_info(f"Starting compilation: {document} ({mode})")


def log_compiler_exit(return_code: int) -> None:
    _log_debug(f"Compiler exited with status {return_code}")


def log_compilation_failure(category: str) -> None:
    _log_debug(f"Compilation failed ({category})")


def log_compiler_command(command: list[str], working_dir: Path | None) -> None:
    _log_debug(f"  Command: {' '.join(command)}")
    if working_dir is not None:
        _log_debug(f"  Working directory: {working_dir}")


def log_compilation_result(
    document: str,
    outcome: CompilationOutcome,
    elapsed_time: float,
    log_text: str = "",
) -> None:
    """Log a finished compilation; failures include the first diagnostics and the raw log."""
    if outcome.ok:
        _log_success(f"{document}: {len(outcome.artifact)} bytes ({elapsed_time:.2f}s)")
        return

    _log_error(f"{document}: {len(outcome.diagnostics)} errors ({elapsed_time:.2f}s)")
    for i, diagnostic in enumerate(outcome.diagnostics[:5], 1):
        _log_error(f"  Error {i} (line {diagnostic.line}): {diagnostic.message}")
    if len(outcome.diagnostics) > 5:
        _log_error(f"  ... and {len(outcome.diagnostics) - 5} more errors")

    # Raw output keeps the compiler's own line layout
    if log_text:
        logger.opt(raw=True).debug(f"\n{'=' * 80}\nCOMPILER OUTPUT:\n{'=' * 80}\n{log_text}\n")
