import subprocess
import sys
import threading
from pathlib import Path

import pytest
from loguru import logger

from texdesk import compiler as compiler_module
from texdesk.config import TexdeskConfig


class FakeTectonic:
    """Stands in for the tectonic binary: records calls and writes the PDF it is told to."""

    def __init__(self) -> None:
        self.calls: list[tuple[list[str], Path | None]] = []
        self.returncode = 0
        self.stdout = ""
        self.stderr = ""
        self.artifact: bytes | None = b"%PDF-1.5\n%fake"
        self.on_run = None
        self._lock = threading.Lock()

    def artifact_path(self, command: list[str]) -> Path:
        source = Path(command[-1])
        if "-o" in command:
            return Path(command[command.index("-o") + 1]) / f"{source.stem}.pdf"
        return source.with_suffix(".pdf")

    def __call__(self, command, cwd=None, **kwargs):
        with self._lock:
            self.calls.append((list(command), cwd))
        if self.on_run is not None:
            self.on_run(command)
        if self.returncode == 0 and self.artifact is not None:
            self.artifact_path(command).write_bytes(self.artifact)
        return subprocess.CompletedProcess(command, self.returncode, self.stdout, self.stderr)


@pytest.fixture
def fake_tectonic(monkeypatch) -> FakeTectonic:
    fake = FakeTectonic()
    monkeypatch.setattr(compiler_module.shutil, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(compiler_module.subprocess, "run", fake)
    return fake


@pytest.fixture
def config(tmp_path) -> TexdeskConfig:
    return TexdeskConfig(scratch_dir=tmp_path / "scratch")


@pytest.fixture(autouse=True)
def _restore_loguru_sinks():
    yield
    logger.remove()
    logger.add(sys.stderr)
