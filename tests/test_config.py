from pathlib import Path

import pytest
from pydantic import ValidationError

from texdesk.config import TexdeskConfig, load_config


def test_config_defaults() -> None:
    config = TexdeskConfig()
    assert config.compiler == "tectonic"
    assert config.aux_dir_name == ".texdesk"
    assert config.scratch_dir.name == "texdesk_build"
    assert config.scratch_source_path.name == "input.tex"
    assert config.scratch_artifact_path.name == "input.pdf"


def test_config_rejects_nested_aux_dir_name() -> None:
    with pytest.raises(ValidationError):
        TexdeskConfig(aux_dir_name="build/aux")

    with pytest.raises(ValidationError):
        TexdeskConfig(aux_dir_name="..")


def test_config_rejects_empty_compiler() -> None:
    with pytest.raises(ValidationError):
        TexdeskConfig(compiler="")


def test_load_config_reads_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TEXDESK_COMPILER", "/opt/tectonic/bin/tectonic")
    monkeypatch.setenv("TEXDESK_SCRATCH_DIR", str(tmp_path / "scratch"))
    monkeypatch.setenv("TEXDESK_AUX_DIR", "_build")

    config = load_config()

    assert config.compiler == "/opt/tectonic/bin/tectonic"
    assert config.scratch_dir == tmp_path / "scratch"
    assert config.aux_dir_name == "_build"


def test_load_config_ignores_unset_variables(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("TEXDESK_COMPILER", "TEXDESK_SCRATCH_DIR", "TEXDESK_AUX_DIR"):
        monkeypatch.delenv(name, raising=False)

    assert load_config() == TexdeskConfig()
