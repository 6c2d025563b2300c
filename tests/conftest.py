"""Shared pytest fixtures and helpers."""

from pathlib import Path

import pytest

import osc633.config as config_module

OSC633 = "\x1b]633;"
ST = "\x07"

A = f"{OSC633}A{ST}"
B = f"{OSC633}B{ST}"
C = f"{OSC633}C{ST}"


def D(exit_code: str | None = None) -> str:
    return f"{OSC633}D{';' + exit_code if exit_code is not None else ''}{ST}"


def E(command: str, nonce: str | None = None) -> str:
    return f"{OSC633}E;{command}{';' + nonce if nonce is not None else ''}{ST}"


def P(name: str, value: str) -> str:
    return f"{OSC633}P;{name}={value}{ST}"


def raw_sequence(osc_type: str, params: str | None = None) -> str:
    return f"{OSC633}{osc_type}{';' + params if params is not None else ''}{ST}"


@pytest.fixture()
def osc633_config_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> tuple[Path, Path]:
    """Redirect osc633 config paths to a temp directory."""
    config_dir = tmp_path / ".osc633"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_file)
    for name in ("OSC633_CHUNK_SIZE", "OSC633_ENCODING", "OSC633_SKIP_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
    return config_dir, config_file


@pytest.fixture()
def config_dir(osc633_config_paths: tuple[Path, Path]) -> Path:
    return osc633_config_paths[0]


@pytest.fixture()
def config_file(osc633_config_paths: tuple[Path, Path]) -> Path:
    return osc633_config_paths[1]
