"""Shared fixtures for qquotes tests."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Callable

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from qquotes.config import EffectiveConfig  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``~`` at a scratch directory so no test touches the real home."""

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture()
def effective_config(tmp_path: Path) -> EffectiveConfig:
    """An in-memory EffectiveConfig whose files live under ``tmp_path``."""

    base_dir = tmp_path / "data"
    base_dir.mkdir()
    return EffectiveConfig(
        data_path=base_dir / "quotes.json",
        log_path=base_dir / "qquotes.log",
    )


@pytest.fixture()
def write_config() -> Callable[..., Path]:
    """Return a helper writing ``key = "value"`` pairs to a TOML file."""

    def _write(path: Path, **values: str) -> Path:
        lines = [f"{key} = {json.dumps(value)}" for key, value in values.items()]
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
