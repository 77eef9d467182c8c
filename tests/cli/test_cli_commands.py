from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from qquotes.cli import main


@pytest.fixture()
def paths(tmp_path: Path, write_config: Callable[..., Path]) -> dict[str, Path]:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    data_path = data_dir / "quotes.json"
    log_path = data_dir / "qquotes.log"
    config_path = write_config(
        tmp_path / "config.toml",
        path_data_file=str(data_path),
        path_log_file=str(log_path),
    )
    return {"config": config_path, "data": data_path, "log": log_path}


def _run(paths: dict[str, Path], *args: str) -> int:
    return main(["--config", str(paths["config"]), *args])


def test_main_without_command_prints_hint(paths: dict[str, Path], capsys: Any) -> None:
    exit_code = _run(paths)

    assert exit_code == 0
    assert "No default action" in capsys.readouterr().out


def test_save_list_remove_flow(paths: dict[str, Path], capsys: Any) -> None:
    assert _run(paths, "save", "Hello") == 0
    assert _run(paths, "save", "World", "--author", "Someone") == 0
    assert "Saved quote #1." in capsys.readouterr().out

    assert _run(paths, "list") == 0
    out = capsys.readouterr().out
    assert "#0  Hello" in out
    assert "#1  World" in out

    assert _run(paths, "remove", "0") == 0
    assert "Removed quote #0." in capsys.readouterr().out

    records = json.loads(paths["data"].read_text(encoding="utf-8"))
    assert [(r["id"], r["text"], r.get("author")) for r in records] == [(1, "World", "Someone")]


def test_list_empty(paths: dict[str, Path], capsys: Any) -> None:
    assert _run(paths, "list", "--long-format") == 0
    assert "There is no quote saved." in capsys.readouterr().out


def test_legacy_command_aliases(paths: dict[str, Path], capsys: Any) -> None:
    assert _run(paths, "add", "kept for old habits") == 0
    assert _run(paths, "delete", "0") == 0
    assert json.loads(paths["data"].read_text(encoding="utf-8")) == []


def test_save_prompts_when_text_missing(
    paths: dict[str, Path], monkeypatch: pytest.MonkeyPatch, capsys: Any
) -> None:
    monkeypatch.setattr("qquotes.cli.typer.prompt", lambda *_args, **_kwargs: "Typed in")

    assert _run(paths, "save") == 0

    records = json.loads(paths["data"].read_text(encoding="utf-8"))
    assert records[0]["text"] == "Typed in"


def test_remove_unknown_id_exits_non_zero(paths: dict[str, Path], capsys: Any) -> None:
    exit_code = _run(paths, "remove", "5")

    assert exit_code == 6
    assert "No quote with id 5" in capsys.readouterr().err


def test_blank_quote_exits_non_zero(paths: dict[str, Path], capsys: Any) -> None:
    exit_code = _run(paths, "save", "   ")

    assert exit_code == 5
    assert "must not be empty" in capsys.readouterr().err
    assert not paths["data"].exists()


def test_corrupt_data_file_exits_non_zero(paths: dict[str, Path], capsys: Any) -> None:
    paths["data"].write_text("[{", encoding="utf-8")

    exit_code = _run(paths, "list")

    assert exit_code == 3
    assert "not valid JSON" in capsys.readouterr().err
    assert paths["data"].read_text(encoding="utf-8") == "[{"


def test_malformed_config_aborts_before_command(tmp_path: Path, capsys: Any) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("path_data_file = [", encoding="utf-8")

    exit_code = main(["--config", str(config_path), "save", "never stored"])

    assert exit_code == 2
    assert "Malformed configuration" in capsys.readouterr().err


def test_non_integer_id_is_a_usage_error(paths: dict[str, Path], capsys: Any) -> None:
    exit_code = _run(paths, "remove", "abc")

    assert exit_code == 2


def test_events_are_written_to_log_file(paths: dict[str, Path]) -> None:
    _run(paths, "save", "Logged")
    _run(paths, "remove", "3")

    log_text = paths["log"].read_text(encoding="utf-8")
    assert "Saved quote #0" in log_text
    assert "No quote with id 3" in log_text


def test_verbose_flag_enables_trace_output(paths: dict[str, Path], capsys: Any) -> None:
    assert main(["-vv", "--config", str(paths["config"]), "list"]) == 0

    err = capsys.readouterr().err
    assert "Data file:" in err


def test_default_paths_live_in_home(isolated_home: Path, capsys: Any) -> None:
    assert main(["save", "from home"]) == 0

    assert (isolated_home / "qquotes_data.json").exists()
    assert (isolated_home / "qquotes.log").exists()


def test_undecodable_argument_exits_non_zero(paths: dict[str, Path], capsys: Any) -> None:
    exit_code = _run(paths, "save", "bad \udcff bytes")

    assert exit_code == 5
    assert "Quote text is not valid UTF-8" in capsys.readouterr().err
    assert not paths["data"].exists()


def test_failed_command_reports_error_once(paths: dict[str, Path], capsys: Any) -> None:
    assert _run(paths, "remove", "7") == 6

    assert capsys.readouterr().err.count("No quote with id 7") == 1


def test_highest_id_is_reassigned_in_a_later_run(paths: dict[str, Path]) -> None:
    for args in (("save", "a"), ("save", "b"), ("remove", "1"), ("save", "c")):
        assert _run(paths, *args) == 0

    records = json.loads(paths["data"].read_text(encoding="utf-8"))
    assert [(r["id"], r["text"]) for r in records] == [(0, "a"), (1, "c")]
