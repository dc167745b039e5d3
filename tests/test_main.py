from __future__ import annotations

import json

import pytest
from conftest import channel, make_item

import main


@pytest.fixture
def workdir(tmp_path, monkeypatch, make_archive):
    archive = make_archive({"1.json": channel(make_item("사랑", ["깊은 애정"]), make_item("바다", ["넓은 물"]))})
    config = tmp_path / "config.yaml"
    config.write_text(
        "archive:\n"
        f"  path: {archive.as_posix()}\n"
        "store:\n"
        f"  json_path: {(tmp_path / 'pool.json').as_posix()}\n"
        "paths:\n"
        f"  logs_dir: {(tmp_path / 'logs').as_posix()}\n",
        encoding="utf-8",
    )
    for name in ("FIREBASE_DATABASE_URL", "DICT_ZIP_PATH", "PORT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main, "_setup_logging", lambda cfg: None)
    return config


def run(config, *argv):
    return main.main(["--config", str(config), *argv])


def test_seed_then_batch(workdir, capsys):
    assert run(workdir, "seed") == 0
    capsys.readouterr()

    assert run(workdir, "batch") == 0
    batch = json.loads(capsys.readouterr().out)
    assert sorted(e["word"] for e in batch) == ["바다", "사랑"]


def test_search_command(workdir, capsys):
    assert run(workdir, "search", "바") == 0
    assert json.loads(capsys.readouterr().out) == [{"word": "바다", "hint": "넓은 물"}]


def test_add_word_exit_status(workdir, capsys):
    assert run(workdir, "add-word", "하늘", "머리 위 공간") == 0
    assert run(workdir, "add-word", "하늘", "머리 위 공간") == 1
    capsys.readouterr()

    assert run(workdir, "clear") == 0
    assert json.loads(capsys.readouterr().out)["success"] is True


def test_unknown_command_exits():
    with pytest.raises(SystemExit):
        main._parse_args(["dance"])


def test_seed_with_zero_limit_saves_nothing(workdir, capsys):
    assert run(workdir, "seed", "--limit", "0") == 0
    capsys.readouterr()

    assert run(workdir, "batch") == 0
    assert json.loads(capsys.readouterr().out) == []
