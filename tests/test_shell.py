import asyncio
import builtins
from collections.abc import Iterable
from pathlib import Path

import pytest

from memkv.shell.config import ShellConfig, ShellSettings
from memkv.shell.main import main, run


def _feed(monkeypatch: pytest.MonkeyPatch, lines: Iterable[str]) -> list[str]:
    pending = list(lines)
    prompts: list[str] = []

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        if not pending:
            raise EOFError
        return pending.pop(0)

    monkeypatch.setattr(builtins, "input", fake_input)
    return prompts


def test_repl_executes_lines_until_eof(monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["set name Alice", "", "query name", "size", "delete name", "empty"])

    storage = asyncio.run(run(ShellConfig()))
    out = capsys.readouterr().out.splitlines()

    assert out[:5] == ["Set name=Alice", "Alice", "1", "Deleted name=Alice", "True"]
    assert asyncio.run(storage.is_empty())


def test_repl_stops_on_quit(monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["set a 1", "quit", "set b 2"])

    storage = asyncio.run(run(ShellConfig()))

    assert asyncio.run(storage.size()) == 1
    assert asyncio.run(storage.query("b")) is None


def test_repl_reports_bad_input_and_continues(monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["fetch a", "set a 1"])

    asyncio.run(run(ShellConfig()))
    out = capsys.readouterr().out

    assert "Invalid command fetch" in out
    assert "Set a=1" in out


def test_seed_and_prompt_from_config(monkeypatch, capsys) -> None:
    prompts = _feed(monkeypatch, ["query hello"])
    config = ShellConfig(
        shell=ShellSettings(prompt="kv> ", verbose=True), seed={"hello": "world"}
    )

    asyncio.run(run(config))
    out = capsys.readouterr().out

    assert "Seeded 1 entries" in out
    assert "world" in out.splitlines()
    assert prompts[0] == "kv> "


def test_main_with_bundled_config(monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["query language"])
    config_path = Path(__file__).parent.parent / "config" / "memkv.toml"

    assert main(["--config", str(config_path)]) == 0
    assert "Python" in capsys.readouterr().out.splitlines()


def test_main_verbose_flag(monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["set a 1"])

    assert main(["-v"]) == 0
    assert "Apply SetCommand" in capsys.readouterr().out


def test_main_reports_bad_config(tmp_path: Path, capsys) -> None:
    path = tmp_path / "bad.toml"
    path.write_text("[seed]\nn = 1\n", encoding="utf-8")

    assert main(["--config", str(path)]) == 1
    assert "Invalid config" in capsys.readouterr().err
