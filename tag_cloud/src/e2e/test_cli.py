import builtins
import json
from pathlib import Path
import pytest

from frontend.__main__ import main


def _seed(tmp: Path) -> str:
    doc = tmp / "doc.txt"
    doc.write_text("The cat sat on the mat.\nThe cat ran!\n", encoding="utf-8")
    return str(doc)


def _feed(monkeypatch, answers):
    it = iter(answers)

    def fake_input(*_a):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr(builtins, "input", fake_input)


@pytest.mark.e2e
def test_cli_writes_html_file(tmp_path: Path):
    out = tmp_path / "cloud.html"
    assert main(["-i", _seed(tmp_path), "-o", str(out), "-n", "3"]) == 0
    html = out.read_text(encoding="utf-8")
    assert "<title>Top 3 words in doc.txt</title>" in html
    assert 'class="f48" title="count: 3">the</span>' in html


@pytest.mark.e2e
def test_cli_json_to_stdout(tmp_path: Path, capsys):
    assert main(["-i", _seed(tmp_path), "-n", "2", "--format", "json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [e["word"] for e in data["entries"]] == ["cat", "the"]


@pytest.mark.e2e
def test_cli_rejects_too_many_words(tmp_path: Path, capsys):
    assert main(["-i", _seed(tmp_path), "-n", "99"]) == 2
    assert "exceeds" in capsys.readouterr().err


@pytest.mark.e2e
def test_cli_missing_input_file(tmp_path: Path, capsys):
    assert main(["-i", str(tmp_path / "missing.txt"), "-n", "1"]) == 1
    assert "Error opening file" in capsys.readouterr().err


@pytest.mark.e2e
def test_cli_prompts_until_valid_count(tmp_path: Path, monkeypatch, capsys):
    _feed(monkeypatch, [_seed(tmp_path), "", "abc", "50", "2"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("enter the correct size of the tag cloud!") == 2
    assert "<title>Top 2 words in doc.txt</title>" in out


@pytest.mark.e2e
def test_cli_prompt_aborts_on_eof(tmp_path: Path, monkeypatch):
    _feed(monkeypatch, [_seed(tmp_path), ""])
    assert main(["--prompt"]) == 1
