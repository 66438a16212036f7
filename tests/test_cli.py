import io
import json
import sys

import pytest

from t9trie.cli import EXIT_BAD_QUERY, EXIT_BUILD_FAILED, EXIT_NO_KEYPAD, EXIT_OK, main


@pytest.fixture
def wordfile(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("T9TRIE_CONFIG", raising=False)
    path = tmp_path / "words.txt"
    path.write_text("home\ngood\ngone\nhold\nice cream\n", encoding="utf-8")
    return path


def test_lookup_arguments(wordfile, capsys):
    assert main(["-d", str(wordfile), "4663", "4653", "999"]) == EXIT_OK
    out = capsys.readouterr().out.splitlines()
    assert out == ["4663: home, good, gone", "4653: hold", "999: (no match)"]


def test_max_results(wordfile, capsys):
    assert main(["-d", str(wordfile), "-n", "2", "4663"]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "4663: home, good, ... (+1)"


def test_bad_queries_do_not_stop_others(wordfile, capsys):
    assert main(["-d", str(wordfile), "4063", "46x3", "4653"]) == EXIT_BAD_QUERY
    captured = capsys.readouterr()
    assert captured.out.strip() == "4653: hold"
    assert "4063: error" in captured.err
    assert "46x3: error" in captured.err


def test_reads_stdin(wordfile, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4663\n\n4653\n"))
    assert main(["-d", str(wordfile)]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["4663: home, good, gone", "4653: hold"]


def test_dot_to_stdout(wordfile, capsys):
    assert main(["-d", str(wordfile), "--dot", "-"]) == EXIT_OK
    out = capsys.readouterr().out
    assert out.startswith("digraph {")
    assert 'label="home, good, gone"' in out


def test_dot_to_file_and_stats(wordfile, tmp_path, capsys):
    target = tmp_path / "trie.dot"
    assert main(["-d", str(wordfile), "--dot", str(target), "--stats"]) == EXIT_OK
    assert target.read_text(encoding="utf-8").startswith("digraph {")
    out = capsys.readouterr().out
    assert "words" in out and "nodes" in out


def test_missing_dictionary(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["-d", str(tmp_path / "missing.txt"), "4663"]) == EXIT_BUILD_FAILED


def test_config_file_is_used(wordfile, tmp_path, capsys):
    cfg = tmp_path / "config.json"
    cfg.write_text(json.dumps({"dictionary": wordfile.name, "max_results": 1}), encoding="utf-8")
    assert main(["4663"]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "4663: home, ... (+2)"


def test_packaged_example_dictionary(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("T9TRIE_CONFIG", raising=False)
    assert main(["5233"]) == EXIT_OK
    out = capsys.readouterr().out.strip()
    assert out.startswith("5233: ")
    assert "jade" in out and "kade" in out


def test_unwritable_dot_target(wordfile, tmp_path, caplog):
    # a directory cannot be opened for writing
    assert main(["-d", str(wordfile), "--dot", str(tmp_path)]) == EXIT_BUILD_FAILED
    assert any("could not write" in r.getMessage() for r in caplog.records)


def test_capture_without_pynput(wordfile, monkeypatch, caplog):
    # None in sys.modules makes the import fail with ImportError
    monkeypatch.setitem(sys.modules, "t9trie.keypad", None)
    assert main(["-d", str(wordfile), "--capture"]) == EXIT_NO_KEYPAD
    assert any(r.levelname == "ERROR" for r in caplog.records)
