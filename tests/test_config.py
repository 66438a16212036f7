import json
from pathlib import Path

from t9trie import config as config_mod
from t9trie.config import DEFAULTS, load_config


def test_packaged_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("T9TRIE_CONFIG", raising=False)
    cfg = load_config()
    assert set(DEFAULTS) <= set(cfg)
    assert Path(cfg["dictionary"]).is_absolute()
    assert Path(cfg["dictionary"]).name == "example.txt"
    assert "_comment" not in cfg


def test_explicit_path_wins(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("T9TRIE_CONFIG", raising=False)
    (tmp_path / "config.json").write_text(json.dumps({"max_results": 3}), encoding="utf-8")
    custom = tmp_path / "sub" / "custom.json"
    custom.parent.mkdir()
    custom.write_text(json.dumps({"max_results": 7, "dictionary": "words.txt"}), encoding="utf-8")

    cfg = load_config(custom)
    assert cfg["max_results"] == 7
    assert cfg["dictionary"] == str(custom.parent / "words.txt")


def test_env_var_then_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("T9TRIE_CONFIG", raising=False)
    (tmp_path / "config.json").write_text(json.dumps({"max_results": 3}), encoding="utf-8")
    assert load_config()["max_results"] == 3

    env_cfg = tmp_path / "env.json"
    env_cfg.write_text(json.dumps({"max_results": 5}), encoding="utf-8")
    monkeypatch.setenv("T9TRIE_CONFIG", str(env_cfg))
    assert load_config()["max_results"] == 5


def test_defaults_not_mutated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.json").write_text(json.dumps({"lowercase": True}), encoding="utf-8")
    assert load_config()["lowercase"] is True
    assert config_mod.DEFAULTS["lowercase"] is False


def test_bad_json_keeps_defaults(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("T9TRIE_CONFIG", raising=False)
    (tmp_path / "config.json").write_text("{not json", encoding="utf-8")
    cfg = load_config()
    assert cfg["max_results"] == DEFAULTS["max_results"]
    assert cfg["dictionary"] == DEFAULTS["dictionary"]
    assert any("could not parse" in r.getMessage() for r in caplog.records)
