import json

from passmeter.config import load_config, save_config, load_policy, config_path, DEFAULTS
from passmeter.policy import Policy, DEFAULT_POLICY


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(str(tmp_path / "nope.json"))
    assert cfg == DEFAULTS
    assert load_policy(str(tmp_path / "nope.json")) == DEFAULT_POLICY


def test_save_and_load(tmp_path):
    path = str(tmp_path / "sub" / "config.json")
    save_config(Policy(min_length=14, require_numbers=False).to_dict(), path)
    policy = load_policy(path)
    assert policy.min_length == 14
    assert policy.require_numbers is False


def test_partial_file_merges_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"min_length": 10}), encoding="utf-8")
    policy = load_policy(str(path))
    assert policy.min_length == 10
    assert policy.require_uppercase is True


def test_corrupt_file_falls_back(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(str(path)) == DEFAULTS
    assert "Ignoring unreadable config" in caplog.text


def test_env_override(tmp_path, monkeypatch):
    target = str(tmp_path / "custom.json")
    monkeypatch.setenv("PASSMETER_CONFIG", target)
    assert config_path() == target
