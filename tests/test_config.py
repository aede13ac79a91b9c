import json

from clovo.config import DEFAULTS, config_path, generator_options_from_config, load_config, save_config


def test_defaults_when_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    assert load_config() == DEFAULTS
    assert config_path().startswith(str(tmp_path))


def test_save_and_merge(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    save_config({"generate_length": 24, "check_common": False})
    cfg = load_config()
    assert cfg["generate_length"] == 24
    assert cfg["passphrase_words"] == DEFAULTS["passphrase_words"]
    opts = generator_options_from_config(cfg)
    assert opts.check_common is False
    assert opts.min_length == 8


def test_broken_config_falls_back(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    with open(config_path(), "w", encoding="utf-8") as f:
        f.write("{not json")
    assert load_config() == DEFAULTS

    with open(config_path(), "w", encoding="utf-8") as f:
        json.dump([1, 2], f)
    assert load_config() == DEFAULTS
