import pytest
from numcheck.config import NumcheckConfig, load_config
from numcheck.exceptions import ConfigError

def test_defaults():
    cfg = load_config(None)
    assert cfg == NumcheckConfig()
    assert cfg.default_type == "th.idnr"
    assert cfg.format.strict is False
    assert cfg.detectors.regex_packs.th is True
    assert cfg.logging.level == "WARNING"
    assert cfg.logging.json_logs is True

def test_load_yaml(tmp_path):
    p = tmp_path / "numcheck.yaml"
    p.write_text(
        "format:\n  strict: true\n  separator: ' '\n"
        "detectors:\n  min_confidence: 0.5\n"
        "logging:\n  level: DEBUG\n  json: false\n"
    )
    cfg = load_config(p)
    assert cfg.format.strict is True
    assert cfg.format.separator == " "
    assert cfg.detectors.min_confidence == 0.5
    assert cfg.logging.level == "DEBUG"
    assert cfg.logging.json_logs is False

def test_empty_file_gives_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("")
    assert load_config(p) == NumcheckConfig()

@pytest.mark.parametrize("body", [
    "detectors: [unclosed",
    "- just\n- a list\n",
    "detectors:\n  min_confidence: 2\n",
    "logging:\n  level: LOUD\n",
])
def test_bad_config(tmp_path, body):
    p = tmp_path / "bad.yaml"
    p.write_text(body)
    with pytest.raises(ConfigError):
        load_config(p)

def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yaml")
