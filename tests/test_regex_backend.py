import pytest
from numcheck.detect.regex_backend import RegexBackend

@pytest.fixture
def backend():
    return RegexBackend(use_th=True)

def test_detects_grouped_idnr(backend):
    text = "Customer ID 1-1017-00230-70-8, phone 081-234-5678."
    spans = backend.detect(text)
    assert len(spans) == 1
    s = spans[0]
    assert s.type == "TH_IDNR"
    assert s.text == "1-1017-00230-70-8"
    assert s.compact == "1101700230708"
    assert text[s.start:s.end] == s.text

def test_detects_compact_and_spaced(backend):
    text = "a 3100600445635 b 1 1017 00230 70 8 c"
    spans = backend.detect(text)
    assert {s.compact for s in spans} == {"3100600445635", "1101700230708"}

def test_checksum_gates_matches(backend):
    assert backend.detect("wrong: 1101700230709") == []

def test_ignores_digits_inside_longer_runs(backend):
    assert backend.detect("order 911017002307089") == []

def test_no_packs_no_spans():
    assert RegexBackend(use_th=False).detect("1101700230708") == []

def test_malformed_rule_is_skipped(backend):
    assert backend._compile_rule("BROKEN", "not a mapping") is None
    assert backend._compile_rule("BROKEN", {"flags": ["I"]}) is None

def test_unknown_validator_in_rule(backend):
    with pytest.raises(ValueError):
        backend._compile_rule("X", {"regex": r"\d+", "validators": ["xx.nope"]})
