import pytest
from numcheck.util.checksum import weighted_sum
from numcheck.th.idnr import WEIGHTS

def test_idnr_payload_sum():
    # 13+12+0+10+63+0+0+12+15+0+21+0 = 146 -> 146 % 11 == 3
    assert weighted_sum("110170023070", WEIGHTS, 11) == 3

def test_surplus_weights_are_unused():
    assert weighted_sum("12", (1, 2, 3, 4), 100) == 5

def test_weights_cycle_when_value_is_longer():
    assert weighted_sum("1111", (1, 2), 100) == 6

def test_reverse_pairs_from_the_right():
    assert weighted_sum("12", (1, 2), 100) == 5
    assert weighted_sum("12", (1, 2), 100, reverse=True) == 4

def test_custom_alphabet():
    assert weighted_sum("BA", (1, 1), 100, alphabet="AB") == 1

def test_result_is_within_modulus():
    for payload in ("999999999999", "000000000000", "123456789012"):
        assert 0 <= weighted_sum(payload, WEIGHTS, 11) < 11

def test_empty_value_sums_to_zero():
    assert weighted_sum("", WEIGHTS, 11) == 0

@pytest.mark.parametrize("value", ["12A", "1 2", "๑"])
def test_rejects_characters_outside_alphabet(value):
    with pytest.raises(ValueError):
        weighted_sum(value, WEIGHTS, 11)

def test_rejects_bad_parameters():
    with pytest.raises(ValueError):
        weighted_sum("1", (), 11)
    with pytest.raises(ValueError):
        weighted_sum("1", (1,), 0)
