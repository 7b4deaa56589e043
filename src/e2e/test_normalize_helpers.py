import pytest
from cutter.normalize import comparison_key, partition_for, ordinal, first_letter


@pytest.mark.e2e
def test_comparison_key_drops_everything_after_the_first_comma():
    assert comparison_key("Smith, J.") == "smith"
    assert comparison_key("Thomas, J., Jr.") == "thomas"
    assert comparison_key("  Tyler ") == "tyler"


@pytest.mark.e2e
def test_partition_routing_merges_vowels():
    assert {partition_for(v) for v in "AEIOUaeiou"} == {"vowels"}
    assert partition_for("b") == "b"
    assert partition_for("T") == "t"


@pytest.mark.e2e
def test_first_letter():
    assert first_letter("  thompson") == "T"
    assert first_letter("   ") == ""


@pytest.mark.e2e
@pytest.mark.parametrize("n, text", [
    (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
    (11, "11th"), (12, "12th"), (13, "13th"),
    (21, "21st"), (22, "22nd"), (101, "101st"), (111, "111th"),
])
def test_ordinal(n, text):
    assert ordinal(n) == text
