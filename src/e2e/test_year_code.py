import pytest
from cutter.composer import year_code


@pytest.mark.e2e
@pytest.mark.parametrize("year, code", [
    (1987, "F87"),   # century 20
    (2005, "G05"),   # century 21
    (1499, "A99"),   # century 15
    (1500, "B00"),   # century 16
    (1805, "E05"),   # century 19
    (1776, "D76"),   # century 18
    (2150, "G50"),   # century 22 is unmapped -> G
    (1200, "G00"),   # below the table also falls back to G
])
def test_year_code(year, code):
    assert year_code(year) == code
