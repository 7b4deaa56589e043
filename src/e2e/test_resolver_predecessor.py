import pytest
from cutter.models import ReferenceEntry
from cutter.resolver import resolve
from cutter.errors import EmptyInput, NoEntriesForLetter


def _t_table():
    # deliberately unsorted; sorted order is Taylor, Thomas, Thornton, Tyler
    return [
        ReferenceEntry("T", "Thornton, K.", "45"),
        ReferenceEntry("T", "Tyler", "95"),
        ReferenceEntry("T", "Thomas, J.", "36"),
        ReferenceEntry("T", "Taylor", "3"),
        ReferenceEntry("S", "Smith, J.", "65"),
    ]


@pytest.mark.e2e
def test_between_two_entries_takes_the_predecessor():
    res = resolve("Thompson", _t_table())
    assert res.selected_entry.name == "Thomas, J."
    assert res.code == "T36"
    assert any("falls between" in line for line in res.explanation)
    assert any("Thornton, K." in line for line in res.explanation)


@pytest.mark.e2e
def test_exact_match_wins_regardless_of_position():
    for surname, expected in [("Taylor", "T3"), ("thomas", "T36"), ("Thornton", "T45"), ("TYLER", "T95")]:
        res = resolve(surname, _t_table())
        assert res.code == expected
        assert res.explanation[0].startswith("Exact match found")


@pytest.mark.e2e
def test_before_every_entry_takes_first_entry():
    res = resolve("Tabor", _t_table())
    assert res.selected_entry.name == "Taylor"
    assert "comes before all entries" in res.explanation[0]


@pytest.mark.e2e
def test_after_every_entry_takes_last_entry():
    res = resolve("Tzara", _t_table())
    assert res.selected_entry.name == "Tyler"
    assert "comes after all entries" in res.explanation[0]


@pytest.mark.e2e
def test_input_is_trimmed_and_case_insensitive():
    a = resolve("  THOMPSON ", _t_table())
    b = resolve("thompson", _t_table())
    assert a.selected_entry == b.selected_entry
    assert a.code == "T36"


@pytest.mark.e2e
def test_repeated_calls_are_deterministic():
    table = _t_table()
    picks = {resolve("Thurber", table).selected_entry for _ in range(5)}
    assert len(picks) == 1


@pytest.mark.e2e
def test_nearby_window_is_two_each_side_with_comparisons():
    res = resolve("Thompson", _t_table())
    names = [m.name for m in res.nearby_matches]
    assert names == ["Taylor", "Thomas, J.", "Thornton, K.", "Tyler"]
    assert [m.comparison for m in res.nearby_matches] == [1, 1, -1, -1]

    first = resolve("Tabor", _t_table())
    assert [m.name for m in first.nearby_matches] == ["Taylor", "Thomas, J.", "Thornton, K."]


@pytest.mark.e2e
def test_only_entries_of_the_input_letter_are_considered():
    res = resolve("Smythe", _t_table())
    assert res.code == "S65"
    assert [m.name for m in res.nearby_matches] == ["Smith, J."]


@pytest.mark.e2e
def test_stable_sort_keeps_table_order_for_equal_names():
    table = [ReferenceEntry("B", "Brown", "76"), ReferenceEntry("B", "brown", "77")]
    assert resolve("Brown", table).code == "B76"


@pytest.mark.e2e
@pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
def test_blank_input_is_rejected(blank):
    with pytest.raises(EmptyInput):
        resolve(blank, _t_table())


@pytest.mark.e2e
def test_letter_without_entries_is_reported():
    with pytest.raises(NoEntriesForLetter) as ei:
        resolve("Ibsen", _t_table())
    assert ei.value.letter == "I"
