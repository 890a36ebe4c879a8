import pandas as pd
import pytest

from plotlars.frame import filter_by_group, numeric_column, string_column, unique_groups


@pytest.fixture
def animals():
    return pd.DataFrame(
        {
            "animal": ["giraffe", "giraffe", "orangutan", "orangutan", "monkey", "monkey"],
            "gender": ["female", "male", "female", "male", "female", "male"],
            "value": [20.0, 25.0, 14.0, 18.0, 23.0, 31.0],
        }
    )


def test_unique_groups_keep_first_appearance_order(animals):
    assert unique_groups(animals, "animal") == ["giraffe", "orangutan", "monkey"]


def test_unique_groups_of_numbers_are_strings():
    data = pd.DataFrame({"g": [3, 1, 3]})
    assert unique_groups(data, "g") == ["3", "1"]


def test_unique_groups_reject_missing_values():
    data = pd.DataFrame({"g": ["a", None]})
    with pytest.raises(ValueError):
        unique_groups(data, "g")


def test_missing_column_raises_key_error(animals):
    with pytest.raises(KeyError):
        numeric_column(animals, "absent")
    with pytest.raises(KeyError):
        string_column(animals, "absent")


def test_numeric_column_converts_ints_to_floats():
    data = pd.DataFrame({"n": [1, 2, 3]})
    result = numeric_column(data, "n")
    assert result == [1.0, 2.0, 3.0]
    assert all(isinstance(value, float) for value in result)


def test_numeric_column_turns_unreadable_and_missing_into_none():
    data = pd.DataFrame({"n": ["1.5", "abc", None]})
    assert numeric_column(data, "n") == [1.5, None, None]


def test_string_column_keeps_missing_as_none():
    data = pd.DataFrame({"s": ["a", None, "b"]})
    assert string_column(data, "s") == ["a", None, "b"]


def test_filter_by_group_selects_matching_rows(animals):
    subset = filter_by_group(animals, "gender", "male")
    assert list(subset["gender"]) == ["male", "male", "male"]
    assert list(subset["value"]) == [25.0, 18.0, 31.0]
    assert list(subset.index) == [0, 1, 2]


def test_filter_by_group_partitions_the_frame(animals):
    parts = [filter_by_group(animals, "animal", g) for g in unique_groups(animals, "animal")]
    assert sum(len(part) for part in parts) == len(animals)


def test_filter_by_group_matches_numbers_by_their_string():
    data = pd.DataFrame({"g": [1, 2, 1], "v": [10, 20, 30]})
    assert list(filter_by_group(data, "g", "1")["v"]) == [10, 30]


def test_filter_by_unknown_group_is_empty(animals):
    assert filter_by_group(animals, "animal", "zebra").empty