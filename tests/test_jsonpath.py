import pytest

from rudderform.configs.jsonpath import assign, contains, lookup


def test_assign_creates_nested_objects():
    assert assign({}, "t.s", "123") == {"t": {"s": "123"}}


def test_assign_then_lookup_round_trip():
    document = assign({"p": True}, "a.b.c", [1, 2])
    assert lookup(document, "a.b.c") == [1, 2]
    assert lookup(document, "p") is True


def test_assign_digit_segment_creates_array():
    result = assign({}, "get_in_app_event_mapping.0.web", ["a", "b"])
    assert result == {"get_in_app_event_mapping": [{"web": ["a", "b"]}]}


def test_assign_pads_array_with_nulls():
    assert assign({"a": [1]}, "a.2", 3) == {"a": [1, None, 3]}


def test_assign_leaves_input_unchanged():
    original = {"a": {"b": 1}}
    updated = assign(original, "a.c", 2)
    assert original == {"a": {"b": 1}}
    assert lookup(updated, "a.b") == 1
    assert lookup(updated, "a.c") == 2


def test_assign_copies_value():
    value = ["x"]
    document = assign({}, "k", value)
    value.append("y")
    assert lookup(document, "k") == ["x"]


def test_assign_overwrites_existing_value():
    assert lookup(assign({"a": "old"}, "a", "new"), "a") == "new"


def test_lookup_through_array_index():
    assert lookup({"a": [{"b": "x"}]}, "a.0.b") == "x"


def test_null_value_exists():
    document = {"a": None}
    assert contains(document, "a")
    assert lookup(document, "a") is None


def test_missing_path():
    document = {"a": {"b": 1}}
    assert not contains(document, "a.c")
    assert not contains(document, "a.b.c")
    with pytest.raises(KeyError):
        lookup(document, "x")


def test_array_index_out_of_range():
    assert not contains({"a": [1]}, "a.1")


def test_escaped_dot_is_part_of_key():
    document = assign({}, "a\\.b", 1)
    assert document == {"a.b": 1}
    assert lookup(document, "a\\.b") == 1


def test_empty_path_rejected():
    with pytest.raises(ValueError):
        lookup({}, "")
    with pytest.raises(ValueError):
        assign({}, "", 1)


def test_key_on_array_rejected():
    with pytest.raises(ValueError):
        assign({"a": [1]}, "a.b", 2)