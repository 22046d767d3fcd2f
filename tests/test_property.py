import pytest

from rudderform.configs.property import (
    APINestedObject,
    array_with_objects,
    array_with_strings,
    conditional,
    discriminator,
    equals,
    get_config_value,
    get_inverse_fields,
    get_terraform_value,
    simple,
    skip_zero_value,
)


def test_simple_config_property():
    p = simple("a.b", "t.s")
    assert p.from_state({"p": True}, {"t": {"s": "123"}}) == {"p": True, "a": {"b": "123"}}
    assert p.to_state({"p": True}, {"a": {"b": "123"}}) == {"p": True, "t": {"s": "123"}}


def test_simple_with_filter_skips_zero_value():
    p = simple("a", "t", skip_zero_value)
    assert p.from_state({}, {"t": ""}) == {}
    assert p.from_state({}, {"t": "x"}) == {"a": "x"}


def test_simple_ignores_null_state():
    p = simple("a", "t")
    assert p.from_state({"p": 1}, {"t": None}) == {"p": 1}


def test_conditional_true():
    p = conditional("a.b", "t.s", lambda config: True)
    assert p.from_state({"p": True}, {"t": {"s": "123"}}) == {"p": True, "a": {"b": "123"}}
    assert p.to_state({"p": True}, {"a": {"b": "123"}}) == {"p": True, "t": {"s": "123"}}


def test_conditional_false():
    p = conditional("a.b", "t.s", lambda config: False)
    # from_state writes to api regardless of the condition
    assert p.from_state({"p": True}, {"t": {"s": "123"}}) == {"p": True, "a": {"b": "123"}}
    assert p.to_state({"p": True}, {"a": {"b": "123"}}) == {"p": True}


@pytest.mark.parametrize("value", ["", 0, False, [], 0.0])
def test_skip_zero_value_true(value):
    assert skip_zero_value(value) is True


@pytest.mark.parametrize("value", ["123", 123, True, [1, 2, 3], {}])
def test_skip_zero_value_false(value):
    assert skip_zero_value(value) is False


def test_discriminator():
    p = discriminator("f", {"foo": "FOO", "bar": "BAR"})
    assert p.from_state({"p": True}, {"foo": True}) == {"p": True, "f": "FOO"}
    assert p.from_state({"p": True}, {"notfoo": True}) == {"p": True}
    assert p.to_state({"p": True}, {"f": "FOO"}) == {"p": True}


def test_discriminator_ignores_empty_list():
    p = discriminator("f", {"foo": "FOO", "bar": "BAR"})
    assert p.from_state({}, {"foo": [], "bar": ["x"]}) == {"f": "BAR"}


def test_equals():
    f = equals("a", "VALUE")
    assert f({"a": "VALUE"}) is True
    assert f({"a": "NOT VALUE"}) is False
    assert f({"b": "VALUE"}) is False


def test_array_with_strings():
    p = array_with_strings("getInAppEventMapping.web", "eventName", "get_in_app_event_mapping.0.web")
    api = {"getInAppEventMapping": {"web": [{"eventName": "a"}, {"eventName": "b"}]}}
    state = {"get_in_app_event_mapping": [{"web": ["a", "b"]}]}
    assert p.from_state({}, state) == api
    assert p.to_state({}, api) == state


def test_array_with_strings_rejects_non_array():
    p = array_with_strings("x", "name", "t")
    with pytest.raises(TypeError):
        p.from_state({}, {"t": "not a list"})


def test_array_with_strings_skips_empty_list():
    p = array_with_strings("x", "name", "t")
    assert p.from_state({"p": 1}, {"t": []}) == {"p": 1}


def _channel_fields():
    return {
        "eventName": "name",
        "eventChannel": "channel",
        "eventRegex": "regex",
        "eventNestedValues": APINestedObject(terraform_key="event_nested_values", nested_key="nestedKey"),
    }


def test_array_with_objects():
    p = array_with_objects("eventChannelSettings", "event_channel_settings", _channel_fields())

    api = p.from_state({}, {
        "event_channel_settings": [
            {"name": "n1", "channel": "c1", "regex": "r1", "event_nested_values": ["val1", "val2"]},
            {"name": "n2", "channel": "c2", "regex": "r2", "event_nested_values": ["val3", "val4"]},
        ]
    })
    assert api == {
        "eventChannelSettings": [
            {"eventName": "n1", "eventChannel": "c1", "eventRegex": "r1",
             "eventNestedValues": [{"nestedKey": "val1"}, {"nestedKey": "val2"}]},
            {"eventName": "n2", "eventChannel": "c2", "eventRegex": "r2",
             "eventNestedValues": [{"nestedKey": "val3"}, {"nestedKey": "val4"}]},
        ]
    }

    state = p.to_state({}, {
        "eventChannelSettings": [
            {"eventName": "n1", "eventChannel": "c1", "eventRegex": "r1", "extra": "e1",
             "eventNestedValues": [{"nestedKey": "val1"}, {"nestedKey": "val2"}]},
            {"eventName": "n2", "eventChannel": "c2", "eventRegex": "r2", "extra": "e2",
             "eventNestedValues": [{"nestedKey": "val3"}, {"nestedKey": "val4"}]},
        ]
    })
    assert state == {
        "event_channel_settings": [
            {"name": "n1", "channel": "c1", "regex": "r1", "event_nested_values": ["val1", "val2"]},
            {"name": "n2", "channel": "c2", "regex": "r2", "event_nested_values": ["val3", "val4"]},
        ]
    }


def test_array_with_objects_rejects_non_array():
    p = array_with_objects("x", "t", {"a": "b"})
    with pytest.raises(TypeError):
        p.from_state({}, {"t": {"b": 1}})


def test_inverse_fields_round_trip():
    fields = _channel_fields()
    terraform = [{"name": "n1", "event_nested_values": ["val1"]}]
    api = get_config_value(terraform, get_inverse_fields(fields))
    assert api == [{"eventName": "n1", "eventNestedValues": [{"nestedKey": "val1"}]}]
    assert get_terraform_value(api, fields) == terraform


def test_unknown_fields_dropped():
    assert get_terraform_value([{"extra": "e1"}], _channel_fields()) == []
    assert get_config_value([{"extra": "e1"}], get_inverse_fields(_channel_fields())) == []