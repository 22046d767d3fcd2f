import pytest

from rudderform.configs.meta import ConfigMeta
from rudderform.configs.registry import Registry


def test_registries():
    r = Registry()
    r.register("test", ConfigMeta(api_type="APIType"))
    e = r.entries()
    assert len(e) == 1
    assert e["test"].api_type == "APIType"


def test_duplicate_name_rejected():
    r = Registry("destinations")
    r.register("test", ConfigMeta(api_type="A"))
    with pytest.raises(ValueError, match="'test' is already registered with destinations"):
        r.register("test", ConfigMeta(api_type="B"))
    assert r.entries()["test"].api_type == "A"


def test_entries_is_read_only():
    r = Registry()
    r.register("test", ConfigMeta())
    with pytest.raises(TypeError):
        r.entries()["other"] = ConfigMeta()  # type: ignore[index]


def test_find_api_type():
    r = Registry()
    meta = ConfigMeta(api_type="AM")
    r.register("amplitude", meta)
    r.register("active_campaign", ConfigMeta(api_type="ACTIVE_CAMPAIGN"))
    assert r.find_api_type("AM") == ("amplitude", meta)
    assert r.find_api_type("UNKNOWN") is None


def test_contains_and_len():
    r = Registry()
    r.register("test", ConfigMeta())
    assert "test" in r
    assert "other" not in r
    assert len(r) == 1