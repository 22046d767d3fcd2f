import copy

import pytest

from rudderform.configs.registry import DESTINATIONS
from rudderform.configs.validators import has_error
from rudderform.destinations.amplitude import build_config_meta

SOURCE_TYPES = ["unity", "reactnative", "flutter", "cordova", "amp", "cloud", "warehouse", "shopify"]


def _consent_pair(provider, strategy, name):
    state = {
        "provider": provider,
        "resolution_strategy": strategy,
        "consents": [f"one_{name}", f"two_{name}", f"three_{name}"],
    }
    api = {
        "provider": provider,
        "resolutionStrategy": strategy,
        "consents": [{"consent": f"one_{name}"}, {"consent": f"two_{name}"}, {"consent": f"three_{name}"}],
    }
    return state, api


def _consent_management():
    entries = {
        "web": [("oneTrust", "", "web"), ("ketch", "", "web"), ("custom", "and", "web")],
        "android": [("ketch", "", "android")],
        "ios": [("custom", "and", "ios")],
    }
    for source_type in SOURCE_TYPES:
        strategy = "or" if source_type == "unity" else "and"
        entries[source_type] = [("custom", strategy, source_type)]
    state, api = {}, {}
    for source_type, items in entries.items():
        pairs = [_consent_pair(*item) for item in items]
        state[source_type] = [s for s, _ in pairs]
        api[source_type] = [a for _, a in pairs]
    return [state], api


CONSENT_STATE, CONSENT_API = _consent_management()

CREATE_STATE = {"api_key": "placeholder", "api_secret": "secret"}
CREATE_API = {"apiKey": "placeholder", "apiSecret": "secret"}

UPDATE_STATE = {
    "api_key": "placeholder",
    "api_secret": "secret",
    "group_type_trait": "type",
    "group_value_trait": "value",
    "track_all_pages": True,
    "track_categorized_pages": True,
    "track_named_pages": True,
    "track_products_once": True,
    "track_revenue_per_product": True,
    "track_gclid": [{"web": True}],
    "track_referrer": [{"web": True}],
    "track_utm_properties": [{"web": True}],
    "track_session_events": [{"android": True, "ios": True, "react_native": True}],
    "version_name": "name",
    "traits_to_increment": ["one", "two", "three"],
    "traits_to_set_once": ["one", "two", "three"],
    "traits_to_append": ["one", "two", "three"],
    "traits_to_prepend": ["one", "two", "three"],
    "prefer_anonymous_id_for_device_id": [{"web": True}],
    "device_id_from_url_param": [{"web": True}],
    "force_https": [{"web": True}],
    "save_params_referrer_once_per_session": [{"web": True}],
    "unset_params_referrer_on_new_session": [{"web": True}],
    "batch_events": [{"web": True}],
    "map_device_brand": True,
    "event_upload_period_millis": [{"web": "1000", "ios": "1000", "android": "1000", "react_native": "1000"}],
    "event_upload_threshold": [{"web": "1000", "ios": "1000", "android": "1000", "react_native": "1000"}],
    "enable_location_listening": [{"android": True, "react_native": True}],
    "use_advertising_id_for_device_id": [{"android": True, "react_native": True}],
    "use_idfa_as_device_id": [{"ios": True, "react_native": True}],
    "use_native_sdk": [{"web": True, "ios": True, "android": True, "react_native": True}],
    "event_filtering": [{"whitelist": [], "blacklist": ["one", "two", "three"]}],
    "consent_management": CONSENT_STATE,
    "residency_server": "EU",
}

UPDATE_API = {
    "apiKey": "placeholder",
    "apiSecret": "secret",
    "groupTypeTrait": "type",
    "groupValueTrait": "value",
    "trackAllPages": True,
    "trackCategorizedPages": True,
    "trackNamedPages": True,
    "trackProductsOnce": True,
    "trackRevenuePerProduct": True,
    "versionName": "name",
    "traitsToIncrement": [{"traits": "one"}, {"traits": "two"}, {"traits": "three"}],
    "traitsToSetOnce": [{"traits": "one"}, {"traits": "two"}, {"traits": "three"}],
    "traitsToAppend": [{"traits": "one"}, {"traits": "two"}, {"traits": "three"}],
    "traitsToPrepend": [{"traits": "one"}, {"traits": "two"}, {"traits": "three"}],
    "useNativeSDK": {"web": True, "ios": True, "android": True, "reactnative": True},
    "preferAnonymousIdForDeviceId": {"web": True},
    "deviceIdFromUrlParam": {"web": True},
    "forceHttps": {"web": True},
    "trackGclid": {"web": True},
    "trackReferrer": {"web": True},
    "saveParamsReferrerOncePerSession": {"web": True},
    "trackUtmProperties": {"web": True},
    "unsetParamsReferrerOnNewSession": {"web": True},
    "batchEvents": {"web": True},
    "eventFilteringOption": "blacklistedEvents",
    "blacklistedEvents": [{"eventName": "one"}, {"eventName": "two"}, {"eventName": "three"}],
    "eventUploadPeriodMillis": {"web": "1000", "android": "1000", "ios": "1000", "reactnative": "1000"},
    "eventUploadThreshold": {"web": "1000", "android": "1000", "ios": "1000", "reactnative": "1000"},
    "mapDeviceBrand": True,
    "enableLocationListening": {"android": True, "reactnative": True},
    "trackSessionEvents": {"android": True, "ios": True, "reactnative": True},
    "useAdvertisingIdForDeviceId": {"android": True, "reactnative": True},
    "useIdfaAsDeviceId": {"ios": True, "reactnative": True},
    "consentManagement": CONSENT_API,
    "residencyServer": "EU",
}


@pytest.fixture
def meta():
    return build_config_meta()


def test_registered_under_amplitude():
    entry = DESTINATIONS.entries()["amplitude"]
    assert entry.api_type == "AM"
    assert DESTINATIONS.find_api_type("AM")[0] == "amplitude"


def test_create_state_to_api(meta):
    assert meta.state_to_api(CREATE_STATE) == CREATE_API


def test_create_round_trip(meta):
    assert meta.state_to_api(meta.api_to_state(CREATE_API)) == CREATE_API


def test_update_state_to_api(meta):
    assert meta.state_to_api(copy.deepcopy(UPDATE_STATE)) == UPDATE_API


def test_update_round_trip(meta):
    assert meta.state_to_api(meta.api_to_state(UPDATE_API)) == UPDATE_API


def test_api_to_state_event_filtering(meta):
    state = meta.api_to_state(UPDATE_API)
    assert state["event_filtering"] == [{"blacklist": ["one", "two", "three"]}]
    assert state["use_native_sdk"] == [{"web": True, "ios": True, "android": True, "react_native": True}]
    assert state["consent_management"] == CONSENT_STATE


def test_zero_values_are_skipped(meta):
    state = dict(CREATE_STATE, track_all_pages=False, group_type_trait="", residency_server="")
    assert meta.state_to_api(state) == CREATE_API


def test_whitelist_sets_discriminator(meta):
    state = dict(CREATE_STATE, event_filtering=[{"whitelist": ["a"], "blacklist": []}])
    api = meta.state_to_api(state)
    assert api["eventFilteringOption"] == "whitelistedEvents"
    assert api["whitelistedEvents"] == [{"eventName": "a"}]
    assert "blacklistedEvents" not in api


@pytest.mark.parametrize("value, error", [("EU", False), ("standard", False), ("env.REGION", False), ("US", True)])
def test_residency_server_validation(meta, value, error):
    schema = meta.config_schema["residency_server"]
    assert has_error(schema.validate(value, ("residency_server",))) is error


@pytest.mark.parametrize("value, error", [("key", False), ("", True), ("x" * 101, True), ("{{ a || b }}", False)])
def test_api_key_validation(meta, value, error):
    assert has_error(meta.config_schema["api_key"].validate(value, ("api_key",))) is error


def test_schema_flags(meta):
    schema = meta.config_schema
    assert schema["api_key"].required is True
    assert schema["api_secret"].sensitive is True
    assert schema["use_native_sdk"].max_items == 1
    assert schema["use_native_sdk"].is_nested_block() is True
    assert sorted(schema["consent_management"].elem.schema) == sorted(
        ["web", "android", "ios"] + SOURCE_TYPES
    )