"""Config metadata for the Amplitude destination."""

from __future__ import annotations

from typing import Iterable

from rudderform.configs.meta import ConfigMeta
from rudderform.configs.property import (
    ConfigProperty,
    array_with_strings,
    discriminator,
    simple,
    skip_zero_value,
)
from rudderform.configs.registry import DESTINATIONS
from rudderform.configs.schema import Resource, Schema, ValueType
from rudderform.configs.validators import string_matches_regexp
from rudderform.destinations.common import common_config_meta

TERRAFORM_TYPE = "amplitude"
API_TYPE = "AM"

SUPPORTED_SOURCE_TYPES = (
    "web", "android", "ios", "unity", "reactnative", "flutter",
    "cordova", "amp", "cloud", "warehouse", "shopify",
)

_ONE_TO_100 = r"(^\{\{.*\|\|(.*)\}\}$)|(^env[.].+)|^(.{1,100})$"
_RESIDENCY = r"(^env[.].*)|^(standard|EU)$"
_EVENT_FILTERING_KEYS = (
    "config.0.event_filtering.0.whitelist",
    "config.0.event_filtering.0.blacklist",
)

_ACCOUNT_HELP = "Enter your Amplitude API key."
_DELETION_HELP = "Enter the Amplitude API Secret key required for user deletion."


def _string(description: str, required: bool = False, sensitive: bool = False) -> Schema:
    return Schema(
        type=ValueType.STRING,
        required=required,
        optional=not required,
        sensitive=sensitive,
        description=description,
        validator=string_matches_regexp(_ONE_TO_100),
    )


def _flag(description: str) -> Schema:
    return Schema(type=ValueType.BOOL, optional=True, description=description)


def _string_list(description: str) -> Schema:
    return Schema(
        type=ValueType.LIST,
        optional=True,
        description=description,
        elem=Schema(type=ValueType.STRING),
    )


def _per_platform(description: str, platforms: Iterable[str],
                  value_type: ValueType = ValueType.BOOL) -> Schema:
    return Schema(
        type=ValueType.LIST,
        max_items=1,
        optional=True,
        description=description,
        elem=Resource({
            platform: Schema(type=value_type, optional=True) for platform in platforms
        }),
    )


def _web_only(description: str) -> Schema:
    return _per_platform(description, ("web",))


def _event_list(description: str) -> Schema:
    return Schema(
        type=ValueType.LIST,
        optional=True,
        description=description,
        exactly_one_of=_EVENT_FILTERING_KEYS,
        elem=Schema(type=ValueType.STRING),
    )


_ALL_PLATFORMS = ("web", "ios", "android", "react_native")


def _build_schema() -> dict[str, Schema]:
    account_schema = _string(_ACCOUNT_HELP, required=True)
    deletion_schema = _string(_DELETION_HELP, sensitive=True)
    return {
        "api_key": account_schema,
        "api_secret": deletion_schema,
        "group_type_trait": _string(
            "RudderStack will use this value as `groupType` in the `group` calls."
        ),
        "group_value_trait": _string(
            "RudderStack will use this value as `groupValue` in the `group` calls."
        ),
        "residency_server": Schema(
            type=ValueType.STRING,
            optional=True,
            validator=string_matches_regexp(_RESIDENCY),
        ),
        "track_all_pages": _flag(
            "If this setting is enabled, RudderStack sends an event named `Loaded a page` / "
            "`Loaded a Screen` to Amplitude."
        ),
        "track_categorized_pages": _flag(
            "If this setting is enabled and if `category` is present in a `page` / `screen` call, "
            "then an event named `Viewed {category} page` / `Viewed {category} Screen` will be "
            "sent to Amplitude."
        ),
        "track_named_pages": _flag(
            "If this setting is enabled and `name` is present in a `page` call, then an event "
            "named `Viewed {name} page` will be sent to Amplitude."
        ),
        "track_products_once": _flag(
            "If this setting is enabled and if the event payload contains an array of products, "
            "then the event is tracked with the original event name and all the products as its "
            "property. Otherwise, each product is tracked with event as `Product purchased`."
        ),
        "track_revenue_per_product": _flag(
            "If this setting is enabled and if the event payload contains multiple products, "
            "each product's revenue is tracked individually."
        ),
        "version_name": _string(
            "The value of this field is set as the `versionName` of the Amplitude SDK."
        ),
        "traits_to_increment": _string_list(
            "If this setting is enabled, the value of the corresponding trait will be incremented "
            "at Amplitude, with the value provided against the trait in an `identify` call."
        ),
        "traits_to_set_once": _string_list(
            "If this setting is enabled, the value of the corresponding trait will be set once at "
            "Amplitude with the value provided against the trait in an `identify` call."
        ),
        "traits_to_append": _string_list(
            "If this setting is enabled, the value of the corresponding trait will be appended to "
            "the corresponding trait array at Amplitude."
        ),
        "traits_to_prepend": _string_list(
            "If this setting is enabled, the value of the corresponding trait will be prepended "
            "to the corresponding trait array at Amplitude."
        ),
        "use_native_sdk": _per_platform(
            "Enable this setting to send events to Amplitude via the device mode.", _ALL_PLATFORMS
        ),
        "prefer_anonymous_id_for_device_id": _web_only(
            "If this setting is enabled, the device ID will be set as the `anonymousId` generated "
            "by RudderStack SDK or by the `anonymousId` set via RudderStack's `setAnonymousId()` "
            "method."
        ),
        "device_id_from_url_param": _web_only(
            "If this setting is enabled, the Amplitude SDK will parse the URL parameter and set "
            "the device ID from `amp_device_id`."
        ),
        "force_https": _web_only(
            "If this setting is enabled, the events will always be uploaded by the Amplitude SDK "
            "to the HTTPS endpoint, otherwise it will use the embedding site's protocol."
        ),
        "track_gclid": _web_only(
            "If this setting is enabled, the Amplitude SDK will capture the `gclid` URL "
            "parameters along with the user's `initial_gclid` parameters."
        ),
        "track_referrer": _web_only(
            "If this setting is enabled, the Amplitude SDK will capture the `referrer` and "
            "`referring_domain` for each session along with the user's `initial_referrer` and "
            "`initial_referring_domain`."
        ),
        "save_params_referrer_once_per_session": _web_only(
            "If this setting is enabled, the corresponding tracking of `gclid`, referrer, UTM "
            "parameters will be done once per session."
        ),
        "track_utm_properties": _web_only(
            "If this setting is enabled, the Amplitude SDK parses the UTM parameters in the query "
            "string or `_utmz` cookie and includes them as user properties in all uploaded events."
        ),
        "unset_params_referrer_on_new_session": _web_only(
            "If this setting is disabled, the existing `referrer` and `utm_parameter` values will "
            "be passed to each new session. If enabled, `referrer` and `utm_parameter` properties "
            "will be set to `null` upon instantiating a new session."
        ),
        "batch_events": _web_only(
            "If this setting is enabled, the events are batched together and uploaded by the "
            "Amplitude SDK."
        ),
        "event_filtering": Schema(
            type=ValueType.LIST,
            max_items=1,
            optional=True,
            description="This option allows you filter the events you want to send to Amplitude.",
            elem=Resource({
                "whitelist": _event_list("Enter the event names to be allowlisted."),
                "blacklist": _event_list("Enter the event names to be denylisted."),
            }),
        ),
        "event_upload_period_millis": _per_platform(
            "If the batch events settings is enabled, this is the amount of time that the SDK "
            "waits to upload the events.",
            _ALL_PLATFORMS,
            ValueType.STRING,
        ),
        "event_upload_threshold": _per_platform(
            "If the batch events settings is enabled, this is the minimum number of events to "
            "batch together by the Amplitude SDK.",
            _ALL_PLATFORMS,
            ValueType.STRING,
        ),
        "map_device_brand": _flag(
            "Enable this setting for RudderStack to send the device brand information "
            "(`context.device.brand`) to Amplitude."
        ),
        "enable_location_listening": _per_platform(
            "Enable this setting to activate location listening.", ("android", "react_native")
        ),
        "track_session_events": _per_platform(
            "Enable this setting to track the session events.", ("ios", "android", "react_native")
        ),
        "use_advertising_id_for_device_id": _per_platform(
            "Enable this setting to set the advertising ID as the device ID.",
            ("android", "react_native"),
        ),
        "use_idfa_as_device_id": _per_platform(
            "Enable this setting to set the IDFA as the device ID.", ("ios", "react_native")
        ),
    }


def _build_properties() -> list[ConfigProperty]:
    return [
        simple("apiKey", "api_key"),
        simple("apiSecret", "api_secret"),
        simple("groupTypeTrait", "group_type_trait", skip_zero_value),
        simple("groupValueTrait", "group_value_trait", skip_zero_value),
        simple("trackAllPages", "track_all_pages", skip_zero_value),
        simple("trackCategorizedPages", "track_categorized_pages", skip_zero_value),
        simple("trackNamedPages", "track_named_pages", skip_zero_value),
        simple("trackProductsOnce", "track_products_once", skip_zero_value),
        simple("trackRevenuePerProduct", "track_revenue_per_product", skip_zero_value),
        simple("versionName", "version_name", skip_zero_value),
        array_with_strings("traitsToIncrement", "traits", "traits_to_increment"),
        array_with_strings("traitsToSetOnce", "traits", "traits_to_set_once"),
        array_with_strings("traitsToAppend", "traits", "traits_to_append"),
        array_with_strings("traitsToPrepend", "traits", "traits_to_prepend"),
        simple("useNativeSDK.web", "use_native_sdk.0.web"),
        simple("useNativeSDK.ios", "use_native_sdk.0.ios"),
        simple("useNativeSDK.android", "use_native_sdk.0.android"),
        simple("useNativeSDK.reactnative", "use_native_sdk.0.react_native"),
        simple("preferAnonymousIdForDeviceId.web", "prefer_anonymous_id_for_device_id.0.web"),
        simple("deviceIdFromUrlParam.web", "device_id_from_url_param.0.web"),
        simple("forceHttps.web", "force_https.0.web"),
        simple("trackGclid.web", "track_gclid.0.web"),
        simple("trackReferrer.web", "track_referrer.0.web"),
        simple("saveParamsReferrerOncePerSession.web", "save_params_referrer_once_per_session.0.web"),
        simple("trackUtmProperties.web", "track_utm_properties.0.web"),
        simple("unsetParamsReferrerOnNewSession.web", "unset_params_referrer_on_new_session.0.web"),
        simple("batchEvents.web", "batch_events.0.web"),
        array_with_strings("whitelistedEvents", "eventName", "event_filtering.0.whitelist"),
        array_with_strings("blacklistedEvents", "eventName", "event_filtering.0.blacklist"),
        discriminator("eventFilteringOption", {
            "event_filtering.0.whitelist": "whitelistedEvents",
            "event_filtering.0.blacklist": "blacklistedEvents",
        }),
        simple("eventUploadPeriodMillis.web", "event_upload_period_millis.0.web"),
        simple("eventUploadPeriodMillis.android", "event_upload_period_millis.0.android"),
        simple("eventUploadPeriodMillis.ios", "event_upload_period_millis.0.ios"),
        simple("eventUploadPeriodMillis.reactnative", "event_upload_period_millis.0.react_native"),
        simple("eventUploadThreshold.web", "event_upload_threshold.0.web"),
        simple("eventUploadThreshold.android", "event_upload_threshold.0.android"),
        simple("eventUploadThreshold.ios", "event_upload_threshold.0.ios"),
        simple("eventUploadThreshold.reactnative", "event_upload_threshold.0.react_native"),
        simple("mapDeviceBrand", "map_device_brand", skip_zero_value),
        simple("enableLocationListening.android", "enable_location_listening.0.android"),
        simple("enableLocationListening.reactnative", "enable_location_listening.0.react_native"),
        simple("trackSessionEvents.android", "track_session_events.0.android"),
        simple("trackSessionEvents.ios", "track_session_events.0.ios"),
        simple("trackSessionEvents.reactnative", "track_session_events.0.react_native"),
        simple("useAdvertisingIdForDeviceId.android", "use_advertising_id_for_device_id.0.android"),
        simple("useAdvertisingIdForDeviceId.reactnative",
               "use_advertising_id_for_device_id.0.react_native"),
        simple("useIdfaAsDeviceId.ios", "use_idfa_as_device_id.0.ios"),
        simple("useIdfaAsDeviceId.reactnative", "use_idfa_as_device_id.0.react_native"),
        simple("residencyServer", "residency_server", skip_zero_value),
    ]


def build_config_meta() -> ConfigMeta:
    """Build the config metadata of the Amplitude destination."""
    common_properties, common_schema = common_config_meta(SUPPORTED_SOURCE_TYPES)
    schema = _build_schema()
    schema.update(common_schema)
    return ConfigMeta(
        api_type=API_TYPE,
        properties=_build_properties() + common_properties,
        config_schema=schema,
    )


DESTINATIONS.register(TERRAFORM_TYPE, build_config_meta())