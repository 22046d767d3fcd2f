"""Config metadata for the Adobe Analytics destination."""

from __future__ import annotations

from rudderform.configs.meta import ConfigMeta
from rudderform.configs.property import (
    array_with_objects,
    array_with_strings,
    discriminator,
    simple,
    skip_zero_value,
)
from rudderform.configs.registry import DESTINATIONS
from rudderform.configs.schema import ConfigMode, Resource, Schema, ValueType
from rudderform.configs.validators import string_matches_regexp
from rudderform.destinations.common import common_config_meta

TERRAFORM_TYPE = "adobe_analytics"
API_TYPE = "ADOBE_ANALYTICS"

SUPPORTED_SOURCE_TYPES = (
    "web", "android", "ios", "unity", "reactnative", "flutter",
    "cordova", "amp", "cloud", "warehouse", "shopify",
)

_TEMPLATE_OR_ENV = r"(^\{\{.*\|\|(.*)\}\}$)|(^env[.].+)|"
_UP_TO_100 = _TEMPLATE_OR_ENV + r"^(.{0,100})$"
_ONE_TO_300 = _TEMPLATE_OR_ENV + r"^(.{1,300})$"
_VIDEO_EVENT_TYPES = _TEMPLATE_OR_ENV + (
    r"^(initHeartbeat|heartbeatPlaybackStarted|heartbeatPlaybackPaused|"
    r"heartbeatPlaybackResumed|heartbeatPlaybackCompleted|heartbeatPlaybackInterrupted|"
    r"heartbeatContentStarted|heartbeatContentComplete|heartbeatAdBreakStarted|"
    r"heartbeatAdBreakCompleted|heartbeatAdStarted|heartbeatAdCompleted|heartbeatAdSkipped|"
    r"heartbeatSeekStarted|heartbeatSeekCompleted|heartbeatBufferStarted|"
    r"heartbeatBufferCompleted|heartbeatQualityUpdated|heartbeatUpdatePlayhead)$"
)
_TIMESTAMP_OPTIONS = _TEMPLATE_OR_ENV + r"^(disabled|hybrid|optional|enabled)$"
_PRODUCT_IDENTIFIERS = _TEMPLATE_OR_ENV + r"^(name|id|sku)$"
_DELIMITER = r"^$|(^env[.].+)|^(\||:|,|;|\/)$"

_FROM_TO = {"from": "from", "to": "to"}
_EVENT_FILTERING_KEYS = (
    "config.0.event_filtering.0.whitelist",
    "config.0.event_filtering.0.blacklist",
)


def _string(description: str, pattern: str = _UP_TO_100, required: bool = False) -> Schema:
    return Schema(
        type=ValueType.STRING,
        required=required,
        optional=not required,
        description=description,
        validator=string_matches_regexp(pattern),
    )


def _flag(description: str, default: bool | None = None) -> Schema:
    return Schema(type=ValueType.BOOL, optional=True, default=default, description=description)


def _mapping(description: str, from_description: str, to_description: str,
             to_pattern: str = _UP_TO_100) -> Schema:
    return Schema(
        type=ValueType.LIST,
        optional=True,
        description=description,
        config_mode=ConfigMode.ATTR,
        elem=Resource({
            "from": _string(from_description, required=True),
            "to": _string(to_description, to_pattern, required=True),
        }),
    )


def _string_list(description: str) -> Schema:
    return Schema(
        type=ValueType.LIST,
        optional=True,
        description=description,
        elem=Schema(type=ValueType.STRING),
    )


def _event_list(description: str) -> Schema:
    return Schema(
        type=ValueType.LIST,
        optional=True,
        description=description,
        exactly_one_of=_EVENT_FILTERING_KEYS,
        elem=Schema(type=ValueType.STRING),
    )


def _build_schema() -> dict[str, Schema]:
    return {
        "tracking_server_url": _string("Enter your Tracking Server URL"),
        "tracking_server_secure_url": _string("Enter your Tracking Server Secure URL"),
        "report_suite_ids": _string(
            "Enter your Report Suite ID(s). You can add multiple report suite ID's separated by commas.",
            _ONE_TO_300,
            required=True,
        ),
        "ssl_heartbeat": _flag("Check for Heartbeat calls to be made over https", True),
        "heartbeat_tracking_server_url": _string("Enter your Heartbeat Tracking Server URL"),
        "use_utf8_charset": _flag("Use UTF-8 charset", True),
        "use_secure_server_side": _flag("Use Secure URL for Server-side", True),
        "proxy_normal_url": _string("Enter your Adobe Analytics Javascript SDK URL"),
        "proxy_heartbeat_url": _string("Enter your Adobe Analytics Hearbeat SDK URL"),
        "events_to_types": _mapping(
            "You can map your Rudder video events with types of Video Events",
            "Provide the Video Event Name.",
            "Enter the Type of Video Event",
            _VIDEO_EVENT_TYPES,
        ),
        "marketing_cloud_org_id": _string("Enter your Marketing Cloud Organization Id."),
        "drop_visitor_id": _flag("Check to Drop Visitor Id.", True),
        "timestamp_option": _string("Enter your Timestamp Option.", _TIMESTAMP_OPTIONS),
        "timestamp_optional_reporting": _flag(
            "Check to send both Timestamp and VisitorID for Timestamp Optional Reporting Suites"
        ),
        "no_fallback_visitor_id": _flag("Check to enable no fallbacks for Visitor ID"),
        "prefer_visitor_id": _flag("Check to prefer Visitor Id"),
        "rudder_events_to_adobe_events": _mapping(
            "You can map Rudder Events to Adobe Custom Events.",
            "Enter the Event Name",
            "Enter the Adobe Custom Event",
        ),
        "track_page_name": _flag("Check to enable pageName for Track Events", True),
        "context_data_mapping": _mapping(
            "You can map Rudder Context data to Adobe Context Data",
            "Enter the Context Data path.",
            "Enter the Adobe Context Data property name",
        ),
        "context_data_prefix": _string("Enter your prefix to add before all contextData property."),
        "use_legacy_link_name": _flag("Check to use Legacy LinkName", True),
        "page_name_fallback_tostring": _flag("Check to allow Page Name Fallback to Screen", True),
        "mobile_event_mapping": _mapping(
            "You can map Rudder mobile events.",
            "Enter the Context Data path.",
            "Enter the Adobe Context Data property name",
        ),
        "send_false_values": _flag("Check to allow sending false value from properties", True),
        "e_var_mapping": _mapping(
            "You can map Rudder properties to Adobe eVars",
            "Enter the Rudder Property",
            "Enter the eVar Index",
        ),
        "hier_mapping": _mapping(
            "You can map Rudder properties to Adobe hierarchy properties",
            "Enter the Rudder Property",
            "Enter the eVar Index",
        ),
        "list_mapping": _mapping(
            "You can map Rudder properties to Adobe list properties",
            "Enter the Rudder Property as an array/string seperated by commas",
            "Enter the eVar Index",
        ),
        "list_delimiter": _mapping(
            "You can map your Rudder Property with delimiters for list properties",
            "Enter the Rudder Property.",
            "Enter the List Delimiter.",
            _DELIMITER,
        ),
        "custom_props_mapping": _mapping(
            "You can map Rudder properties to Adobe Custom properties",
            "Enter the Rudder Property.",
            "Enter the prop Index.",
        ),
        "props_delimiter": _mapping(
            "You can map your Rudder property with delimiters for Adobe custom properties",
            "Enter the Rudder Property.",
            "Enter the List Delimiter.",
            _DELIMITER,
        ),
        "event_merch_event_to_adobe_event": _mapping(
            "You can map Rudder events to Adobe merchandise events.",
            "Enter the Rudder Event.",
            "Enter the Adobe Event.",
        ),
        "event_merch_properties": _string_list(
            "Currency/Incremental properties to add to merchandise events at event level"
        ),
        "product_merch_event_to_adobe_event": _mapping(
            "You can map Rudder events to Adobe merchandise events",
            "Enter the Rudder Event.",
            "Enter the Adobe Event.",
        ),
        "product_merch_properties": _string_list(
            "Currency/Incremental properties to add to merchandise events at product level"
        ),
        "product_merch_evars_map": _mapping(
            "You can map Rudder properties to eVars at product level",
            "Enter the Rudder Event.",
            "Enter the eVar Index.",
        ),
        "product_identifier": _string("Enter your Product Identifier", _PRODUCT_IDENTIFIERS),
        "use_native_sdk": Schema(
            type=ValueType.LIST,
            max_items=1,
            optional=True,
            description="Enable this setting to send events to Adobe Analytics via the device mode.",
            elem=Resource({
                platform: Schema(type=ValueType.BOOL, optional=True)
                for platform in ("web", "ios", "android", "react_native")
            }),
        ),
        "event_filtering": Schema(
            type=ValueType.LIST,
            max_items=1,
            optional=True,
            description="This option allows you to filter the events you want to send to Adobe Analytics.",
            elem=Resource({
                "whitelist": _event_list("Enter the event names to be whitelisted."),
                "blacklist": _event_list("Enter the event names to be blacklisted."),
            }),
        ),
    }


def _build_properties() -> list:
    return [
        simple("trackingServerUrl", "tracking_server_url", skip_zero_value),
        simple("trackingServerSecureUrl", "tracking_server_secure_url", skip_zero_value),
        simple("reportSuiteIds", "report_suite_ids"),
        simple("sslHeartbeat", "ssl_heartbeat"),
        simple("heartbeatTrackingServerUrl", "heartbeat_tracking_server_url", skip_zero_value),
        simple("useUtf8Charset", "use_utf8_charset"),
        simple("useSecureServerSide", "use_secure_server_side"),
        simple("proxyNormalUrl", "proxy_normal_url", skip_zero_value),
        simple("proxyHeartbeatUrl", "proxy_heartbeat_url", skip_zero_value),
        array_with_objects("eventsToTypes", "events_to_types", _FROM_TO),
        simple("marketingCloudOrgId", "marketing_cloud_org_id", skip_zero_value),
        simple("dropVisitorId", "drop_visitor_id"),
        simple("timestampOption", "timestamp_option", skip_zero_value),
        simple("timestampOptionalReporting", "timestamp_optional_reporting"),
        simple("noFallbackVisitorId", "no_fallback_visitor_id"),
        simple("preferVisitorId", "prefer_visitor_id"),
        array_with_objects("rudderEventsToAdobeEvents", "rudder_events_to_adobe_events", _FROM_TO),
        simple("trackPageName", "track_page_name"),
        array_with_objects("contextDataMapping", "context_data_mapping", _FROM_TO),
        simple("contextDataPrefix", "context_data_prefix", skip_zero_value),
        simple("useLegacyLinkName", "use_legacy_link_name"),
        simple("pageNameFallbackTostring", "page_name_fallback_tostring"),
        array_with_objects("mobileEventMapping", "mobile_event_mapping", _FROM_TO),
        simple("sendFalseValues", "send_false_values"),
        array_with_objects("eVarMapping", "e_var_mapping", _FROM_TO),
        array_with_objects("hierMapping", "hier_mapping", _FROM_TO),
        array_with_objects("listMapping", "list_mapping", _FROM_TO),
        array_with_objects("listDelimiter", "list_delimiter", _FROM_TO),
        array_with_objects("customPropsMapping", "custom_props_mapping", _FROM_TO),
        array_with_objects("propsDelimiter", "props_delimiter", _FROM_TO),
        array_with_objects("eventMerchEventToAdobeEvent", "event_merch_event_to_adobe_event", _FROM_TO),
        array_with_strings("eventMerchProperties", "eventMerchProperties", "event_merch_properties"),
        array_with_objects("productMerchEventToAdobeEvent", "product_merch_event_to_adobe_event", _FROM_TO),
        array_with_strings("productMerchProperties", "productMerchProperties", "product_merch_properties"),
        array_with_objects("productMerchEvarsMap", "product_merch_evars_map", _FROM_TO),
        simple("productIdentifier", "product_identifier", skip_zero_value),
        simple("useNativeSDK.web", "use_native_sdk.0.web"),
        simple("useNativeSDK.ios", "use_native_sdk.0.ios"),
        simple("useNativeSDK.android", "use_native_sdk.0.android"),
        simple("useNativeSDK.reactnative", "use_native_sdk.0.react_native"),
        array_with_strings("whitelistedEvents", "eventName", "event_filtering.0.whitelist"),
        array_with_strings("blacklistedEvents", "eventName", "event_filtering.0.blacklist"),
        discriminator("eventFilteringOption", {
            "event_filtering.0.whitelist": "whitelistedEvents",
            "event_filtering.0.blacklist": "blacklistedEvents",
        }),
    ]


def build_config_meta() -> ConfigMeta:
    """Build the config metadata of the Adobe Analytics destination."""
    common_properties, common_schema = common_config_meta(SUPPORTED_SOURCE_TYPES)
    schema = _build_schema()
    schema.update(common_schema)
    return ConfigMeta(
        api_type=API_TYPE,
        properties=_build_properties() + common_properties,
        config_schema=schema,
    )


DESTINATIONS.register(TERRAFORM_TYPE, build_config_meta())