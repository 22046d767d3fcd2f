"""Config metadata for the ActiveCampaign destination."""

from __future__ import annotations

from rudderform.configs.meta import ConfigMeta
from rudderform.configs.property import simple, skip_zero_value
from rudderform.configs.registry import DESTINATIONS
from rudderform.configs.schema import Schema, ValueType
from rudderform.destinations.common import common_config_meta

TERRAFORM_TYPE = "active_campaign"
API_TYPE = "ACTIVE_CAMPAIGN"

SUPPORTED_SOURCE_TYPES = (
    "web", "android", "ios", "unity", "reactnative", "flutter",
    "cordova", "amp", "cloud", "warehouse", "shopify",
)

_ACCOUNT_HELP = "Enter your ActiveCampaign API key."


def _build_schema() -> dict[str, Schema]:
    account_schema = Schema(
        type=ValueType.STRING,
        required=True,
        sensitive=True,
        description=_ACCOUNT_HELP,
    )
    return {
        "api_url": Schema(
            type=ValueType.STRING,
            required=True,
            description="Enter your ActiveCampaign API URL. You can find it in your account in "
                        "the Settings page under the Developer tab.",
        ),
        "api_key": account_schema,
        "actid": Schema(
            type=ValueType.STRING,
            optional=True,
            description="Enter your ActID here. To obtain the ActID unique to your ActiveCampaign "
                        "account, go to Settings > Tracking > Event Tracking API.",
        ),
        "event_key": Schema(
            type=ValueType.STRING,
            optional=True,
            description="Enter the event key unique to your ActiveCampaign account. To obtain the "
                        "event key, go to your ActiveCampaign account > Settings > Tracking > "
                        "Event Tracking.",
        ),
    }


def build_config_meta() -> ConfigMeta:
    """Build the config metadata of the ActiveCampaign destination."""
    common_properties, common_schema = common_config_meta(SUPPORTED_SOURCE_TYPES)
    properties = [
        simple("apiUrl", "api_url"),
        simple("apiKey", "api_key", skip_zero_value),
        simple("actid", "actid", skip_zero_value),
        simple("eventKey", "event_key", skip_zero_value),
    ]
    schema = _build_schema()
    schema.update(common_schema)
    return ConfigMeta(
        api_type=API_TYPE,
        properties=properties + common_properties,
        config_schema=schema,
    )


DESTINATIONS.register(TERRAFORM_TYPE, build_config_meta())