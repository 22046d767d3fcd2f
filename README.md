# rudderform

`rudderform` describes how the configuration of a RudderStack source or
destination, as the RudderStack API stores it, corresponds to the
configuration block of a Terraform resource. It converts in both
directions, and it can turn a set of API objects into Terraform HCL and
`terraform import` commands.

It has no runtime dependencies. Tests need `pytest` (the `test` extra).

## Concepts

- **`ConfigProperty`** (`rudderform.configs.property`): one mapping
  between an API config key and a Terraform state key, held as two
  functions, `from_state(config, state)` and `to_state(state, config)`,
  each returning a new document. Build one with:
  - `simple(api_key, terraform_key, *filters)`: copies a value both
    ways. A state value for which any filter returns true, for example
    `skip_zero_value` (empty string, zero, false, null, empty list), is
    kept out of the API config.
  - `conditional(api_key, terraform_key, condition)`: copies to the API
    config always, to state only when `condition(config)` holds, for
    example `equals("discriminator", "FOO")`.
  - `discriminator(api_key, values)`: sets `api_key` in the API config
    from the first Terraform key in `values` that is present (and not an
    empty list) in state. It writes nothing to state.
  - `array_with_strings(root_api_key, nested_api_field, terraform_key)`:
    a Terraform list of strings against an API list of one-field objects.
  - `array_with_objects(root_api_key, terraform_key, fields)`: a
    Terraform list of objects against an API list of objects, with
    fields renamed through `fields`; an `APINestedObject` value in
    `fields` maps a list of plain values to a list of single-key objects.
    `get_inverse_fields`, `get_terraform_value` and `get_config_value`
    do the renaming and are usable on their own.

  A state value that should be a list but is not raises `TypeError`.
- **Paths** (`rudderform.configs.jsonpath`): keys are dotted paths such
  as `use_native_sdk.0.web`. A digit segment indexes an array; `\.`
  escapes a dot. `lookup` raises `KeyError` for a missing path,
  `contains` tests for one, and `assign` returns a copy with a value
  set, creating objects and arrays on the way.
- **`Schema` and `Resource`** (`rudderform.configs.schema`): the
  Terraform schema of a config block, with `ValueType` and `ConfigMode`.
  `Schema.validate(value, path)` runs the attribute's validator, checks
  `max_items` and required fields of nested objects, and returns
  diagnostics. `Schema.is_nested_block()` tells whether the value is
  written as a nested block rather than an attribute.
- **`ConfigMeta`** (`rudderform.configs.meta`): the API type, the
  properties and the schema of one integration. `state_to_api` and
  `api_to_state` take a mapping or JSON text and apply every property in
  order, starting from an empty object.
- **`Registry`** (`rudderform.configs.registry`): a named collection of
  `ConfigMeta` entries. Registering a name twice raises `ValueError`;
  `entries()` is a read-only view; `find_api_type(api_type)` returns
  `(name, meta)` or `None`. Two shared registries exist, `SOURCES` and
  `DESTINATIONS`.

## Converting a config

```python
from rudderform.configs.meta import ConfigMeta
from rudderform.configs.property import simple, skip_zero_value

meta = ConfigMeta(
    api_type="EXAMPLE",
    properties=[
        simple("apiUrl", "api_url"),
        simple("eventKey", "event_key", skip_zero_value),
    ],
)

meta.state_to_api('{"api_url": "https://api.example.com", "event_key": ""}')
# {'apiUrl': 'https://api.example.com'}

meta.api_to_state({"apiUrl": "https://api.example.com"})
# {'api_url': 'https://api.example.com'}
```

## Ready-made destinations

Each of these modules has `build_config_meta()`, returning the
`ConfigMeta` of its destination with consent management included, and
registers that meta in `DESTINATIONS` when it is imported:

| Module                                      | Terraform type    | API type          |
|---------------------------------------------|-------------------|-------------------|
| `rudderform.destinations.active_campaign`   | `active_campaign` | `ACTIVE_CAMPAIGN` |
| `rudderform.destinations.adobe_analytics`   | `adobe_analytics` | `ADOBE_ANALYTICS` |
| `rudderform.destinations.amplitude`         | `amplitude`       | `AM`              |

The shared consent-management part is built by
`rudderform.destinations.common.common_config_meta(source_types)` (or
`config_meta_for_generic_consent_management`): one `consent_management`
block with a list per source type, the type name turned to snake case by
`camel_to_snake`.

## Validation

`rudderform.configs.validators` has `string_matches_regexp`,
`string_not_matches_regexp`, `string_in_slice`, `string_len_between`,
`string_does_not_contain_any` and `validate_all`, which runs several and
collects everything they report. A validator is called as
`validator(value, path)` and returns a list of `Diagnostic` objects;
`has_error(diagnostics)` tells whether any of them is an error.

## Generating Terraform

`rudderform.generator` works on `Source`, `Destination` and `Connection`
objects. By default it looks types up in the shared `SOURCES` and
`DESTINATIONS` registries; pass `source_registry=` and
`destination_registry=` to use others.

```python
import rudderform.destinations.amplitude  # registers "amplitude"
from rudderform.generator import Destination, generate_import_script, generate_terraform

destination = Destination(id="dst1", name="Analytics", type="AM",
                          config={"apiKey": "placeholder"})

print(generate_terraform([], [destination], []))
# resource "rudderstack_destination_amplitude" "dst_dst1" {
#   name = "Analytics"
#   config {
#     api_key = "placeholder"
#   }
# }

print(generate_import_script([], [destination], []))
# terraform import "rudderstack_destination_amplitude.dst_dst1" "dst1"
```

Config keys are written in sorted order. Objects whose type is not in a
registry are left out and reported as warnings through the
`rudderform.generator` logger. A connection is written only when both of
its ends were, with `source_id` and `destination_id` referring to their
resources.

## Comparing JSON

`rudderform.jsonutil.json_eq(a, b)` is true when two JSON texts hold
equal values, and false when either is not valid JSON.

## What it does not do

- It does not talk to the RudderStack API: there is no client, so the
  `Source`, `Destination` and `Connection` lists must be built by the
  caller.
- It has no command line; generation is done by calling the functions
  above.
- It is not a Terraform provider and cannot be run by Terraform.
- No source types ship with it: `SOURCES` is empty until entries are
  registered, and only the three destinations above are included.