"""Typed shape of the checkout field settings.

A field's configuration was historically stored as a bare string
("enabled", "disabled" or "required") and is now stored as a
``{"status": ..., "required": ...}`` mapping. Both shapes are kept as
separate variants so only ``resolvers.canonicalize`` needs to tell them
apart.
"""

from collections.abc import Mapping
from typing import Union

import attrs

from .constants import (
    BILLING_FIRST,
    COMPANY_FIELDS,
    DEFAULT_BILLING_TITLE,
    DEFAULT_COMPANY_ADDRESS_LABEL,
    DEFAULT_COMPANY_CODE_LABEL,
    DEFAULT_COMPANY_INFO_MESSAGE,
    DEFAULT_COMPANY_NAME_LABEL,
    DEFAULT_COMPANY_VAT_LABEL,
    DEFAULT_SHIPPING_TITLE,
    DEFAULT_VAT_CHECKBOX_LABEL,
    STATUS_DISABLED,
    STATUS_ENABLED,
)
from .utils import to_bool


@attrs.frozen
class StructuredFieldConfig:
    status: str = STATUS_ENABLED
    required: bool = False

    def as_dict(self) -> dict:
        return {"status": self.status, "required": self.required}


@attrs.frozen
class LegacyFieldConfig:
    state: str


FieldConfig = Union[StructuredFieldConfig, LegacyFieldConfig]


@attrs.frozen
class ResolvedField:
    status: str
    # None leaves the platform's own required flag untouched
    required: bool | None

    @property
    def is_disabled(self) -> bool:
        return self.status == STATUS_DISABLED


@attrs.frozen
class SettingsRecord:
    force_ship_to_different: bool = False
    billing_title: str = DEFAULT_BILLING_TITLE
    shipping_title: str = DEFAULT_SHIPPING_TITLE
    checkout_order: str = BILLING_FIRST
    fields: dict[str, FieldConfig] = attrs.field(factory=dict)
    vat_mode_enabled: bool = False
    vat_checkbox_label: str = DEFAULT_VAT_CHECKBOX_LABEL
    company_name_label: str = DEFAULT_COMPANY_NAME_LABEL
    company_code_label: str = DEFAULT_COMPANY_CODE_LABEL
    company_vat_label: str = DEFAULT_COMPANY_VAT_LABEL
    company_address_label: str = DEFAULT_COMPANY_ADDRESS_LABEL
    company_info_message: str = DEFAULT_COMPANY_INFO_MESSAGE

    def as_dict(self) -> dict:
        """Return the mapping persisted by the settings store."""
        data = attrs.asdict(self, recurse=False)
        data["fields"] = {
            key: config.state
            if isinstance(config, LegacyFieldConfig)
            else config.as_dict()
            for key, config in self.fields.items()
        }
        return data

    def label(self, attribute: str) -> str:
        """Return a configured label, or its default when left blank."""
        value = getattr(self, attribute)
        if value and value.strip():
            return value
        return attrs.fields_dict(SettingsRecord)[attribute].default

    def company_field_labels(self) -> dict[str, str]:
        return {key: self.label(attribute) for key, attribute in COMPANY_FIELDS}


SETTINGS_KEYS = tuple(field.name for field in attrs.fields(SettingsRecord))


def field_config_from_storage(value) -> FieldConfig | None:
    if isinstance(value, Mapping):
        return StructuredFieldConfig(
            status=value.get("status", STATUS_ENABLED),
            required=to_bool(value.get("required", False)),
        )
    if isinstance(value, str):
        return LegacyFieldConfig(state=value)
    return None


def settings_from_storage(raw) -> SettingsRecord:
    """Build a record from a stored mapping.

    Stored data was sanitized when it was saved, so values are trusted
    here. Missing keys fall back to defaults and field configs saved in the
    old bare-string format are kept as ``LegacyFieldConfig``.
    """
    if not isinstance(raw, Mapping):
        return SettingsRecord()

    values = {key: raw[key] for key in SETTINGS_KEYS if key in raw}

    stored_fields = values.pop("fields", None)
    if not isinstance(stored_fields, Mapping):
        stored_fields = {}

    fields = {}
    for field_key, value in stored_fields.items():
        config = field_config_from_storage(value)
        if config is not None:
            fields[field_key] = config

    return SettingsRecord(fields=fields, **values)
