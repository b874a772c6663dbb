"""Apply the checkout field settings to the platform's field definitions.

Field definitions are plain dicts keyed by field name and grouped by
section, e.g. ``{"billing": {"billing_phone": {"type": "tel", ...}}}``.
"""

import copy
import logging

from .constants import (
    BILLING,
    COMPANY_CHECKBOX_CLASS,
    COMPANY_CHECKBOX_PRIORITY,
    COMPANY_FIELD_CLASS,
    COMPANY_FIELDS,
    DEFAULT_BILLING_TITLE,
    DEFAULT_SHIPPING_TITLE,
    IS_COMPANY_FIELD,
    SECTIONS,
    SHIPPING,
    SHIPPING_FIRST,
)
from .records import SettingsRecord
from .resolvers import resolve

logger = logging.getLogger(__name__)

DEFAULT_SECTION_TITLES = {
    BILLING: DEFAULT_BILLING_TITLE,
    SHIPPING: DEFAULT_SHIPPING_TITLE,
}


def section_for_key(field_key: str) -> str | None:
    for section in SECTIONS:
        if field_key.startswith(f"{section}_"):
            return section
    return None


def company_field_definitions(settings: SettingsRecord) -> dict[str, dict]:
    """Return the checkbox and the four company fields, in priority order.

    None of them is required here; they only become mandatory through
    ``validators.validate_checkout`` once the checkbox is ticked.
    """
    definitions = {
        IS_COMPANY_FIELD: {
            "type": "checkbox",
            "label": settings.label("vat_checkbox_label"),
            "required": False,
            "class": ["form-row-wide", COMPANY_CHECKBOX_CLASS],
            "priority": COMPANY_CHECKBOX_PRIORITY,
        }
    }
    for offset, (field_key, label_attribute) in enumerate(COMPANY_FIELDS, start=1):
        definitions[field_key] = {
            "type": "text",
            "label": settings.label(label_attribute),
            "required": False,
            "class": ["form-row-wide", COMPANY_FIELD_CLASS],
            "priority": COMPANY_CHECKBOX_PRIORITY + offset,
            "placeholder": "",
        }
    return definitions


def assemble(platform_fields: dict, settings: SettingsRecord) -> dict:
    """Return a copy of ``platform_fields`` with the settings applied.

    Disabled fields are removed from their section. Enabled fields get their
    ``required`` flag overwritten only when the settings carry one. With VAT
    mode on, the company block is written into the billing section by key,
    so assembling an already assembled map changes nothing.
    """
    fields = copy.deepcopy(platform_fields)

    for field_key in settings.fields:
        section = section_for_key(field_key)
        if section is None or field_key not in fields.get(section, {}):
            continue

        resolved = resolve(settings, field_key)
        if resolved.is_disabled:
            del fields[section][field_key]
        elif resolved.required is not None:
            fields[section][field_key]["required"] = resolved.required

    if settings.vat_mode_enabled:
        fields.setdefault(BILLING, {}).update(company_field_definitions(settings))

    return fields


def section_titles(settings: SettingsRecord) -> dict[str, str]:
    """Return title overrides for sections whose title was changed.

    A title equal to the platform default is not an override, so the
    platform keeps translating and updating its own heading.
    """
    configured = {BILLING: settings.billing_title, SHIPPING: settings.shipping_title}
    return {
        section: title
        for section, title in configured.items()
        if title != DEFAULT_SECTION_TITLES[section]
    }


def section_order(settings: SettingsRecord) -> tuple[str, str]:
    if settings.checkout_order == SHIPPING_FIRST:
        return (SHIPPING, BILLING)
    return (BILLING, SHIPPING)


def ship_to_different_address_checked(settings: SettingsRecord, checked: bool) -> bool:
    if settings.force_ship_to_different:
        return True
    return checked
