"""Coerce submitted settings into a ``SettingsRecord``.

Nothing here raises: values that cannot be used are replaced by their
defaults so saving the settings page never fails.
"""

import logging
import re
from collections.abc import Mapping

import attrs
import nh3
from django.utils.html import strip_tags

from .constants import BILLING_FIRST, CHECKOUT_ORDERS, STATUS_ENABLED, VALID_STATUSES
from .records import SETTINGS_KEYS, SettingsRecord, StructuredFieldConfig
from .utils import to_bool

logger = logging.getLogger(__name__)

BOOLEAN_SETTINGS = ("force_ship_to_different", "vat_mode_enabled")

TEXT_SETTINGS = (
    "billing_title",
    "shipping_title",
    "vat_checkbox_label",
    "company_name_label",
    "company_code_label",
    "company_vat_label",
    "company_address_label",
)

RICH_TEXT_TAGS = {
    "a",
    "b",
    "br",
    "em",
    "i",
    "li",
    "ol",
    "p",
    "span",
    "strong",
    "u",
    "ul",
}
RICH_TEXT_ATTRIBUTES = {
    "a": {"href", "title", "target"},
    "span": {"class"},
}

_KEY_DISALLOWED = re.compile(r"[^a-z0-9_\-]")
_WHITESPACE = re.compile(r"\s+")


def sanitize_key(key) -> str:
    """Lower-case a key and drop everything but ``a-z``, digits, ``_`` and ``-``."""
    return _KEY_DISALLOWED.sub("", str(key).lower())


def _as_text(value) -> str | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (str, int, float)):
        return str(value)
    return None


def sanitize_text_field(value) -> str:
    """Strip markup, collapse whitespace and trim."""
    text = _as_text(value)
    if text is None:
        return ""
    return _WHITESPACE.sub(" ", strip_tags(text)).strip()


def sanitize_rich_text(value) -> str:
    """Keep a small set of formatting tags and drop everything else."""
    text = _as_text(value)
    if text is None:
        return ""
    return nh3.clean(
        text,
        tags=RICH_TEXT_TAGS,
        attributes=RICH_TEXT_ATTRIBUTES,
        link_rel="noopener noreferrer",
    ).strip()


def sanitize_field_configs(raw_fields) -> dict[str, StructuredFieldConfig]:
    if not isinstance(raw_fields, Mapping):
        return {}

    sanitized = {}
    for raw_key, field_settings in raw_fields.items():
        field_key = sanitize_key(raw_key)
        if not field_key or not isinstance(field_settings, Mapping):
            logger.debug("Dropping field config for %r", raw_key)
            continue

        status = field_settings.get("status", STATUS_ENABLED)
        if status not in VALID_STATUSES:
            status = STATUS_ENABLED

        sanitized[field_key] = StructuredFieldConfig(
            status=status,
            required=to_bool(field_settings.get("required", False)),
        )
    return sanitized


def sanitize(raw) -> SettingsRecord:
    """Turn an untyped mapping, usually a form submission, into settings."""
    if not isinstance(raw, Mapping):
        logger.warning("Ignoring non-mapping settings input of type %s", type(raw).__name__)
        return SettingsRecord()

    unknown = set(raw) - set(SETTINGS_KEYS)
    if unknown:
        logger.debug("Dropping unknown settings keys: %s", ", ".join(sorted(map(str, unknown))))

    defaults = SettingsRecord()
    values = {}

    for key in BOOLEAN_SETTINGS:
        values[key] = to_bool(raw.get(key, False))

    for key in TEXT_SETTINGS:
        if key in raw:
            values[key] = sanitize_text_field(raw[key])

    if "company_info_message" in raw:
        values["company_info_message"] = sanitize_rich_text(raw["company_info_message"])

    checkout_order = raw.get("checkout_order")
    values["checkout_order"] = (
        checkout_order if checkout_order in CHECKOUT_ORDERS else BILLING_FIRST
    )

    values["fields"] = sanitize_field_configs(raw.get("fields"))

    return attrs.evolve(defaults, **values)
