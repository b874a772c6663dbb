import logging
from collections.abc import Mapping

import attrs

from .constants import FORCED_SHIPPING_FIELDS, IS_COMPANY_FIELD, REQUIRED_FIELD_MESSAGE
from .records import SettingsRecord
from .resolvers import resolve
from .utils import to_bool

logger = logging.getLogger(__name__)


@attrs.frozen
class CheckoutError:
    field: str
    message: str


def is_blank(value) -> bool:
    if value is None:
        return True
    return not str(value).strip()


def humanize_shipping_field(field_key: str) -> str:
    """``shipping_address_1`` -> ``Address 1``."""
    return field_key.removeprefix("shipping_").replace("_", " ").title()


def required_field_message(label: str) -> str:
    return REQUIRED_FIELD_MESSAGE % {"label": label}


def validate_forced_shipping(
    submitted: Mapping, settings: SettingsRecord
) -> list[CheckoutError]:
    if not settings.force_ship_to_different:
        return []

    errors = []
    for field_key in FORCED_SHIPPING_FIELDS:
        if resolve(settings, field_key).is_disabled:
            continue
        if is_blank(submitted.get(field_key)):
            label = humanize_shipping_field(field_key)
            errors.append(CheckoutError(field_key, required_field_message(label)))
    return errors


def validate_company_fields(
    submitted: Mapping, settings: SettingsRecord
) -> list[CheckoutError]:
    if not settings.vat_mode_enabled:
        return []
    if not to_bool(submitted.get(IS_COMPANY_FIELD, False)):
        return []

    return [
        CheckoutError(field_key, required_field_message(label))
        for field_key, label in settings.company_field_labels().items()
        if is_blank(submitted.get(field_key))
    ]


def validate_checkout(submitted: Mapping, settings: SettingsRecord) -> list[CheckoutError]:
    """Return the conditional checkout errors for submitted checkout data.

    Shipping fields are mandatory when a separate shipping address is
    forced, unless disabled. Company fields are mandatory only when VAT
    mode is on and the buyer ticked the company checkbox.
    """
    errors = validate_forced_shipping(submitted, settings)
    errors += validate_company_fields(submitted, settings)
    if errors:
        logger.info(
            "Checkout validation failed for fields: %s",
            ", ".join(error.field for error in errors),
        )
    return errors
