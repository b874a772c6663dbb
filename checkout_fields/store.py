"""Load and save the checkout field settings under a single option name."""

import logging

from django.conf import settings as django_settings

from .models import CheckoutOption
from .records import SettingsRecord, settings_from_storage

logger = logging.getLogger(__name__)

DEFAULT_OPTION_NAME = "checkout_fields_settings"


def get_option_name() -> str:
    return getattr(django_settings, "CHECKOUT_FIELDS_OPTION_NAME", DEFAULT_OPTION_NAME)


def load_settings(name: str | None = None) -> SettingsRecord:
    """Return the stored settings, or the defaults when nothing is stored."""
    name = name or get_option_name()
    option = CheckoutOption.objects.filter(name=name).first()
    if option is None:
        return SettingsRecord()
    return settings_from_storage(option.value)


def save_settings(record: SettingsRecord, name: str | None = None) -> None:
    """Overwrite the stored settings. Concurrent saves: last writer wins."""
    name = name or get_option_name()
    CheckoutOption.objects.update_or_create(
        name=name, defaults={"value": record.as_dict()}
    )
    logger.info("Saved checkout field settings %r", name)
