import copy

from django.utils.translation import gettext_lazy as _


def _field(label, field_type="text", required=True, priority=10, css_class="form-row-wide"):
    return {
        "type": field_type,
        "label": label,
        "required": required,
        "class": [css_class],
        "priority": priority,
    }


def _address_fields(prefix):
    return {
        f"{prefix}_first_name": _field(_("First name"), priority=10, css_class="form-row-first"),
        f"{prefix}_last_name": _field(_("Last name"), priority=20, css_class="form-row-last"),
        f"{prefix}_company": _field(_("Company name"), required=False, priority=30),
        f"{prefix}_country": _field(_("Country / Region"), field_type="country", priority=40),
        f"{prefix}_address_1": _field(_("Street address"), priority=50),
        f"{prefix}_address_2": _field(
            _("Apartment, suite, unit, etc."), required=False, priority=60
        ),
        f"{prefix}_city": _field(_("Town / City"), priority=70),
        f"{prefix}_state": _field(_("State / County"), required=False, priority=80),
        f"{prefix}_postcode": _field(_("Postcode / ZIP"), priority=90),
    }


DEFAULT_CHECKOUT_FIELDS = {
    "billing": {
        **_address_fields("billing"),
        "billing_phone": _field(_("Phone"), field_type="tel", priority=100),
        "billing_email": _field(_("Email address"), field_type="email", priority=110),
    },
    "shipping": {
        **_address_fields("shipping"),
        "shipping_phone": _field(_("Phone"), field_type="tel", required=False, priority=100),
    },
}


def get_checkout_fields():
    """Return a fresh copy of the default checkout fields, per section."""
    return copy.deepcopy(DEFAULT_CHECKOUT_FIELDS)
