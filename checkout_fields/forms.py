from django import forms
from django.utils.translation import gettext_lazy as _

from checkout.fields import DEFAULT_CHECKOUT_FIELDS

from .constants import BILLING_FIRST, SHIPPING_FIRST, STATUS_DISABLED, STATUS_ENABLED
from .records import SettingsRecord
from .resolvers import resolve

STATUS_CHOICES = [
    (STATUS_ENABLED, _("Enabled")),
    (STATUS_DISABLED, _("Disabled")),
]

REQUIRED_CHOICES = [
    ("0", _("Optional")),
    ("1", _("Required")),
]

ORDER_CHOICES = [
    (BILLING_FIRST, _("Billing first, then Shipping")),
    (SHIPPING_FIRST, _("Shipping first, then Billing")),
]

LAYOUT_FIELDS = ("force_ship_to_different", "billing_title", "shipping_title", "checkout_order")

VAT_FIELDS = (
    "vat_mode_enabled",
    "vat_checkbox_label",
    "company_name_label",
    "company_code_label",
    "company_vat_label",
    "company_address_label",
    "company_info_message",
)


def status_field_name(field_key):
    return f"{field_key}__status"


def required_field_name(field_key):
    return f"{field_key}__required"


class CheckoutFieldsSettingsForm(forms.Form):
    """
    Settings page form.

    The form only renders the settings. Submitted data is read back with
    raw_input() and goes through sanitizers.sanitize, so an odd value is
    corrected instead of rejecting the whole save.
    """

    force_ship_to_different = forms.BooleanField(
        required=False,
        label=_("Force separate shipping address"),
        help_text=_(
            "Always show the shipping address fields and require separate "
            "shipping information (hides the toggle checkbox)."
        ),
    )
    billing_title = forms.CharField(
        required=False,
        label=_("Billing section title"),
        help_text=_("The title displayed above the billing fields section."),
    )
    shipping_title = forms.CharField(
        required=False,
        label=_("Shipping section title"),
        help_text=_("The title of the shipping address section."),
    )
    checkout_order = forms.ChoiceField(
        choices=ORDER_CHOICES,
        label=_("Checkout section order"),
        help_text=_("Choose which address section appears first on the checkout page."),
    )

    vat_mode_enabled = forms.BooleanField(
        required=False,
        label=_("Enable VAT compliance mode"),
        help_text=_(
            "Adds a company checkbox and company fields to the billing section. "
            "The company fields become required once the checkbox is ticked."
        ),
    )
    vat_checkbox_label = forms.CharField(required=False, label=_("Company checkbox label"))
    company_name_label = forms.CharField(required=False, label=_("Company name label"))
    company_code_label = forms.CharField(required=False, label=_("Company code label"))
    company_vat_label = forms.CharField(required=False, label=_("Company VAT code label"))
    company_address_label = forms.CharField(required=False, label=_("Company address label"))
    company_info_message = forms.CharField(
        required=False,
        label=_("Company info message"),
        widget=forms.Textarea(attrs={"rows": 3}),
        help_text=_("Shown below the billing form. Basic HTML is allowed."),
    )

    def __init__(self, *args, checkout_settings=None, **kwargs):
        checkout_settings = checkout_settings or SettingsRecord()
        kwargs.setdefault("initial", self.initial_from_settings(checkout_settings))
        super().__init__(*args, **kwargs)

        for section, section_fields in DEFAULT_CHECKOUT_FIELDS.items():
            for field_key, definition in section_fields.items():
                self.fields[status_field_name(field_key)] = forms.ChoiceField(
                    choices=STATUS_CHOICES,
                    label=definition["label"],
                    help_text=field_key,
                )
                self.fields[required_field_name(field_key)] = forms.ChoiceField(
                    choices=REQUIRED_CHOICES,
                    label=_("Requirement"),
                )

        for field in self.fields.values():
            if isinstance(field.widget, (forms.TextInput, forms.Textarea, forms.Select)):
                field.widget.attrs["class"] = "border-black rounded-0"

    @staticmethod
    def initial_from_settings(checkout_settings):
        initial = {
            name: getattr(checkout_settings, name) for name in LAYOUT_FIELDS + VAT_FIELDS
        }
        for section_fields in DEFAULT_CHECKOUT_FIELDS.values():
            for field_key, definition in section_fields.items():
                resolved = resolve(
                    checkout_settings, field_key, default_required=definition["required"]
                )
                initial[status_field_name(field_key)] = resolved.status
                initial[required_field_name(field_key)] = "1" if resolved.required else "0"
        return initial

    def section_rows(self, section):
        """Yield (status, required) bound field pairs for one section."""
        for field_key in DEFAULT_CHECKOUT_FIELDS[section]:
            yield self[status_field_name(field_key)], self[required_field_name(field_key)]

    def raw_input(self):
        """Rebuild the nested settings mapping from the submitted data."""
        raw = {name: self.data.get(name) for name in LAYOUT_FIELDS + VAT_FIELDS if name in self.data}
        raw["fields"] = {}
        for section_fields in DEFAULT_CHECKOUT_FIELDS.values():
            for field_key in section_fields:
                raw["fields"][field_key] = {
                    "status": self.data.get(status_field_name(field_key)),
                    "required": self.data.get(required_field_name(field_key), "0"),
                }
        return raw
