from django import forms
from django.utils.translation import gettext_lazy as _
from django_countries import countries
from django_countries.fields import LazyTypedChoiceField

from checkout_fields.assembler import (
    assemble,
    section_order,
    ship_to_different_address_checked,
)
from checkout_fields.constants import BILLING, COMPANY_FIELDS, IS_COMPANY_FIELD, SHIPPING
from checkout_fields.records import SettingsRecord
from checkout_fields.validators import is_blank, required_field_message, validate_checkout

from .fields import get_checkout_fields

COMPANY_BLOCK_FIELDS = {IS_COMPANY_FIELD} | {field_key for field_key, _attr in COMPANY_FIELDS}


def build_form_field(definition, required):
    field_type = definition["type"]
    label = definition["label"]

    if field_type == "checkbox":
        return forms.BooleanField(label=label, required=False)
    if field_type == "country":
        return LazyTypedChoiceField(
            label=label,
            required=required,
            choices=[("", _("Select a country / region"))] + list(countries),
        )
    if field_type == "email":
        return forms.EmailField(label=label, required=required, max_length=254)
    if field_type == "tel":
        return forms.CharField(
            label=label,
            required=required,
            max_length=30,
            widget=forms.TextInput(attrs={"type": "tel"}),
        )
    return forms.CharField(label=label, required=required, max_length=255)


class CheckoutForm(forms.Form):
    ship_to_different_address = forms.BooleanField(
        required=False,
        label=_("Ship to a different address?"),
    )

    def __init__(self, *args, checkout_settings=None, **kwargs):
        """
        Build the checkout fields from the assembled field definitions:
        - Sections in the configured order, fields by priority
        - Shipping fields only enforced when shipping to a different address
        - Placeholders with " *" on required fields, classes from the definition
        """
        super().__init__(*args, **kwargs)
        self.checkout_settings = checkout_settings or SettingsRecord()
        self.field_definitions = assemble(get_checkout_fields(), self.checkout_settings)
        self.sections = section_order(self.checkout_settings)

        self.fields["ship_to_different_address"].initial = ship_to_different_address_checked(
            self.checkout_settings, False
        )

        self.section_keys = {}
        for section in self.sections:
            definitions = sorted(
                self.field_definitions.get(section, {}).items(),
                key=lambda item: item[1].get("priority", 0),
            )
            self.section_keys[section] = [field_key for field_key, _definition in definitions]
            for field_key, definition in definitions:
                required = definition["required"] and section == BILLING
                field = build_form_field(definition, required)

                if definition["type"] not in ("country", "checkbox"):
                    placeholder = definition.get("placeholder", definition["label"])
                    if definition["required"] and placeholder:
                        placeholder = f"{placeholder} *"
                    field.widget.attrs["placeholder"] = placeholder

                field.widget.attrs["class"] = " ".join(definition.get("class", []))
                self.fields[field_key] = field

    def section_fields(self, section):
        return [self[field_key] for field_key in self.section_keys.get(section, [])]

    def ships_to_different_address(self):
        checked = self.fields["ship_to_different_address"].to_python(
            self.data.get("ship_to_different_address")
        )
        return ship_to_different_address_checked(self.checkout_settings, checked)

    def clean(self):
        cleaned_data = super().clean()

        if self.ships_to_different_address():
            for field_key, definition in self.field_definitions.get(SHIPPING, {}).items():
                if (
                    definition["required"]
                    and not self.has_error(field_key)
                    and is_blank(cleaned_data.get(field_key))
                ):
                    self.add_error(field_key, required_field_message(definition["label"]))

        for error in validate_checkout(self.data, self.checkout_settings):
            if error.field not in self.fields:
                self.add_error(None, error.message)
            elif not self.has_error(error.field):
                self.add_error(error.field, error.message)

        return cleaned_data

    def section_data(self, section):
        """Cleaned values of one section, without the company block."""
        return {
            field_key: self.cleaned_data.get(field_key)
            for field_key in self.section_keys.get(section, [])
            if field_key not in COMPANY_BLOCK_FIELDS
        }
