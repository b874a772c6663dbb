from checkout.fields import get_checkout_fields

from ..assembler import (
    assemble,
    company_field_definitions,
    section_for_key,
    section_order,
    section_titles,
    ship_to_different_address_checked,
)
from ..constants import (
    BILLING,
    COMPANY_CHECKBOX_CLASS,
    COMPANY_FIELD_CLASS,
    DEFAULT_BILLING_TITLE,
    DEFAULT_SHIPPING_TITLE,
    SHIPPING,
    SHIPPING_FIRST,
)
from ..records import LegacyFieldConfig, SettingsRecord, StructuredFieldConfig
from ..sanitizers import sanitize

COMPANY_KEYS = [
    "billing_is_company",
    "billing_company_name",
    "billing_company_code",
    "billing_company_vat",
    "billing_company_address",
]


def test_section_for_key():
    assert section_for_key("billing_phone") == BILLING
    assert section_for_key("shipping_city") == SHIPPING
    assert section_for_key("order_comments") is None


def test_assemble_removes_disabled_field_from_sanitized_settings():
    settings = sanitize({"fields": {"billing_phone": {"status": "disabled"}}})

    fields = assemble(get_checkout_fields(), settings)

    assert "billing_phone" not in fields[BILLING]
    assert "shipping_phone" in fields[SHIPPING]


def test_assemble_sets_required_flag():
    settings = SettingsRecord(
        fields={
            "billing_company": StructuredFieldConfig(required=True),
            "billing_city": StructuredFieldConfig(required=False),
        }
    )

    fields = assemble(get_checkout_fields(), settings)

    assert fields[BILLING]["billing_company"]["required"] is True
    assert fields[BILLING]["billing_city"]["required"] is False


def test_assemble_applies_legacy_settings():
    settings = SettingsRecord(
        fields={
            "shipping_company": LegacyFieldConfig("required"),
            "shipping_state": LegacyFieldConfig("disabled"),
        }
    )

    fields = assemble(get_checkout_fields(), settings)

    assert fields[SHIPPING]["shipping_company"]["required"] is True
    assert "shipping_state" not in fields[SHIPPING]


def test_assemble_keeps_platform_required_flag_for_unconfigured_fields():
    platform_fields = get_checkout_fields()

    fields = assemble(platform_fields, SettingsRecord())

    assert fields == platform_fields


def test_assemble_ignores_unknown_and_unsectioned_keys():
    settings = SettingsRecord(
        fields={
            "order_comments": StructuredFieldConfig(status="disabled"),
            "billing_fax": StructuredFieldConfig(status="disabled"),
        }
    )
    platform_fields = get_checkout_fields()

    assert assemble(platform_fields, settings) == platform_fields


def test_assemble_does_not_modify_input():
    platform_fields = get_checkout_fields()
    settings = SettingsRecord(fields={"billing_phone": StructuredFieldConfig(status="disabled")})

    assemble(platform_fields, settings)

    assert "billing_phone" in platform_fields[BILLING]


def test_assemble_adds_company_block_in_priority_order():
    settings = SettingsRecord(vat_mode_enabled=True, company_vat_label="VAT ID")

    fields = assemble(get_checkout_fields(), settings)

    company = {key: fields[BILLING][key] for key in COMPANY_KEYS}
    assert [definition["priority"] for definition in company.values()] == [
        120,
        121,
        122,
        123,
        124,
    ]
    assert all(definition["required"] is False for definition in company.values())
    assert COMPANY_CHECKBOX_CLASS in company["billing_is_company"]["class"]
    for key in COMPANY_KEYS[1:]:
        assert COMPANY_FIELD_CLASS in company[key]["class"]
    assert company["billing_company_vat"]["label"] == "VAT ID"


def test_assemble_without_vat_mode_has_no_company_block():
    fields = assemble(get_checkout_fields(), SettingsRecord())

    assert not set(COMPANY_KEYS) & set(fields[BILLING])


def test_assemble_is_idempotent():
    settings = SettingsRecord(
        vat_mode_enabled=True,
        fields={
            "billing_phone": StructuredFieldConfig(status="disabled"),
            "shipping_company": LegacyFieldConfig("required"),
        },
    )

    once = assemble(get_checkout_fields(), settings)
    twice = assemble(once, settings)

    assert twice == once
    assert len(twice[BILLING]) == len(once[BILLING])


def test_company_field_definitions_fall_back_to_default_labels():
    definitions = company_field_definitions(SettingsRecord(company_name_label="  "))

    assert definitions["billing_company_name"]["label"] == "Company Name"


def test_section_titles_only_include_changed_titles():
    assert section_titles(SettingsRecord()) == {}

    settings = SettingsRecord(
        billing_title="Invoice details", shipping_title=DEFAULT_SHIPPING_TITLE
    )
    assert section_titles(settings) == {BILLING: "Invoice details"}


def test_section_titles_equal_to_default_are_not_overrides():
    settings = SettingsRecord(billing_title=DEFAULT_BILLING_TITLE)
    assert BILLING not in section_titles(settings)


def test_section_order():
    assert section_order(SettingsRecord()) == (BILLING, SHIPPING)
    assert section_order(SettingsRecord(checkout_order=SHIPPING_FIRST)) == (SHIPPING, BILLING)


def test_ship_to_different_address_checked():
    assert ship_to_different_address_checked(SettingsRecord(), False) is False
    assert ship_to_different_address_checked(SettingsRecord(), True) is True
    forced = SettingsRecord(force_ship_to_different=True)
    assert ship_to_different_address_checked(forced, False) is True
