import pytest
from django.urls import reverse

from checkout.fields import get_checkout_fields

from ..assembler import assemble
from ..constants import SHIPPING_FIRST, STATUS_DISABLED
from ..records import SettingsRecord, StructuredFieldConfig
from ..store import load_settings, save_settings

SETTINGS_URL = reverse("checkout_fields_settings")


@pytest.mark.django_db
def test_settings_page_requires_staff(client):
    response = client.get(SETTINGS_URL)

    assert response.status_code == 302
    assert "/admin/login/" in response["Location"]


@pytest.mark.django_db
def test_settings_page_renders_stored_settings(admin_client):
    save_settings(
        SettingsRecord(
            billing_title="Invoice details",
            fields={"billing_phone": StructuredFieldConfig(status=STATUS_DISABLED)},
        )
    )

    response = admin_client.get(SETTINGS_URL)

    assert response.status_code == 200
    form = response.context["form"]
    assert form.initial["billing_title"] == "Invoice details"
    assert form.initial["billing_phone__status"] == STATUS_DISABLED
    assert form.initial["billing_city__required"] == "1"
    assert form.initial["billing_company__required"] == "0"
    assert len(response.context["billing_rows"]) == 11
    assert len(response.context["shipping_rows"]) == 10


@pytest.mark.django_db
def test_settings_page_saves_sanitized_settings(admin_client):
    data = {
        "force_ship_to_different": "on",
        "billing_title": "<b>Invoice</b> details",
        "shipping_title": "Delivery",
        "checkout_order": SHIPPING_FIRST,
        "billing_phone__status": STATUS_DISABLED,
        "billing_phone__required": "0",
        "billing_company__status": "enabled",
        "billing_company__required": "1",
        "vat_mode_enabled": "on",
        "company_vat_label": "VAT ID",
        "company_info_message": "<p>Invoice by email</p><script>x</script>",
    }

    response = admin_client.post(SETTINGS_URL, data)

    assert response.status_code == 302
    record = load_settings()
    assert record.force_ship_to_different is True
    assert record.billing_title == "Invoice details"
    assert record.checkout_order == SHIPPING_FIRST
    assert record.fields["billing_phone"].status == STATUS_DISABLED
    assert record.fields["billing_company"].required is True
    assert record.fields["shipping_city"].status == "enabled"
    assert record.vat_mode_enabled is True
    assert record.company_vat_label == "VAT ID"
    assert record.company_info_message == "<p>Invoice by email</p>"


@pytest.mark.django_db
def test_settings_page_never_rejects_a_save(admin_client):
    response = admin_client.post(
        SETTINGS_URL,
        {"checkout_order": "garbage", "billing_phone__status": "hidden"},
    )

    assert response.status_code == 302
    record = load_settings()
    assert record.checkout_order == "billing_first"
    assert record.fields["billing_phone"].status == "enabled"


def form_post_data(form):
    """Submit every field as initially rendered; unticked checkboxes are omitted."""
    data = {}
    for name, value in form.initial.items():
        if isinstance(value, bool):
            if value:
                data[name] = "on"
        else:
            data[name] = value
    return data


@pytest.mark.django_db
def test_untouched_save_keeps_platform_required_fields(admin_client):
    form = admin_client.get(SETTINGS_URL).context["form"]

    response = admin_client.post(SETTINGS_URL, form_post_data(form))

    assert response.status_code == 302
    fields = assemble(get_checkout_fields(), load_settings())
    assert fields["billing"]["billing_email"]["required"] is True
    assert fields["billing"]["billing_first_name"]["required"] is True
    assert fields["shipping"]["shipping_city"]["required"] is True
    assert fields["billing"]["billing_company"]["required"] is False
