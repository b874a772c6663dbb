import pytest

from checkout_fields.records import SettingsRecord
from checkout_fields.store import save_settings


@pytest.fixture
def billing_data():
    return {
        "billing_first_name": "Jonas",
        "billing_last_name": "Jonaitis",
        "billing_country": "LT",
        "billing_address_1": "Gedimino pr. 1",
        "billing_city": "Vilnius",
        "billing_postcode": "01103",
        "billing_phone": "+37060000000",
        "billing_email": "jonas@example.com",
    }


@pytest.fixture
def shipping_data():
    return {
        "shipping_first_name": "Ona",
        "shipping_last_name": "Jonaitė",
        "shipping_country": "LT",
        "shipping_address_1": "Laisvės al. 10",
        "shipping_city": "Kaunas",
        "shipping_postcode": "44240",
    }


@pytest.fixture
def company_data():
    return {
        "billing_is_company": "on",
        "billing_company_name": "UAB Acme",
        "billing_company_code": "300123456",
        "billing_company_vat": "LT100001234567",
        "billing_company_address": "Konstitucijos pr. 7, Vilnius",
    }


@pytest.fixture
def vat_settings():
    return SettingsRecord(vat_mode_enabled=True, company_vat_label="PVM kodas")


@pytest.fixture
def stored_settings(db):
    """Store checkout field settings; returns a setter."""

    def store(**kwargs):
        record = SettingsRecord(**kwargs)
        save_settings(record)
        return record

    return store
