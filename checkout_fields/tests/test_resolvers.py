import pytest

from ..constants import STATUS_DISABLED, STATUS_ENABLED
from ..records import LegacyFieldConfig, ResolvedField, SettingsRecord, StructuredFieldConfig
from ..resolvers import canonicalize, resolve


@pytest.mark.parametrize(
    ("legacy_state", "structured"),
    [
        ("enabled", StructuredFieldConfig(status=STATUS_ENABLED, required=False)),
        ("disabled", StructuredFieldConfig(status=STATUS_DISABLED, required=False)),
        ("required", StructuredFieldConfig(status=STATUS_ENABLED, required=True)),
    ],
)
def test_legacy_config_resolves_like_structured_equivalent(legacy_state, structured):
    legacy_settings = SettingsRecord(fields={"billing_phone": LegacyFieldConfig(legacy_state)})
    structured_settings = SettingsRecord(fields={"billing_phone": structured})

    assert resolve(legacy_settings, "billing_phone") == resolve(
        structured_settings, "billing_phone"
    )


def test_unrecognised_legacy_state_is_enabled_and_optional():
    assert canonicalize(LegacyFieldConfig("sometimes")) == ResolvedField(
        status=STATUS_ENABLED, required=False
    )


def test_structured_config_is_returned_as_is():
    settings = SettingsRecord(
        fields={"shipping_city": StructuredFieldConfig(status=STATUS_DISABLED, required=True)}
    )
    assert resolve(settings, "shipping_city") == ResolvedField(
        status=STATUS_DISABLED, required=True
    )


def test_unknown_field_keeps_platform_required_flag():
    resolved = resolve(SettingsRecord(), "billing_unknown")
    assert resolved == ResolvedField(status=STATUS_ENABLED, required=None)
    assert resolved.is_disabled is False


def test_unknown_field_with_explicit_default():
    resolved = resolve(SettingsRecord(), "billing_phone", default_required=False)
    assert resolved.required is False
