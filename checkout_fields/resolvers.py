from .constants import LEGACY_REQUIRED, STATUS_DISABLED, STATUS_ENABLED
from .records import FieldConfig, LegacyFieldConfig, ResolvedField, SettingsRecord


def canonicalize(config: FieldConfig) -> ResolvedField:
    """Map either config shape onto a single ``ResolvedField``.

    A legacy string resolves exactly like its structured equivalent:
    ``"disabled"`` is disabled and optional, ``"required"`` is enabled and
    required, anything else is enabled and optional.
    """
    if isinstance(config, LegacyFieldConfig):
        if config.state == STATUS_DISABLED:
            return ResolvedField(status=STATUS_DISABLED, required=False)
        if config.state == LEGACY_REQUIRED:
            return ResolvedField(status=STATUS_ENABLED, required=True)
        return ResolvedField(status=STATUS_ENABLED, required=False)
    return ResolvedField(status=config.status, required=config.required)


def resolve(
    settings: SettingsRecord, field_key: str, default_required: bool | None = None
) -> ResolvedField:
    """Return the effective status and required flag of one checkout field.

    Keys without a configuration resolve to enabled with
    ``default_required``; the checkout passes ``None`` so the platform's own
    required flag is kept.
    """
    config = settings.fields.get(field_key)
    if config is None:
        return ResolvedField(status=STATUS_ENABLED, required=default_required)
    return canonicalize(config)
