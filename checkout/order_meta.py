"""Company details stored on orders as metadata.

Keys follow the "_<checkout field>" convention, e.g. ``_billing_company_vat``.
The company flag is stored as "yes" or "no".
"""

from checkout_fields.constants import COMPANY_FIELDS, IS_COMPANY_FIELD
from checkout_fields.sanitizers import sanitize_text_field
from checkout_fields.utils import to_bool

IS_COMPANY_META_KEY = f"_{IS_COMPANY_FIELD}"


def meta_key(field_key):
    return f"_{field_key}"


def save_order_meta(order, data, checkout_settings):
    """Copy the submitted company block onto the order. Does not save the order."""
    if not checkout_settings.vat_mode_enabled:
        return

    is_company = to_bool(data.get(IS_COMPANY_FIELD, False))
    order.update_meta(IS_COMPANY_META_KEY, "yes" if is_company else "no")

    if not is_company:
        return

    for field_key, _label_attribute in COMPANY_FIELDS:
        if field_key in data:
            order.update_meta(meta_key(field_key), sanitize_text_field(data[field_key]))


def get_company_details(order, checkout_settings):
    """
    Return [(label, value), ...] for an order placed by a company.
    Empty values are skipped; non-company orders give an empty list.
    """
    if order.get_meta(IS_COMPANY_META_KEY) != "yes":
        return []

    details = []
    for field_key, label in checkout_settings.company_field_labels().items():
        value = order.get_meta(meta_key(field_key))
        if value:
            details.append((label, value))
    return details
