from django.utils.translation import gettext_lazy as _

BILLING = "billing"
SHIPPING = "shipping"
SECTIONS = (BILLING, SHIPPING)

STATUS_ENABLED = "enabled"
STATUS_DISABLED = "disabled"
VALID_STATUSES = (STATUS_ENABLED, STATUS_DISABLED)

# Bare-string value of the old per-field format, means enabled + required
LEGACY_REQUIRED = "required"

BILLING_FIRST = "billing_first"
SHIPPING_FIRST = "shipping_first"
CHECKOUT_ORDERS = (BILLING_FIRST, SHIPPING_FIRST)

DEFAULT_BILLING_TITLE = "Billing details"
DEFAULT_SHIPPING_TITLE = "Ship to a different address?"

DEFAULT_VAT_CHECKBOX_LABEL = "Buying as a company? (optional)"
DEFAULT_COMPANY_NAME_LABEL = "Company Name"
DEFAULT_COMPANY_CODE_LABEL = "Company Code"
DEFAULT_COMPANY_VAT_LABEL = "Company VAT Code"
DEFAULT_COMPANY_ADDRESS_LABEL = "Company Address"
DEFAULT_COMPANY_INFO_MESSAGE = (
    "A VAT invoice is generated automatically after the order and attached "
    "to the order email as a PDF."
)

IS_COMPANY_FIELD = "billing_is_company"
COMPANY_NAME_FIELD = "billing_company_name"
COMPANY_CODE_FIELD = "billing_company_code"
COMPANY_VAT_FIELD = "billing_company_vat"
COMPANY_ADDRESS_FIELD = "billing_company_address"

# Company fields in display order, with the settings attribute holding each label
COMPANY_FIELDS = (
    (COMPANY_NAME_FIELD, "company_name_label"),
    (COMPANY_CODE_FIELD, "company_code_label"),
    (COMPANY_VAT_FIELD, "company_vat_label"),
    (COMPANY_ADDRESS_FIELD, "company_address_label"),
)

COMPANY_CHECKBOX_PRIORITY = 120

# Marker classes the presentation layer uses to show/hide the company block
COMPANY_CHECKBOX_CLASS = "company-checkbox"
COMPANY_FIELD_CLASS = "company-field"
COMPANY_INFO_MESSAGE_CLASS = "company-info-message"

# Shipping fields that must be filled in when a separate address is forced
FORCED_SHIPPING_FIELDS = (
    "shipping_first_name",
    "shipping_last_name",
    "shipping_address_1",
    "shipping_city",
    "shipping_postcode",
    "shipping_country",
)

REQUIRED_FIELD_MESSAGE = _("%(label)s is a required field.")
