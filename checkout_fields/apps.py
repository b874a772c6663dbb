from django.apps import AppConfig


class CheckoutFieldsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "checkout_fields"
    verbose_name = "Checkout fields"
