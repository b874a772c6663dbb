from django.contrib import admin
from django.utils.html import format_html_join

from checkout_fields.store import load_settings

from .models import Order
from .order_meta import get_company_details


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("order_number", "date", "email", "ship_to_different_address", "email_sent")
    list_filter = ("ship_to_different_address", "email_sent")
    search_fields = ("order_number", "email")
    ordering = ("-date",)
    readonly_fields = ("order_number", "date", "company_information")

    @admin.display(description="Company information")
    def company_information(self, obj):
        details = get_company_details(obj, load_settings())
        if not details:
            return "-"
        return format_html_join("", "<p><strong>{}:</strong> {}</p>", details)
