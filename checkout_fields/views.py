import logging

from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.shortcuts import redirect, render, reverse

from .forms import CheckoutFieldsSettingsForm
from .sanitizers import sanitize
from .store import load_settings, save_settings

logger = logging.getLogger(__name__)


@staff_member_required
def settings_page(request):
    """
    GET renders the stored settings.
    POST sanitizes the submission and overwrites the stored settings.
    """
    if request.method == "POST":
        form = CheckoutFieldsSettingsForm(request.POST)
        save_settings(sanitize(form.raw_input()))
        logger.info("Checkout field settings updated by %s", request.user.get_username())
        messages.success(request, "Checkout field settings saved.")
        return redirect(reverse("checkout_fields_settings"))

    form = CheckoutFieldsSettingsForm(checkout_settings=load_settings())

    context = {
        "form": form,
        "billing_rows": list(form.section_rows("billing")),
        "shipping_rows": list(form.section_rows("shipping")),
    }
    return render(request, "checkout_fields/settings.html", context)
