import logging

from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect, render, reverse

from checkout_fields.assembler import DEFAULT_SECTION_TITLES, section_titles
from checkout_fields.constants import BILLING, SHIPPING
from checkout_fields.store import load_settings

from .forms import CheckoutForm
from .models import Order
from .order_meta import get_company_details, save_order_meta
from .utils import send_confirmation_email

logger = logging.getLogger(__name__)


def checkout(request):
    """
    GET:
      - Render the checkout form built from the stored field settings
    POST:
      - Validate, create the Order + company metadata, then redirect to
        checkout_success (order_number)
    """
    checkout_settings = load_settings()

    if request.method == "POST":
        form = CheckoutForm(request.POST, checkout_settings=checkout_settings)

        if form.is_valid():
            ships_separately = form.ships_to_different_address()
            billing = form.section_data(BILLING)

            order = Order(
                email=billing.get("billing_email") or "",
                billing_address=billing,
                shipping_address=form.section_data(SHIPPING) if ships_separately else {},
                ship_to_different_address=ships_separately,
            )
            save_order_meta(order, request.POST, checkout_settings)
            order.save()
            logger.info("Created order %s", order.order_number)

            send_confirmation_email(order, checkout_settings)

            return redirect(reverse("checkout_success", args=[order.order_number]))

        messages.error(
            request,
            "There was an error with your form. Please double check your information.",
        )
    else:
        form = CheckoutForm(checkout_settings=checkout_settings)

    titles = {**DEFAULT_SECTION_TITLES, **section_titles(checkout_settings)}

    context = {
        "form": form,
        "sections": [
            {
                "name": section,
                "title": titles[section],
                "fields": form.section_fields(section),
            }
            for section in form.sections
        ],
        "checkout_settings": checkout_settings,
    }
    return render(request, "checkout/checkout.html", context)


def checkout_success(request, order_number):
    """
    Success page shown after the Order is created.
    """
    order = get_object_or_404(Order, order_number=order_number)

    messages.success(
        request,
        f"Order successfully processed! Your order number is {order_number}.",
    )

    context = {
        "order": order,
        "company_details": get_company_details(order, load_settings()),
    }
    return render(request, "checkout/checkout_success.html", context)
