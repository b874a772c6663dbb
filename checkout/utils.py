import logging

from django.conf import settings
from django.core.mail import send_mail
from django.template.loader import render_to_string

from .order_meta import get_company_details

logger = logging.getLogger(__name__)


def send_confirmation_email(order, checkout_settings):
    """
    Send the customer a confirmation email for their order (only once).
    Company details are included for company orders.
    """
    # Prevent duplicate emails
    if order.email_sent or not order.email:
        return

    context = {
        "order": order,
        "company_details": get_company_details(order, checkout_settings),
        "contact_email": settings.DEFAULT_FROM_EMAIL,
    }

    subject = render_to_string(
        "checkout/confirmation_emails/confirmation_email_subject.txt",
        context,
    ).strip()

    body = render_to_string(
        "checkout/confirmation_emails/confirmation_email_body.txt",
        context,
    )

    send_mail(
        subject,
        body,
        settings.DEFAULT_FROM_EMAIL,
        [order.email],
    )
    logger.info("Sent confirmation email for order %s", order.order_number)

    # Mark as sent
    order.email_sent = True
    order.save(update_fields=["email_sent"])
