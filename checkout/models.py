import uuid

from django.db import models


class Order(models.Model):
    order_number = models.CharField(max_length=32, null=False, editable=False)

    email = models.EmailField(max_length=254, null=False, blank=True, default="")

    # Checkout fields are configurable, so submitted values are kept per section
    billing_address = models.JSONField(default=dict, blank=True)
    shipping_address = models.JSONField(default=dict, blank=True)
    ship_to_different_address = models.BooleanField(default=False)

    # Extension data, keys prefixed with "_" (e.g. "_billing_is_company")
    metadata = models.JSONField(default=dict, blank=True)

    email_sent = models.BooleanField(default=False)

    date = models.DateTimeField(auto_now_add=True)

    def _generate_order_number(self):
        """Generate a random, unique order number using UUID."""
        return uuid.uuid4().hex.upper()

    def get_meta(self, key, default=None):
        return self.metadata.get(key, default)

    def update_meta(self, key, value):
        """Set a metadata value. Saved with the order."""
        self.metadata[key] = value

    def save(self, *args, **kwargs):
        """Set order number if not set."""
        if not self.order_number:
            self.order_number = self._generate_order_number()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.order_number
