from django.db import models


class CheckoutOption(models.Model):
    """A named, JSON-encoded settings value."""

    name = models.CharField(max_length=191, unique=True)
    value = models.JSONField(default=dict, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.name
