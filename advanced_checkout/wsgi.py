"""
WSGI config for the Advanced Checkout project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "advanced_checkout.settings")

application = get_wsgi_application()
