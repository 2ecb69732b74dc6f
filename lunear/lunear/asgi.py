"""
ASGI config for lunear project.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "lunear.settings")

application = get_asgi_application()
