"""
Celery application for the delivery brokerage backend.

``DJANGO_SETTINGS_MODULE`` is set before the app is instantiated so the
worker reads Django settings (``CELERY_`` prefix).  The only scheduled work
is publishing committed outbox events to in-process handlers.
"""

import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

app = Celery("brokerage")

# Reads Django settings with the CELERY_ prefix
app.config_from_object("django.conf:settings", namespace="CELERY")

# Discovers tasks.py in every installed app
app.autodiscover_tasks()
