"""
Celery application for PropertyHub.

Workers start with ``celery -A configuration worker -Q notifications`` and run
the notification email task. Broker and routing come from the CELERY_* names
in the active settings module.
"""

import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "configuration.settings")

app = Celery("propertyhub")
app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks(["propertyhub.tasks"], related_name="tasks")
