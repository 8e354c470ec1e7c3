"""
Celery tasks for the propertyhub application.
"""
