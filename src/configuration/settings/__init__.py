# settings/__init__.py
"""
Selects the settings module from DJANGO_ENV.

    development, dev, local (default)  -> development.py
    production, prod                   -> production.py
    test, testing                      -> test.py
"""

import os
import sys

ENVIRONMENT_ALIASES = {
    "development": "development",
    "dev": "development",
    "local": "development",
    "production": "production",
    "prod": "production",
    "test": "test",
    "testing": "test",
}

CURRENT_ENVIRONMENT = ENVIRONMENT_ALIASES.get(
    os.environ.get("DJANGO_ENV", "development").lower(), "development"
)

if CURRENT_ENVIRONMENT == "production":
    from .production import *  # noqa: F403
elif CURRENT_ENVIRONMENT == "test":
    from .test import *  # noqa: F403
else:
    from .development import *  # noqa: F403

# The autoreloader child process would print this a second time
if CURRENT_ENVIRONMENT == "development" and not os.environ.get("RUN_MAIN"):
    print("[PropertyHub] Using DEVELOPMENT settings", file=sys.stderr)
