"""WSGI config for the realty portal project.

Exposes the WSGI application used by ``runserver`` and by production WSGI
servers such as gunicorn, pointed at our settings package.
"""

import os
from django.core.wsgi import get_wsgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_wsgi_application()
