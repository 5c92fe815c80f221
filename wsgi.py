"""
WSGI entry point for production deployment.

Point the WSGI server at ``wsgi:application``, e.g.:

    gunicorn wsgi:application

Set DATABASE_URL and SECRET_KEY in the environment before starting.
"""

import os

os.environ.setdefault('FLASK_CONFIG', 'production')

from league_api import create_app  # noqa: E402

application = create_app(os.environ['FLASK_CONFIG'])
