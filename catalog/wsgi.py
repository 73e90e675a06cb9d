"""
WSGI compatibility layer.

Wraps the ASGI catalog application for deployment on WSGI servers
such as Gunicorn or Waitress, e.g. ``gunicorn catalog.wsgi:application``.
Prefer ASGI deployment (``uvicorn catalog.main:app``) when possible.
"""

from asgiref.wsgi import AsgiToWsgi

from catalog.main import app

application = AsgiToWsgi(app)
