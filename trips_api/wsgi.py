"""
WSGI compatibility layer.

Wraps the ASGI FastAPI application for WSGI servers such as Gunicorn or
Waitress. Prefer ASGI deployment (uvicorn trips_api.main:app) when possible.
"""

from asgiref.wsgi import AsgiToWsgi

from trips_api.main import app

application = AsgiToWsgi(app)
