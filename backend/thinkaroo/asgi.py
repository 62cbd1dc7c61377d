"""ASGI entry for external servers, e.g. ``uvicorn thinkaroo.asgi:app``."""
from .main import create_app

app = create_app()
