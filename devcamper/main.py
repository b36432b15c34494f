"""
ASGI entry point: ``uvicorn devcamper.main:app``.
"""

from devcamper.factory import create_app

app = create_app()
