"""
ASGI entry point for the example app.

Run with:
    uvicorn example.asgi:app --port 8844
"""

from example.app import create_app

app = create_app()
