"""
Application package initializer.

The API is split into a few small pieces: ``core`` holds settings,
logging, errors and the in‑memory store; ``schemas`` defines the JSON
payloads; ``services`` implements the vehicle and booking operations;
``api`` exposes them as HTTP routes.
"""

from .main import app  # noqa: F401
