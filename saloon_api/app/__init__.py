"""
Application package initializer.

The project is split into a few small pieces: ``core`` holds
configuration, logging, storage and security helpers; ``schemas``
holds the Pydantic models exchanged with clients and persisted in the
store; ``services`` holds the business rules; ``api`` exposes the
services over versioned HTTP routes.
"""

from .main import app  # noqa: F401
