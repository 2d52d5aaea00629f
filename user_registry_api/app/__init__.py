"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, errors and the
in‑memory record store), ``schemas`` (Pydantic models), ``services``
(validation and handler logic) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
