"""
Top‑level package for the Saloon Registry API.

This file makes ``saloon_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``saloon_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
