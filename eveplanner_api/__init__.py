"""
Top‑level package for the EvePlanner API.

The web application lives in the ``app`` subpackage
(``eveplanner_api.app.main:app``); ``client`` holds a small
``requests`` based client for the same HTTP API.
"""

__all__ = []
