"""
HTTP API package.

``router.py`` exposes a top‑level ``router`` that bundles the
per‑resource routers from ``endpoints``; ``main`` mounts it under
``/api``.  Request‑scoped dependencies live in ``deps.py``.
"""
