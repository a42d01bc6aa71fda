"""
Endpoint modules.

Each module defines an ``APIRouter`` for one resource (users, events,
files) or for the service‑level routes (statistics, health).  They are
aggregated in ``api/router.py``.
"""
