"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from readable.api import app

    uvicorn readable.api:app --reload
"""

from readable.api.app import app

__all__ = ["app"]
