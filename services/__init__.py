"""
Watson service clients.

Exports the shared error type and base client.
"""

from services.base import ServiceError, WatsonService

__all__ = ["ServiceError", "WatsonService"]
