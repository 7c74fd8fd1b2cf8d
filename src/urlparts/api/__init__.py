"""
API serving layer.

Exposes URL and domain decomposition over HTTP.
"""

from urlparts.api.models import DomainResponse, UrlPartsResponse
from urlparts.api.server import app

__all__ = [
    "DomainResponse",
    "UrlPartsResponse",
    "app",
]
