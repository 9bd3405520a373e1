"""
Client for the zoo greeting server.

Fetches ``GET {base_url}/{animal}`` through a pluggable transport and turns
the outcome into a display string.
"""
from .client import DEFAULT_BASE_URL, ZooClient, new_zoo_client
from .models import AnimalName, FetchResult
from .transport import Transport, TransportFactory

__all__ = [
    "DEFAULT_BASE_URL",
    "AnimalName",
    "FetchResult",
    "Transport",
    "TransportFactory",
    "ZooClient",
    "new_zoo_client",
]
