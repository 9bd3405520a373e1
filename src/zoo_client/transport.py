from __future__ import annotations
from typing import Protocol, runtime_checkable

from .models import FetchResult

@runtime_checkable
class Transport(Protocol):
    """A single, unretried HTTP GET. Network failures come back in ``FetchResult.error``."""

    def get(self, url: str) -> FetchResult:
        ...

@runtime_checkable
class TransportFactory(Protocol):
    """No-argument constructor for a Transport."""

    def create(self) -> Transport:
        ...
