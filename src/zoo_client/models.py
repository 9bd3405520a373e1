"""
Types shared between the client and its transports.

Includes:
- AnimalName: path segment sent to the server (e.g. "dogs")
- FetchResult: outcome of one GET (status, body, transport error)
"""

from __future__ import annotations
from typing import NamedTuple, Optional

AnimalName = str

# Transport.get(url)
class FetchResult(NamedTuple):
    status_code: int
    body: bytes
    error: Optional[Exception] = None   # set => status_code/body are unused

    @property
    def failed(self) -> bool:
        return self.error is not None

    @classmethod
    def from_error(cls, error: Exception) -> "FetchResult":
        return cls(-1, b"", error)
