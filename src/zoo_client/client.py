"""
ZooClient: turns ``GET {base_url}/{animal}`` outcomes into display strings.

- Obtains its Transport from a factory exactly once, at construction
- One unretried transport call per read_message
- Transport failures become "" (a [warn] line goes to stderr)
- Any status code passes its body through untranslated, 404 "Not found" included
"""
from __future__ import annotations
import sys

from .models import AnimalName
from .transport import Transport, TransportFactory

DEFAULT_BASE_URL = "http://localhost:8080"

class ZooClient:

    def __init__(self, factory: TransportFactory, base_url: str = DEFAULT_BASE_URL):
        self.base_url = base_url.rstrip("/")
        self._transport: Transport = factory.create()

    @property
    def transport(self) -> Transport:
        return self._transport

    def url_for(self, animal: AnimalName) -> str:
        return f"{self.base_url}/{animal}"

    def read_message(self, animal: AnimalName) -> str:
        url = self.url_for(animal)
        result = self._transport.get(url)
        if result.failed:
            print(f"[warn] GET {url} failed: {result.error}", file=sys.stderr)
            return ""
        return result.body.decode("utf-8", errors="replace")

def new_zoo_client(factory: TransportFactory, base_url: str = DEFAULT_BASE_URL) -> ZooClient:
    return ZooClient(factory, base_url=base_url)
