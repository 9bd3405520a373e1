"""
Scripted Transport/TransportFactory for exercising ZooClient without a server.

Results are keyed by URL; every call is recorded so tests can assert on the
exact URLs fetched and on how often the factory was asked for a transport.
"""
from __future__ import annotations
from typing import Dict, List, Mapping, Optional

from .models import FetchResult

def ok(body: str | bytes, status_code: int = 200) -> FetchResult:
    if isinstance(body, str):
        body = body.encode("utf-8")
    return FetchResult(status_code, body)

def failure(error: Exception | str) -> FetchResult:
    if isinstance(error, str):
        error = ConnectionError(error)
    return FetchResult.from_error(error)

class ScriptedTransport:

    def __init__(self, responses: Optional[Mapping[str, FetchResult]] = None, default: Optional[FetchResult] = None):
        self.responses: Dict[str, FetchResult] = dict(responses or {})
        self.default = default
        self.calls: List[str] = []

    def get(self, url: str) -> FetchResult:
        self.calls.append(url)
        if url in self.responses:
            return self.responses[url]
        if self.default is not None:
            return self.default
        return FetchResult.from_error(LookupError(f"no scripted response for {url}"))

class ScriptedTransportFactory:

    def __init__(self, transport: ScriptedTransport):
        self.transport = transport
        self.created = 0

    def create(self) -> ScriptedTransport:
        self.created += 1
        return self.transport
