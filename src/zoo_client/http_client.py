# zoo_client/http_client.py
from __future__ import annotations
import sys, uuid
from typing import Optional

import httpx
import requests

from .models import FetchResult
from .transport import Transport

TRANSPORT_KINDS = ("httpx", "requests")

class HttpxTransport:
    """
    - Blocking GET on a reusable httpx.Client with:
      - httpx timeouts
      - default headers + X-Request-Id per request
      - no retries; network errors are returned, not raised
      - any status code is a successful fetch
    """

    def __init__(
        self,
        connect_timeout: float = 5.0,
        read_timeout: float = 30.0,
        *,
        default_headers: Optional[dict[str, str]] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.timeout = httpx.Timeout(
            connect=connect_timeout,
            read=read_timeout,
            write=read_timeout,
            pool=read_timeout,
        )
        self.default_headers = {"Accept": "text/plain", **(default_headers or {})}
        self._client = client or httpx.Client(timeout=self.timeout, headers=self.default_headers)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self) -> None:
        self._client.close()

    def get(self, url: str) -> FetchResult:
        req_id = str(uuid.uuid4())
        try:
            resp = self._client.get(url, headers={"X-Request-Id": req_id})
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            print(f"[req#{req_id}] GET {url} failed: network: {e}", file=sys.stderr)
            return FetchResult.from_error(e)
        return FetchResult(resp.status_code, resp.content)

class RequestsTransport:
    """Same contract as HttpxTransport on top of a requests.Session."""

    def __init__(
        self,
        connect_timeout: float = 5.0,
        read_timeout: float = 30.0,
        *,
        default_headers: Optional[dict[str, str]] = None,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = (connect_timeout, read_timeout)
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "text/plain", **(default_headers or {})})

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self) -> None:
        self.session.close()

    def get(self, url: str) -> FetchResult:
        req_id = str(uuid.uuid4())
        try:
            resp = self.session.get(url, timeout=self.timeout, headers={"X-Request-Id": req_id})
        except requests.RequestException as e:
            print(f"[req#{req_id}] GET {url} failed: network: {e}", file=sys.stderr)
            return FetchResult.from_error(e)
        return FetchResult(resp.status_code, resp.content)

class HttpTransportFactory:
    """Builds a network-backed transport of the configured kind on each create()."""

    def __init__(self, kind: str = "httpx", connect_timeout: float = 5.0, read_timeout: float = 30.0):
        if kind not in TRANSPORT_KINDS:
            raise ValueError(f"unknown transport kind {kind!r}; expected one of {', '.join(TRANSPORT_KINDS)}")
        self.kind = kind
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout

    def create(self) -> Transport:
        if self.kind == "requests":
            return RequestsTransport(self.connect_timeout, self.read_timeout)
        return HttpxTransport(self.connect_timeout, self.read_timeout)
