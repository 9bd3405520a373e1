from __future__ import annotations
import argparse, os
from typing import Optional, Sequence

from .client import DEFAULT_BASE_URL
from .http_client import TRANSPORT_KINDS

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="zoo-client", description="Fetch greetings from the zoo server")
    p.add_argument("animals", nargs="+", help="animal path segments, e.g. dogs monkeys")
    p.add_argument("--base-url", default=os.getenv("ZOO_BASE_URL", DEFAULT_BASE_URL))
    p.add_argument("--transport", choices=TRANSPORT_KINDS, default=os.getenv("ZOO_TRANSPORT", "httpx"))
    p.add_argument("--connect-timeout", type=float, default=float(os.getenv("CONNECT_TIMEOUT", "5")))
    p.add_argument("--read-timeout", type=float, default=float(os.getenv("READ_TIMEOUT", "30")))
    return p

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
