"""
Command-line entrypoint: ``zoo-client dogs monkeys``.

- Parses CLI args and env config
- Builds one HttpTransportFactory and one ZooClient
- Prints ``animal: message`` per animal to stdout

Exits 1 when no animal produced a message, 2 on a bad transport setting.
"""
from __future__ import annotations
import sys
from typing import Optional, Sequence

from .client import ZooClient
from .config import parse_args
from .http_client import HttpTransportFactory

def run(args) -> int:
    factory = HttpTransportFactory(args.transport, args.connect_timeout, args.read_timeout)
    client = ZooClient(factory, base_url=args.base_url)
    try:
        messages = [(animal, client.read_message(animal)) for animal in args.animals]
    finally:
        close = getattr(client.transport, "close", None)
        if close is not None:
            close()
    for animal, message in messages:
        print(f"{animal}: {message}")
    return 0 if any(message for _, message in messages) else 1

def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    try:
        sys.exit(run(args))
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)
    except KeyboardInterrupt:
        print("Aborted.", file=sys.stderr)
        sys.exit(130)
