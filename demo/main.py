"""Demo script."""

import asyncio
from datetime import datetime
import json
import logging
from os import getenv
import sys

from httpx import AsyncClient
from rich.console import Console
from rich.table import Table

from did_prism.client import DID_JSON, PrismDidClient
from did_prism.config import ClientConfig
from did_prism.did import parse_did_prism
from did_prism.models import ResolutionOptions


LOG_LEVEL = getenv("LOG_LEVEL", "info")
VERSION_TIME = getenv("VERSION_TIME")


def logging_to_stdout():
    logging.basicConfig(
        stream=sys.stdout,
        level=logging.WARNING,
        format="[%(levelname)s] %(name)s %(message)s",
    )
    logging.getLogger("did_prism").setLevel(LOG_LEVEL.upper())


async def resolve(did: str):
    """Resolve a DID and print its resolution result."""
    logging_to_stdout()
    console = Console(width=120)

    parsed = parse_did_prism(did)
    options = ResolutionOptions(
        versionTime=datetime.fromisoformat(VERSION_TIME) if VERSION_TIME else None,
    )

    config = ClientConfig()
    async with AsyncClient(timeout=30) as http:
        client = PrismDidClient(http, config)
        result = await client.resolve_did_full(did, options)
        document = await client.resolve_did_document(
            did, options, accept_type=DID_JSON
        )

    console.print_json(json.dumps(result.serialize()))

    table = Table(title=parsed.short_form, show_header=True, header_style="bold")
    table.add_column("Verification Method")
    table.add_column("Type")
    table.add_column("Curve")
    for method in document.verificationMethod or []:
        curve = method.publicKeyJwk.crv if method.publicKeyJwk else ""
        table.add_row(method.id, method.type, curve)
    console.print(table)


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(f"Usage: {sys.argv[0]} <did:prism>", file=sys.stderr)
        sys.exit(1)

    asyncio.run(resolve(sys.argv[1]))
