"""Example of how to use the fragments client."""

import argparse
import logging
import os

from rich import pretty, print_json
from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

from pyfragments import BearerTokenAuth, ClientConfig, FragmentClient
from pyfragments.services.fragments import CollectionView, StructuredPayload

install(show_locals=True)
pretty.install()

console = Console()


def main() -> None:
    p = argparse.ArgumentParser(description="Fragments client walkthrough")
    p.add_argument("--api-url", default=os.getenv("PYFRAGMENTS_API_URL"))
    p.add_argument("--token", default=os.getenv("PYFRAGMENTS_TOKEN"))
    p.add_argument("--verbose", action="store_true", default=False)
    args = p.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console)],
    )

    client = FragmentClient(ClientConfig.from_env(args.api_url))
    auth = BearerTokenAuth(args.token)

    console.rule("Server")
    console.print(client.health())

    console.rule("Create")
    md = client.create(auth, "# Hi\n\nThis is *markdown*.", "text/markdown")
    data = client.create(auth, {"hello": "world", "n": 1}, "application/json")
    console.print(md)
    console.print(data)

    console.rule("Read")
    console.print(client.read(auth, md.id))
    payload = client.read(auth, data.id)
    if isinstance(payload, StructuredPayload):
        print_json(data=payload.value)

    console.rule("Convert")
    for target in CollectionView.conversions_for(md):
        console.print(target, client.read_as(auth, md.id, target))

    console.rule("List")
    for entry in CollectionView.entries(client.list(auth)):
        console.print(entry.fragment.id, entry.fragment.content_type, entry.conversions)

    console.rule("Cleanup")
    console.print(client.delete(auth, md.id))
    console.print(client.delete(auth, data.id))


if __name__ == "__main__":
    main()
