"""Command: decode a local JSON document as an entity."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from annoguide.commands._base import AppCommand

if TYPE_CHECKING:
    from annoguide.commands._context import AppContext


@click.command(
    cls=AppCommand,
    examples="""\
  annoguide decode user user.json
  annoguide decode address --strategy construct address.json
  cat post.json | annoguide --json decode post""",
)
@click.argument("kind", type=click.Choice(["user", "address", "post"]))
@click.argument("source", type=click.File("rb"), default="-")
@click.option(
    "--strategy",
    type=click.Choice(["validate", "construct"]),
    default=None,
    help="Decode strategy (default: [codec] strategy).",
)
@click.pass_obj
def decode(app: AppContext, kind: str, source: IO[bytes], strategy: str | None) -> None:
    """Decode SOURCE (file or stdin) as KIND and check its constraints."""
    from annoguide.services.decode import DecodeService

    name = getattr(source, "name", None)
    result = DecodeService(app.settings).decode(
        kind,
        source.read(),
        strategy=strategy,
        source=name if isinstance(name, str) and name != "<stdin>" else None,
    )
    app.emit(result)
