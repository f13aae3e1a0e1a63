"""Rich/JSON output for ServiceResult.

Human mode prints a status line followed by the nested data as indented
``key: value`` lines.  JSON mode dumps the whole result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from annoguide.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from annoguide.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output switches taken from the global CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _print_mapping(console: Console, data: dict[str, Any], depth: int = 1) -> None:
    indent = "  " * depth
    for key, value in data.items():
        if isinstance(value, dict):
            console.print(Text.assemble(indent, (f"{key}:", "app.section")), soft_wrap=True)
            _print_mapping(console, value, depth + 1)
        else:
            console.print(
                Text.assemble(indent, (f"{key}:", "app.key"), " ", str(value)),
                soft_wrap=True,
            )


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        console.print(Text.assemble(("OK", "app.ok"), ": ", (result.op, "app.op")))
        if not settings.quiet:
            _print_mapping(console, result.data)
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(
            Text.assemble(("ERROR", "app.error"), ": ", (result.op, "app.op"), " - ", message),
            soft_wrap=True,
        )
        if result.error and result.error.detail and not settings.quiet:
            _print_mapping(console, result.error.detail)

    if settings.verbose and result.meta:
        console.print(Text("meta:", style="app.section"))
        _print_mapping(console, result.meta)
    return get_output(console).rstrip("\n")
